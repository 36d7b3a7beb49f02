from collections import defaultdict

import pytest

from ens_resolver.cache import ResolutionCache
from ens_resolver.client import ClientFactory
from ens_resolver.resolver import Resolver
from ens_resolver.tests.unit.fakes import FakeChainClient, FakeClock


@pytest.fixture
def chain():
    client = FakeChainClient()
    client.register("foo.eth", ttl=7200)
    return client


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def resolution_cache(clock):
    return ResolutionCache(clock=clock)


@pytest.fixture
def built_clients():
    return defaultdict(int)


@pytest.fixture
def client_factory(chain, built_clients):
    def build(provider=None, uri=None, network=None, credential=None):
        built_clients[(provider, uri, network, credential)] += 1
        return chain

    return ClientFactory(build=build)


@pytest.fixture
def resolver(resolution_cache, client_factory):
    return Resolver(cache=resolution_cache, client_factory=client_factory)
