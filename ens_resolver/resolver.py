import re
from typing import Mapping, Union

import gevent
import structlog
from eth_utils import is_address, to_checksum_address, to_int

from ens_resolver.cache import ResolutionCache
from ens_resolver.client import ChainClient, ClientFactory
from ens_resolver.codec import decode_result, encode_call
from ens_resolver.constants import (
    ADDR_FN_SIG,
    ADDRESS_BYTES,
    RESOLVER_FN_SIG,
    TTL_BYTES,
    TTL_FN_SIG,
    registry_address,
)
from ens_resolver.exceptions import InvalidInput, NoResolver, ResolutionFailed, TransportError, UnsupportedNetwork
from ens_resolver.options import ResolutionOptions
from ens_resolver.utils.namehash import namehash
from ens_resolver.utils.typing import BlockSpecification, ChecksumAddress, HexStr, Node, Optional, Selector

log = structlog.get_logger(__name__)

ZERO_ADDRESS_RE = re.compile(r"^0x0+$")

OptionsType = Optional[Union[ResolutionOptions, Mapping]]


class Resolver:
    """
    Resolves ENS names to checksummed addresses.

    A resolution asks the chain registry for the resolver of the name's node, then asks that resolver for the
    address, and caches the answer for the TTL of the node. Every remote call goes through a ChainClient, so under
    gevent many resolutions can be in flight at once; they share `cache` and the clients of `client_factory`.
    """

    def __init__(self, cache: ResolutionCache = None, client_factory: ClientFactory = None):
        self.cache = cache if cache is not None else ResolutionCache()
        self.client_factory = client_factory if client_factory is not None else ClientFactory()

    def resolve(self, name: str, options: OptionsType = None) -> ChecksumAddress:
        """
        Resolve a name, or checksum it if it already is an address.
        :param name: ENS name, case insensitive
        :param options: ResolutionOptions, or a dict with the same keys
        :return: the checksummed address bound to the name
        """
        if not isinstance(name, str):
            raise InvalidInput("ENS name must be a string")
        options = self._options(options)

        name = name.lower()
        if name.startswith("0x") and is_address(name):
            return to_checksum_address(name)

        client = self.client_factory.get(options)
        node = namehash(name)
        chain_id = client.get_chain_id()
        registry = registry_address(chain_id)
        if registry is None:
            raise UnsupportedNetwork(chain_id)

        if not options.pinned:
            cached = self.cache.get(chain_id, node)
            if cached is not None:
                log.debug("Cache hit", name=name, chain_id=chain_id, address=cached.address)
                return cached.address

        resolver = decode_result(
            self._call(client, registry, RESOLVER_FN_SIG, node, options.block),
            ADDRESS_BYTES,
        )
        if ZERO_ADDRESS_RE.match(resolver) or not is_address(resolver):
            raise NoResolver(name)

        address = decode_result(
            self._call(client, resolver, ADDR_FN_SIG, node, options.block),
            ADDRESS_BYTES,
        )
        if not is_address(address):
            raise ResolutionFailed(name)
        address = to_checksum_address(address)

        ttl = options.ttl
        if ttl is None:
            ttl = self.cache.clamp_ttl(
                self._remote_ttl(client, registry, node, options.block) * 1000
            )

        if ttl > 0 and not options.pinned:
            self.cache.put(chain_id, node, address, ttl)

        log.debug(
            "Resolved name",
            name=name,
            chain_id=chain_id,
            resolver=resolver,
            address=address,
            ttl=ttl,
            block=options.block,
        )
        return address

    def resolve_async(self, name: str, options: OptionsType = None) -> gevent.Greenlet:
        """
        Spawn the resolution in its own greenlet.
        get() on the returned greenlet gives the address or raises the resolution error.
        Web3ChainClient calls only interleave once the application has called gevent.monkey.patch_all().
        """
        return gevent.spawn(self.resolve, name, options)

    @staticmethod
    def _options(options: OptionsType) -> ResolutionOptions:
        if options is None:
            return ResolutionOptions()
        if isinstance(options, ResolutionOptions):
            return options.validate()
        if isinstance(options, Mapping):
            return ResolutionOptions.from_dict(options)
        raise InvalidInput(f"Unsupported resolution options: {options!r}")

    @staticmethod
    def _call(
        client: ChainClient,
        contract: str,
        selector: Selector,
        node: Node,
        block: Optional[BlockSpecification],
    ) -> HexStr:
        transaction = {"to": contract, "data": encode_call(selector, node), "value": 0}
        return client.call(transaction, block)

    def _remote_ttl(self, client: ChainClient, registry: str, node: Node, block) -> int:
        raw = decode_result(self._call(client, registry, TTL_FN_SIG, node, block), TTL_BYTES)
        if raw == "0x":
            raise TransportError(f"Empty TTL result for node {node}")
        return to_int(hexstr=raw)


default_resolver = Resolver()
resolution_cache = default_resolver.cache


def resolve(name: str, options: OptionsType = None) -> ChecksumAddress:
    return default_resolver.resolve(name, options)


def resolve_async(name: str, options: OptionsType = None) -> gevent.Greenlet:
    return default_resolver.resolve_async(name, options)
