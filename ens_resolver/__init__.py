from ens_resolver.cache import CacheEntry, ResolutionCache  # NOQA
from ens_resolver.client import ChainClient, ClientFactory, Web3ChainClient, build_web3_client  # NOQA
from ens_resolver.codec import decode_result, encode_call  # NOQA
from ens_resolver.constants import (  # NOQA
    ADDR_FN_SIG,
    REGISTRY_ADDRESSES,
    RESOLVER_FN_SIG,
    TTL_FN_SIG,
    registry_address,
)
from ens_resolver.exceptions import (  # NOQA
    ErrorKind,
    InvalidInput,
    NoResolver,
    ResolutionFailed,
    ResolverError,
    TransportError,
    UnsupportedNetwork,
)
from ens_resolver.options import ResolutionOptions  # NOQA
from ens_resolver.resolver import Resolver, default_resolver, resolution_cache, resolve, resolve_async  # NOQA
from ens_resolver.utils.namehash import namehash  # NOQA
