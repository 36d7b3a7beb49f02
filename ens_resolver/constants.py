from ens_resolver.utils.typing import ChecksumAddress, Optional, Selector

ENS_REGISTRY_ADDRESS = ChecksumAddress("0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e")

# The registry is deployed at the same address on every supported network
REGISTRY_ADDRESSES = {
    "1": ENS_REGISTRY_ADDRESS,
    "3": ENS_REGISTRY_ADDRESS,
    "4": ENS_REGISTRY_ADDRESS,
    "42": ENS_REGISTRY_ADDRESS,
    "6824": ENS_REGISTRY_ADDRESS,
}

# resolver(bytes32) on the registry
RESOLVER_FN_SIG = Selector("0x0178b8bf")
# addr(bytes32) on a resolver
ADDR_FN_SIG = Selector("0x3b3b57de")
# ttl(bytes32) on the registry
TTL_FN_SIG = Selector("0x16a25cbd")

ADDRESS_BYTES = 20
TTL_BYTES = 8

ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"
EMPTY_NODE = b"\x00" * 32


def registry_address(chain_id) -> Optional[ChecksumAddress]:
    """ Registry contract for a chain, or None when the chain is not supported """
    return REGISTRY_ADDRESSES.get(str(chain_id))
