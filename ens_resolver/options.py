from typing import Any, Mapping, NamedTuple, Tuple

from ens_resolver.exceptions import InvalidInput
from ens_resolver.utils.typing import BlockSpecification, Optional

BLOCK_TAGS = ("latest", "earliest", "pending", "safe", "finalized")


class ResolutionOptions(NamedTuple):
    """
    Options of a single resolution.

    client: pre-built chain client, used as is
    provider: pre-built web3 provider to build a client from
    uri, network, credential: how to build a client when neither of the above is given
    block: pin every contract call to this block; pinned resolutions bypass the cache
    ttl: caching time in milliseconds, replaces the TTL read from the registry
    """

    client: Any = None
    provider: Any = None
    uri: Optional[str] = None
    network: Optional[str] = None
    credential: Optional[str] = None
    block: Optional[BlockSpecification] = None
    ttl: Optional[int] = None

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "ResolutionOptions":
        unknown = set(options) - set(cls._fields)
        if unknown:
            raise InvalidInput(f"Unknown resolution options: {', '.join(sorted(unknown))}")
        return cls(**options).validate()

    def validate(self) -> "ResolutionOptions":
        if self.ttl is not None and (isinstance(self.ttl, bool) or not isinstance(self.ttl, (int, float))):
            raise InvalidInput(f"ttl must be a number, got {self.ttl!r}")
        if self.block is not None:
            valid_block = (
                isinstance(self.block, int) and not isinstance(self.block, bool) and self.block >= 0
            ) or (isinstance(self.block, str) and (self.block in BLOCK_TAGS or self.block.startswith("0x")))
            if not valid_block:
                raise InvalidInput(f"block must be a block number or tag, got {self.block!r}")
        for field in ("uri", "network", "credential"):
            value = getattr(self, field)
            if value is not None and not isinstance(value, str):
                raise InvalidInput(f"{field} must be a string, got {value!r}")
        return self

    @property
    def pinned(self) -> bool:
        return self.block is not None

    def construction_key(self) -> Tuple:
        """ The options that determine which chain client gets built """
        return self.provider, self.uri, self.network, self.credential
