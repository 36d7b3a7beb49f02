from typing import Dict, NamedTuple

import structlog

from ens_resolver import settings
from ens_resolver.utils import now_ms
from ens_resolver.utils.typing import ChecksumAddress, Clock, Milliseconds, Node, Optional

log = structlog.get_logger(__name__)


class CacheEntry(NamedTuple):
    address: ChecksumAddress
    # absolute timestamp in milliseconds
    expires: Milliseconds


class ResolutionCache:
    """
    Resolved addresses per chain and node, each one valid until its expiry timestamp.

    Expired entries are not removed, they are reported as misses and overwritten by the next put.
    The cache is shared by every resolution running in the process and is not locked: two
    concurrent misses for the same key both write it and the last writer wins.

    `min_ttl` and `max_ttl` bound the TTLs read from the registry. Changing them only affects
    entries written afterwards.
    """

    def __init__(
        self,
        min_ttl: int = settings.DEFAULT_MIN_TTL,
        max_ttl: int = settings.DEFAULT_MAX_TTL,
        clock: Clock = now_ms,
    ):
        self.min_ttl = min_ttl
        self.max_ttl = max_ttl
        self.clock = clock
        self.entries: Dict[str, Dict[str, CacheEntry]] = dict()

    def get(self, chain_id, node: Node) -> Optional[CacheEntry]:
        entry = self.entries.get(str(chain_id), {}).get(str(node))
        if entry is None or entry.expires <= self.clock():
            return None
        return entry

    def put(self, chain_id, node: Node, address: ChecksumAddress, ttl: int) -> CacheEntry:
        entry = CacheEntry(address=address, expires=Milliseconds(self.clock() + ttl))
        self.entries.setdefault(str(chain_id), {})[str(node)] = entry
        log.debug("Cached resolution", chain_id=chain_id, node=node, address=address, ttl=ttl)
        return entry

    def clamp_ttl(self, ttl: int) -> int:
        return min(max(ttl, self.min_ttl), self.max_ttl)

    def invalidate(self, chain_id, node: Node = None):
        """ Drop the entry of a node, or every entry of a chain when no node is given """
        if node is None:
            self.entries.pop(str(chain_id), None)
        else:
            self.entries.get(str(chain_id), {}).pop(str(node), None)

    def clear(self):
        self.entries.clear()

    def __len__(self) -> int:
        return sum(len(nodes) for nodes in self.entries.values())
