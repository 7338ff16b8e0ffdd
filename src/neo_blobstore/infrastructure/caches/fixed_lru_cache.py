"""Fixed-capacity LRU cache.

ONLY bounded local caching - least recently used eviction over the
memory cache, used as the blob store's read-through accelerator.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Callable, Dict, Optional

from .memory_cache import MemoryCache


class FixedLruCache(MemoryCache):
    """In-memory cache holding at most ``capacity`` entries.

    Reads and writes mark a key as most recently used; saving a new key
    at capacity evicts the least recently used one. Values are kept as
    given, never serialized.
    """

    implementation = "fixed_lru"

    def __init__(self, capacity: int = 500, clock: Optional[Callable[[], float]] = None):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("LRU capacity must be a positive integer")

        super().__init__(clock=clock)
        self._capacity = capacity
        self._stats["evictions"] = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def _touch(self, key: str) -> None:
        self._entries.move_to_end(key)

    def contains(self, key: str) -> bool:
        with self._lock:
            if self._get_live_entry(key) is None:
                return False
            self._touch(key)
            return True

    def save(self, key: str, value: Any, ttl: int = 0) -> bool:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._capacity:
                # Expired entries go first, then the oldest
                self._cleanup_expired()
                while len(self._entries) >= self._capacity:
                    self._entries.popitem(last=False)
                    self._stats["evictions"] += 1

            return super().save(key, value, ttl)

    def get_stats(self) -> Dict[str, Any]:
        stats = super().get_stats()
        stats["capacity"] = self._capacity
        return stats


def create_fixed_lru_cache(
    capacity: int = 500,
    clock: Optional[Callable[[], float]] = None
) -> FixedLruCache:
    """Create fixed-capacity LRU cache."""
    return FixedLruCache(capacity=capacity, clock=clock)
