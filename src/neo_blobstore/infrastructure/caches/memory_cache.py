"""Memory cache.

ONLY in-memory implementation - key-value storage in process memory for
development, testing and single-instance deployments.

Following maximum separation architecture - one file = one purpose.
"""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


@dataclass
class MemoryEntry:
    """Stored value with its absolute expiry time."""

    value: Any
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class MemoryCache:
    """Thread-safe in-memory cache.

    Features:
    - TTL expiration handling (lazy, on access)
    - Hit/miss/save/delete statistics
    - Injectable clock for deterministic tests
    """

    implementation = "memory"

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """Initialize memory cache.

        Args:
            clock: Monotonic time source, defaults to time.monotonic
        """
        self._entries: "OrderedDict[str, MemoryEntry]" = OrderedDict()
        self._clock = clock or time.monotonic
        self._lock = threading.RLock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "saves": 0,
            "deletes": 0,
            "expired_cleanups": 0,
        }

    def _get_live_entry(self, key: str) -> Optional[MemoryEntry]:
        """Get entry if present and not expired, removing it otherwise."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._clock()):
            del self._entries[key]
            self._stats["expired_cleanups"] += 1
            return None

        return entry

    def _touch(self, key: str) -> None:
        """Hook for recency tracking on access."""

    def contains(self, key: str) -> bool:
        with self._lock:
            return self._get_live_entry(key) is not None

    def fetch(self, key: str) -> Any:
        """Get stored value or None if absent or expired."""
        with self._lock:
            entry = self._get_live_entry(key)
            if entry is None:
                self._stats["misses"] += 1
                return None

            self._touch(key)
            self._stats["hits"] += 1
            return entry.value

    def save(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store value, without expiry when ttl is 0 or less."""
        expires_at = self._clock() + ttl if ttl and ttl > 0 else None

        with self._lock:
            if key in self._entries:
                del self._entries[key]

            self._entries[key] = MemoryEntry(value=value, expires_at=expires_at)
            self._stats["saves"] += 1
            return True

    def delete(self, key: str) -> bool:
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                self._stats["deletes"] += 1
                return True
            return False

    def keys(self) -> List[str]:
        """Get all non-expired keys."""
        with self._lock:
            self._cleanup_expired()
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def cleanup_expired(self) -> int:
        """Remove all expired entries."""
        with self._lock:
            return self._cleanup_expired()

    def _cleanup_expired(self) -> int:
        now = self._clock()
        expired_keys = [key for key, entry in self._entries.items() if entry.is_expired(now)]

        for key in expired_keys:
            del self._entries[key]

        self._stats["expired_cleanups"] += len(expired_keys)
        return len(expired_keys)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            self._cleanup_expired()

            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / total_requests * 100) if total_requests > 0 else 0.0

            return {
                **self._stats,
                "total_keys": len(self._entries),
                "total_requests": total_requests,
                "hit_rate_percent": hit_rate,
                "implementation": self.implementation,
            }

    def __len__(self) -> int:
        with self._lock:
            self._cleanup_expired()
            return len(self._entries)


def create_memory_cache(clock: Optional[Callable[[], float]] = None) -> MemoryCache:
    """Create memory cache."""
    return MemoryCache(clock=clock)
