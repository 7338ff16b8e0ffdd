"""Blob store cache implementations.

Backing caches and the local read-through accelerator, all implementing
the CacheCapability protocol.
"""

from .memory_cache import MemoryCache, MemoryEntry, create_memory_cache
from .fixed_lru_cache import FixedLruCache, create_fixed_lru_cache
from .redis_cache import RedisCache

__all__ = [
    "MemoryCache",
    "MemoryEntry",
    "create_memory_cache",
    "FixedLruCache",
    "create_fixed_lru_cache",
    "RedisCache",
]
