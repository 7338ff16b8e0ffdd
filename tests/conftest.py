"""Pytest configuration and fixtures for neo-blobstore tests."""

import pytest
from unittest.mock import MagicMock

from neo_blobstore import BlobStore, CacheFactory, FixedLruCache, MemoryCache


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture(autouse=True)
def reset_cache_factory():
    """Drop the shared cache factory between tests."""
    CacheFactory.clear_instance()
    yield
    CacheFactory.clear_instance()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mock_cache():
    """Mock cache capability with an empty backing store."""
    cache = MagicMock()
    cache.contains.return_value = False
    cache.fetch.return_value = None
    cache.save.return_value = True
    cache.delete.return_value = True
    cache.get_stats.return_value = {"hits": 0, "misses": 0}
    return cache


@pytest.fixture
def memory_cache(clock):
    return MemoryCache(clock=clock)


@pytest.fixture
def store(memory_cache, clock):
    """Blob store for namespace 'Foo' over a real in-memory cache."""
    return BlobStore("Foo", memory_cache, accelerator=FixedLruCache(capacity=10, clock=clock))
