"""Blob store factories."""

from .cache_factory import CacheFactory

__all__ = [
    "CacheFactory",
]
