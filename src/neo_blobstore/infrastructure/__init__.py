"""Blob store infrastructure.

Concrete caches, serializers, configuration and factories.
"""

from .caches import FixedLruCache, MemoryCache, RedisCache
from .serializers import JSONBlobSerializer, PickleBlobSerializer
from .configuration import (
    BlobStoreConfig,
    CacheBackend,
    ConfigSource,
    SerializerType,
    create_blob_store_config,
)
from .factories import CacheFactory

__all__ = [
    "FixedLruCache",
    "MemoryCache",
    "RedisCache",
    "JSONBlobSerializer",
    "PickleBlobSerializer",
    "BlobStoreConfig",
    "CacheBackend",
    "ConfigSource",
    "SerializerType",
    "create_blob_store_config",
    "CacheFactory",
]
