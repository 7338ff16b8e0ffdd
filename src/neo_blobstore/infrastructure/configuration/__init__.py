"""Blob store configuration."""

from .blob_store_config import (
    BlobStoreConfig,
    CacheBackend,
    ConfigSource,
    SerializerType,
    create_blob_store_config,
)

__all__ = [
    "BlobStoreConfig",
    "CacheBackend",
    "ConfigSource",
    "SerializerType",
    "create_blob_store_config",
]
