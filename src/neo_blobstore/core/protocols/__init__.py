"""Blob store protocols."""

from .cache_capability import CacheCapability
from .blob_serializer import BlobSerializer

__all__ = [
    "CacheCapability",
    "BlobSerializer",
]
