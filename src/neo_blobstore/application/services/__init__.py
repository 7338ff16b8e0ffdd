"""Blob store application services."""

from .blob_store import BlobStore

__all__ = [
    "BlobStore",
]
