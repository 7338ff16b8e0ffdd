"""Blob store application layer."""

from .services import BlobStore

__all__ = [
    "BlobStore",
]
