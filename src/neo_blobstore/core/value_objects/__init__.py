"""Blob store value objects."""

from .blob_key import BlobKey
from .tracker_key import TrackerKey

__all__ = [
    "BlobKey",
    "TrackerKey",
]
