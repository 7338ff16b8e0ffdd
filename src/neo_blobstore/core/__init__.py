"""Blob store core domain.

Entities, value objects, exceptions and protocols with no infrastructure
dependencies.
"""

from .entities import Container, TrackingRecord, to_collection
from .value_objects import BlobKey, TrackerKey
from .exceptions import (
    BlobStoreError,
    InvalidNamespace,
    InvalidIdentifier,
    SerializationError,
    DeserializationError,
)
from .protocols import CacheCapability, BlobSerializer

__all__ = [
    "Container",
    "TrackingRecord",
    "to_collection",
    "BlobKey",
    "TrackerKey",
    "BlobStoreError",
    "InvalidNamespace",
    "InvalidIdentifier",
    "SerializationError",
    "DeserializationError",
    "CacheCapability",
    "BlobSerializer",
]
