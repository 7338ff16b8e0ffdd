"""neo-blobstore.

Namespaced blob storage over a key-value cache: containers are stored
under ``prefix:namespace:id`` keys and every namespace can be dropped in
one call.
"""

from .__version__ import __version__

from .core.entities import Container, TrackingRecord, to_collection
from .core.value_objects import BlobKey, TrackerKey
from .core.exceptions import (
    BlobStoreError,
    InvalidNamespace,
    InvalidIdentifier,
    InvalidPrefix,
    SerializationError,
    DeserializationError,
)
from .core.protocols import CacheCapability, BlobSerializer

from .application.services import BlobStore

from .infrastructure.caches import FixedLruCache, MemoryCache, RedisCache
from .infrastructure.serializers import JSONBlobSerializer, PickleBlobSerializer
from .infrastructure.configuration import (
    BlobStoreConfig,
    CacheBackend,
    SerializerType,
    create_blob_store_config,
)
from .infrastructure.factories import CacheFactory

from .module import BlobStoreModule, create_blob_store

__all__ = [
    "__version__",

    # Core Domain
    "Container",
    "TrackingRecord",
    "to_collection",
    "BlobKey",
    "TrackerKey",

    # Exceptions
    "BlobStoreError",
    "InvalidNamespace",
    "InvalidIdentifier",
    "InvalidPrefix",
    "SerializationError",
    "DeserializationError",

    # Protocols
    "CacheCapability",
    "BlobSerializer",

    # Services
    "BlobStore",

    # Infrastructure
    "FixedLruCache",
    "MemoryCache",
    "RedisCache",
    "JSONBlobSerializer",
    "PickleBlobSerializer",
    "BlobStoreConfig",
    "CacheBackend",
    "SerializerType",
    "create_blob_store_config",
    "CacheFactory",

    # Wiring
    "BlobStoreModule",
    "create_blob_store",
]
