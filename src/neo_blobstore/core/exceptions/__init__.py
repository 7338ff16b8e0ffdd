"""Blob store domain exceptions.

One exception per file following maximum separation architecture.
"""

from .blob_store_error import BlobStoreError
from .invalid_namespace import InvalidNamespace
from .invalid_identifier import InvalidIdentifier
from .invalid_prefix import InvalidPrefix
from .serialization_error import SerializationError
from .deserialization_error import DeserializationError

__all__ = [
    "BlobStoreError",
    "InvalidNamespace",
    "InvalidIdentifier",
    "InvalidPrefix",
    "SerializationError",
    "DeserializationError",
]
