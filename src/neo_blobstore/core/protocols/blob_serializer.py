"""Blob serializer protocol.

ONLY serialization contract - turns container data into the opaque bytes
stored in the backing cache and back.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class BlobSerializer(Protocol):
    """Blob payload serializer."""

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes for cache storage.

        Raises:
            SerializationError: If value cannot be serialized
        """
        ...

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes back to a Python object.

        Raises:
            DeserializationError: If data cannot be deserialized
        """
        ...

    def get_format_name(self) -> str:
        """Get serialization format name (e.g., 'json', 'pickle')."""
        ...

    def get_stats(self) -> Dict[str, Any]:
        """Get serializer counters."""
        ...
