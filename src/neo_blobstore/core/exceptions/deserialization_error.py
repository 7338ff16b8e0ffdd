"""Deserialization error exception.

ONLY deserialization errors - exception for stored payloads that cannot
be turned back into Python objects.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from .blob_store_error import BlobStoreError


class DeserializationError(BlobStoreError):
    """Stored bytes could not be deserialized."""

    default_error_code = "BLOBSTORE_DESERIALIZATION_ERROR"

    def __init__(
        self,
        message: str,
        data: Optional[bytes] = None,
        serializer_type: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        """Initialize deserialization error.

        Args:
            message: Error description
            data: Serialized data that failed to deserialize
            serializer_type: Type of serializer that failed
            original_error: Original underlying exception
        """
        details: Dict[str, Any] = {"serializer_type": serializer_type}
        if data is not None:
            details["data_size"] = len(data)
            details["data_preview"] = repr(data[:50])
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error)
            }

        super().__init__(message, details=details)
        self.data = data
        self.serializer_type = serializer_type
        self.original_error = original_error
