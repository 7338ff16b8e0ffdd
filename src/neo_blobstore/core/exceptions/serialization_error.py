"""Serialization error exception.

ONLY serialization errors - exception for blob payload serialization
failures with error context.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from .blob_store_error import BlobStoreError


class SerializationError(BlobStoreError):
    """Blob payload could not be serialized to bytes."""

    default_error_code = "BLOBSTORE_SERIALIZATION_ERROR"

    def __init__(
        self,
        message: str,
        value: Any = None,
        serializer_type: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        """Initialize serialization error.

        Args:
            message: Error description
            value: Value that failed to serialize
            serializer_type: Type of serializer that failed
            original_error: Original underlying exception
        """
        details: Dict[str, Any] = {
            "serializer_type": serializer_type,
            "value_type": type(value).__name__,
        }
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error)
            }

        super().__init__(message, details=details)
        self.value = value
        self.serializer_type = serializer_type
        self.original_error = original_error
