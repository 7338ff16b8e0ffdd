"""Blob store base exception.

ONLY the shared error base - every blob store exception carries a
machine-readable code and optional details.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional


class BlobStoreError(Exception):
    """Base class for errors raised by the blob store layer."""

    default_error_code = "BLOBSTORE_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }
