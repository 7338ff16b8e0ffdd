"""Invalid prefix exception.

ONLY namespace prefix argument errors - raised when a key is built from
a namespace prefix that is not a string.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any

from .blob_store_error import BlobStoreError


class InvalidPrefix(BlobStoreError, TypeError):
    """Namespace prefix argument is not a string."""

    default_error_code = "BLOBSTORE_PREFIX_INVALID"

    def __init__(self, prefix: Any):
        self.prefix = prefix
        super().__init__(
            "Expected the namespace prefix to be a string",
            details={"received_type": type(prefix).__name__}
        )
