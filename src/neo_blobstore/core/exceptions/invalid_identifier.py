"""Invalid identifier exception.

ONLY id argument errors - raised when a container id handed to the blob
store is not a string.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any

from .blob_store_error import BlobStoreError


class InvalidIdentifier(BlobStoreError, TypeError):
    """Container id argument is not a string."""

    default_error_code = "BLOBSTORE_ID_INVALID"

    def __init__(self, identifier: Any):
        self.identifier = identifier
        super().__init__(
            "Expected the id to be a string",
            details={"received_type": type(identifier).__name__}
        )
