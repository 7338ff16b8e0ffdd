"""Invalid namespace exception.

ONLY namespace argument errors - raised when a blob store is constructed
with a namespace that is not a string.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any

from .blob_store_error import BlobStoreError


class InvalidNamespace(BlobStoreError, TypeError):
    """Namespace argument is not a string."""

    default_error_code = "BLOBSTORE_NAMESPACE_INVALID"

    def __init__(self, namespace: Any):
        self.namespace = namespace
        super().__init__(
            "Expected the namespace to be a string",
            details={"received_type": type(namespace).__name__}
        )
