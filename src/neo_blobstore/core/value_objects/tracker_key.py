"""Tracker key value object.

ONLY tracker key construction - the cache key of the record that lists
every id written under one (prefix, namespace) pair.

Following maximum separation architecture - one file = one purpose.
"""

import hashlib
from dataclasses import dataclass

from ..exceptions.invalid_namespace import InvalidNamespace
from ..exceptions.invalid_prefix import InvalidPrefix


@dataclass(frozen=True)
class TrackerKey:
    """Namespace-scoped tracking record key.

    Rendered as ``prefix:md5(namespace + "internal-blobstore-id-list")``.
    Every entry stored under it belongs to this one namespace.
    """

    prefix: str
    namespace: str

    INTERNAL_LIST = "internal-blobstore-id-list"

    def __post_init__(self):
        if not isinstance(self.prefix, str):
            raise InvalidPrefix(self.prefix)

        if not isinstance(self.namespace, str):
            raise InvalidNamespace(self.namespace)

    @property
    def value(self) -> str:
        """Get the tracker cache key string."""
        digest = hashlib.md5(
            (self.namespace + self.INTERNAL_LIST).encode("utf-8")
        ).hexdigest()
        return f"{self.prefix}:{digest}"

    def __str__(self) -> str:
        return self.value
