"""Blob key value object.

ONLY key construction - immutable fully-qualified key built from
prefix, namespace and container id.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass

from ..exceptions.invalid_identifier import InvalidIdentifier
from ..exceptions.invalid_namespace import InvalidNamespace
from ..exceptions.invalid_prefix import InvalidPrefix


@dataclass(frozen=True)
class BlobKey:
    """Fully-qualified blob key.

    Renders as ``prefix:namespace:id``. The id is taken verbatim, so ids
    containing colons produce deeper keys without escaping.
    """

    prefix: str
    namespace: str
    identifier: str

    SEPARATOR = ":"

    def __post_init__(self):
        """Validate key parts on creation."""
        if not isinstance(self.prefix, str):
            raise InvalidPrefix(self.prefix)

        if not isinstance(self.namespace, str):
            raise InvalidNamespace(self.namespace)

        if not isinstance(self.identifier, str):
            raise InvalidIdentifier(self.identifier)

    @property
    def value(self) -> str:
        """Get the fully-qualified key string."""
        return self.SEPARATOR.join((self.prefix, self.namespace, self.identifier))

    def __str__(self) -> str:
        return self.value
