"""Blob store serializers.

One serializer per format. Pickle is the default payload format.
"""

from .serializer_stats import SerializerStats
from .pickle_serializer import (
    PickleBlobSerializer,
    create_pickle_serializer,
)
from .json_serializer import (
    JSONBlobSerializer,
    create_json_serializer,
)

__all__ = [
    "SerializerStats",
    "PickleBlobSerializer",
    "create_pickle_serializer",
    "JSONBlobSerializer",
    "create_json_serializer",
]
