"""Serializer statistics.

ONLY serializer counters - shared by every blob serializer implementation.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class SerializerStats:
    """Serializer performance statistics."""

    serialization_count: int = 0
    deserialization_count: int = 0
    total_serialization_time: float = 0.0
    total_deserialization_time: float = 0.0
    total_bytes_serialized: int = 0
    total_bytes_deserialized: int = 0
    compressed_count: int = 0
    error_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        stats = asdict(self)

        if self.serialization_count > 0:
            stats["average_serialization_time"] = (
                self.total_serialization_time / self.serialization_count
            )

        if self.deserialization_count > 0:
            stats["average_deserialization_time"] = (
                self.total_deserialization_time / self.deserialization_count
            )

        return stats
