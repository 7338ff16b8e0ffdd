"""Pickle blob serializer.

ONLY pickle serialization - implements the default language-native
payload format with protocol version control and compression support.

Following maximum separation architecture - one file = one purpose.
"""

import gzip
import pickle
import time
from typing import Any, Dict, Optional

from ...core.exceptions.serialization_error import SerializationError
from ...core.exceptions.deserialization_error import DeserializationError
from .serializer_stats import SerializerStats

GZIP_MARKER = b"GZIP:"


class PickleBlobSerializer:
    """Pickle blob serializer with protocol version control and compression.

    Only deserialize payloads from a backing cache you trust: unpickling
    can execute arbitrary code.
    """

    def __init__(
        self,
        protocol: int = pickle.HIGHEST_PROTOCOL,
        use_compression: bool = False,
        compression_level: int = 6,
        compression_threshold: int = 1024
    ):
        """Initialize pickle serializer.

        Args:
            protocol: Pickle protocol version (0-5)
            use_compression: Enable gzip compression
            compression_level: Gzip compression level (1-9)
            compression_threshold: Minimum payload size for compression
        """
        if protocol < 0 or protocol > pickle.HIGHEST_PROTOCOL:
            protocol = pickle.HIGHEST_PROTOCOL

        self._protocol = protocol
        self._use_compression = use_compression
        self._compression_level = max(1, min(9, compression_level))
        self._compression_threshold = max(0, compression_threshold)
        self._stats = SerializerStats()

    def serialize(self, value: Any) -> bytes:
        """Serialize value to pickle bytes."""
        start_time = time.time()

        try:
            pickle_bytes = pickle.dumps(value, protocol=self._protocol)
        except (pickle.PickleError, TypeError, AttributeError, ValueError, RecursionError) as e:
            self._stats.error_count += 1
            raise SerializationError(
                f"Pickle serialization failed: {e}",
                value=value,
                serializer_type="pickle",
                original_error=e
            ) from e

        result_bytes = pickle_bytes
        if self._use_compression and len(pickle_bytes) >= self._compression_threshold:
            compressed = gzip.compress(pickle_bytes, compresslevel=self._compression_level)
            # Only keep compression if it actually reduces size
            if len(compressed) + len(GZIP_MARKER) < len(pickle_bytes):
                result_bytes = GZIP_MARKER + compressed
                self._stats.compressed_count += 1

        self._stats.serialization_count += 1
        self._stats.total_serialization_time += time.time() - start_time
        self._stats.total_bytes_serialized += len(result_bytes)

        return result_bytes

    def deserialize(self, data: bytes) -> Any:
        """Deserialize pickle bytes back to a Python object."""
        start_time = time.time()

        try:
            if data.startswith(GZIP_MARKER):
                pickle_bytes = gzip.decompress(data[len(GZIP_MARKER):])
            else:
                pickle_bytes = data

            result = pickle.loads(pickle_bytes)
        except (pickle.PickleError, EOFError, AttributeError, ImportError,
                IndexError, ValueError, TypeError, gzip.BadGzipFile) as e:
            self._stats.error_count += 1
            raise DeserializationError(
                f"Pickle deserialization failed: {e}",
                data=data if isinstance(data, bytes) else None,
                serializer_type="pickle",
                original_error=e
            ) from e

        self._stats.deserialization_count += 1
        self._stats.total_deserialization_time += time.time() - start_time
        self._stats.total_bytes_deserialized += len(data)

        return result

    def get_format_name(self) -> str:
        return "pickle"

    def get_configuration(self) -> Dict[str, Any]:
        return {
            "protocol": self._protocol,
            "use_compression": self._use_compression,
            "compression_level": self._compression_level,
            "compression_threshold": self._compression_threshold,
        }

    def get_stats(self) -> Dict[str, Any]:
        return {**self._stats.to_dict(), "format": "pickle"}

    def reset_stats(self) -> None:
        self._stats = SerializerStats()


def create_pickle_serializer(
    protocol: Optional[int] = None,
    use_compression: bool = False,
    compression_level: int = 6,
    **options
) -> PickleBlobSerializer:
    """Create pickle blob serializer with configuration.

    Args:
        protocol: Pickle protocol version (None = highest)
        use_compression: Enable gzip compression
        compression_level: Gzip compression level (1-9)
        **options: Additional configuration options

    Returns:
        Configured pickle blob serializer
    """
    if protocol is None:
        protocol = pickle.HIGHEST_PROTOCOL

    return PickleBlobSerializer(
        protocol=protocol,
        use_compression=use_compression,
        compression_level=compression_level,
        **options
    )
