"""JSON blob serializer.

ONLY JSON serialization - implements a portable payload format with
type tagging for common Python types and compression support.

Following maximum separation architecture - one file = one purpose.
"""

import gzip
import json
import time
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

from ...core.exceptions.serialization_error import SerializationError
from ...core.exceptions.deserialization_error import DeserializationError
from .pickle_serializer import GZIP_MARKER
from .serializer_stats import SerializerStats


TYPE_KEY = "__blob_type__"
VALUE_KEY = "value"


def _tagged(type_name: str, value: Any) -> Dict[str, Any]:
    return {TYPE_KEY: type_name, VALUE_KEY: value}


def _pair_key(key: Any) -> Any:
    # Same key coercion json applies to object keys
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    raise TypeError(f"keys must be str, int, float, bool or None, not {type(key).__name__}")


def escape_reserved(obj: Any) -> Any:
    """Escape user mappings that use the reserved type key.

    Such mappings are written as a tagged list of key/value pairs, so
    every JSON object carrying ``TYPE_KEY`` was produced by the encoder.
    """
    if isinstance(obj, dict):
        if TYPE_KEY in obj:
            return _tagged(
                "dict",
                [[_pair_key(key), escape_reserved(value)] for key, value in obj.items()]
            )
        return {key: escape_reserved(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [escape_reserved(item) for item in obj]
    return obj


class BlobJSONEncoder(json.JSONEncoder):
    """JSON encoder for extended type support."""

    def iterencode(self, o: Any, _one_shot: bool = False):
        return super().iterencode(escape_reserved(o), _one_shot)

    def default(self, obj: Any) -> Any:
        """Handle non-standard JSON types."""
        if isinstance(obj, datetime):
            return _tagged("datetime", obj.isoformat())
        elif isinstance(obj, date):
            return _tagged("date", obj.isoformat())
        elif isinstance(obj, Decimal):
            return _tagged("decimal", str(obj))
        elif isinstance(obj, UUID):
            return _tagged("uuid", str(obj))
        elif isinstance(obj, (set, frozenset)):
            return _tagged("set", escape_reserved(sorted(obj, key=repr)))
        elif isinstance(obj, bytes):
            return _tagged("bytes", obj.hex())

        return super().default(obj)


def decode_json_object(obj: Dict[str, Any]) -> Any:
    """Decode tagged JSON objects back to Python types."""
    if TYPE_KEY not in obj:
        return obj

    type_name = obj[TYPE_KEY]
    value = obj.get(VALUE_KEY)

    if type_name == "datetime":
        return datetime.fromisoformat(value)
    elif type_name == "date":
        return date.fromisoformat(value)
    elif type_name == "decimal":
        return Decimal(value)
    elif type_name == "uuid":
        return UUID(value)
    elif type_name == "set":
        return set(value)
    elif type_name == "bytes":
        return bytes.fromhex(value)
    elif type_name == "dict":
        return {key: item for key, item in value}

    raise ValueError(f"Unknown JSON type tag: {type_name!r}")


class JSONBlobSerializer:
    """JSON blob serializer.

    Tuples come back as lists and mapping keys as strings, so a payload
    only round-trips exactly when it is already JSON-shaped.
    """

    def __init__(
        self,
        ensure_ascii: bool = False,
        sort_keys: bool = False,
        use_compression: bool = False,
        compression_level: int = 6,
        compression_threshold: int = 1024
    ):
        self._ensure_ascii = ensure_ascii
        self._sort_keys = sort_keys
        self._use_compression = use_compression
        self._compression_level = max(1, min(9, compression_level))
        self._compression_threshold = max(0, compression_threshold)
        self._stats = SerializerStats()

    def serialize(self, value: Any) -> bytes:
        """Serialize value to JSON bytes."""
        start_time = time.time()

        try:
            json_bytes = json.dumps(
                value,
                cls=BlobJSONEncoder,
                ensure_ascii=self._ensure_ascii,
                separators=(",", ":"),
                sort_keys=self._sort_keys
            ).encode("utf-8")
        except (TypeError, ValueError, OverflowError, RecursionError) as e:
            self._stats.error_count += 1
            raise SerializationError(
                f"JSON serialization failed: {e}",
                value=value,
                serializer_type="json",
                original_error=e
            ) from e

        result_bytes = json_bytes
        if self._use_compression and len(json_bytes) >= self._compression_threshold:
            compressed = gzip.compress(json_bytes, compresslevel=self._compression_level)
            if len(compressed) + len(GZIP_MARKER) < len(json_bytes):
                result_bytes = GZIP_MARKER + compressed
                self._stats.compressed_count += 1

        self._stats.serialization_count += 1
        self._stats.total_serialization_time += time.time() - start_time
        self._stats.total_bytes_serialized += len(result_bytes)

        return result_bytes

    def deserialize(self, data: bytes) -> Any:
        """Deserialize JSON bytes back to a Python object."""
        start_time = time.time()

        try:
            if isinstance(data, str):
                data = data.encode("utf-8")

            if data.startswith(GZIP_MARKER):
                json_bytes = gzip.decompress(data[len(GZIP_MARKER):])
            else:
                json_bytes = data

            result = json.loads(json_bytes.decode("utf-8"), object_hook=decode_json_object)
        except (ValueError, TypeError, ArithmeticError, gzip.BadGzipFile) as e:
            self._stats.error_count += 1
            raise DeserializationError(
                f"JSON deserialization failed: {e}",
                data=data,
                serializer_type="json",
                original_error=e
            ) from e

        self._stats.deserialization_count += 1
        self._stats.total_deserialization_time += time.time() - start_time
        self._stats.total_bytes_deserialized += len(data)

        return result

    def get_format_name(self) -> str:
        return "json"

    def get_stats(self) -> Dict[str, Any]:
        return {**self._stats.to_dict(), "format": "json"}

    def reset_stats(self) -> None:
        self._stats = SerializerStats()


def create_json_serializer(
    use_compression: bool = False,
    compression_threshold: int = 1024,
    **options
) -> JSONBlobSerializer:
    """Create JSON blob serializer with configuration."""
    return JSONBlobSerializer(
        use_compression=use_compression,
        compression_threshold=compression_threshold,
        **options
    )
