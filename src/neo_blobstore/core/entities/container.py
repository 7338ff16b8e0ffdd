"""Container domain entity.

ONLY container entity - pairs a fully-qualified id with its data payload
and the time-to-live applied when the store saves it.

Following maximum separation architecture - one file = one purpose.
"""

import copy
from typing import Any, Dict, List, Optional, Union

Collection = Union[Dict[Any, Any], List[Any]]


def to_collection(value: Any) -> Collection:
    """Coerce a deserialized value into a concrete collection.

    ``None`` becomes an empty dict, dicts and lists pass through, tuples
    become lists and any other value is wrapped in a one-element list.
    """
    if value is None:
        return {}
    if isinstance(value, (dict, list)):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


class Container:
    """Blob container.

    The id and data are fixed at construction; only the expiry can be
    changed afterwards. An expiry of 0 means the container is stored
    until it is deleted or its namespace is dropped.
    """

    __slots__ = ("_id", "_data", "_expiry")

    def __init__(self, id: str, data: Optional[Any] = None):
        self._id = id
        self._data = self._copy(to_collection(data))
        self._expiry = 0

    @staticmethod
    def _copy(data: Collection) -> Collection:
        return copy.deepcopy(data)

    @property
    def id(self) -> str:
        return self._id

    @property
    def data(self) -> Collection:
        return self._data

    @property
    def expiry(self) -> int:
        return self._expiry

    def get_id(self) -> str:
        return self._id

    def get_data(self) -> Collection:
        return self._data

    def get_expiry(self) -> int:
        return self._expiry

    def set_expiry_in_seconds(self, seconds: int) -> None:
        """Set time to live in seconds, 0 for no expiry."""
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise ValueError(f"Expiry must be an integer number of seconds, got {seconds!r}")
        if seconds < 0:
            raise ValueError("Expiry must be non-negative")
        self._expiry = seconds

    def __eq__(self, other) -> bool:
        """Compare containers by id, data and expiry."""
        if not isinstance(other, Container):
            return NotImplemented
        return (
            self._id == other._id
            and self._data == other._data
            and self._expiry == other._expiry
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Container(id={self._id!r}, data={self._data!r}, expiry={self._expiry})"
