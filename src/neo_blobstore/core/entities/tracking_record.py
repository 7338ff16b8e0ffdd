"""Tracking record domain entity.

ONLY namespace membership - the set of fully-qualified ids written under
one namespace, used to delete the whole namespace at once.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Iterator, List, Optional


class TrackingRecord:
    """Namespace membership record.

    Persisted as a ``{full_key: True}`` mapping. Entries are always
    fully-qualified keys, exactly what ``BlobStore.drop()`` deletes.
    """

    def __init__(self, entries: Optional[Dict[str, bool]] = None):
        self._entries: Dict[str, bool] = dict(entries or {})

    @classmethod
    def from_payload(cls, payload: Any) -> "TrackingRecord":
        """Build record from a deserialized payload.

        Anything that is not a mapping (absent record, ``False``, a
        scalar) yields an empty record.
        """
        if not isinstance(payload, dict):
            return cls()
        return cls({str(key): True for key in payload})

    def add(self, full_key: str) -> None:
        self._entries[full_key] = True

    def remove(self, full_key: str) -> bool:
        """Remove entry, returning whether it was present."""
        return self._entries.pop(full_key, None) is not None

    def ids(self) -> List[str]:
        """Get tracked ids in insertion order."""
        return list(self._entries)

    def to_payload(self) -> Dict[str, bool]:
        return dict(self._entries)

    def __contains__(self, full_key: object) -> bool:
        return full_key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"TrackingRecord({len(self._entries)} ids)"
