"""Blob store service.

ONLY namespaced blob storage - builds fully-qualified keys, delegates
storage to an injected cache capability and tracks which keys belong to
a namespace so the whole namespace can be dropped at once.

Following maximum separation architecture - one file = one purpose.
"""

import copy
import logging
from typing import Any, Dict, Optional

from ...core.entities.container import Container, to_collection
from ...core.entities.tracking_record import TrackingRecord
from ...core.exceptions.invalid_namespace import InvalidNamespace
from ...core.exceptions.invalid_prefix import InvalidPrefix
from ...core.protocols.blob_serializer import BlobSerializer
from ...core.protocols.cache_capability import CacheCapability
from ...core.value_objects.blob_key import BlobKey
from ...core.value_objects.tracker_key import TrackerKey
from ...infrastructure.factories.cache_factory import CacheFactory
from ...infrastructure.serializers.pickle_serializer import PickleBlobSerializer

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE_PREFIX = "blobstore"
DEFAULT_ACCELERATOR_CAPACITY = 500


class BlobStore:
    """Namespaced blob store over a key-value cache.

    Keys are ``prefix:namespace:id``. Data written through ``save`` goes
    to both the backing cache (serialized) and a bounded local LRU
    accelerator (as-is). Every id that misses on ``read`` is registered in
    the namespace's tracking record, which ``drop`` uses to delete the
    whole namespace.

    The tracking record is updated read-modify-write without locking, so
    concurrent writers to the same namespace can lose each other's
    updates (last writer wins).

    ``can_use()`` is advisory: callers are expected to check it and skip
    the store, the store itself never consults it.
    """

    def __init__(
        self,
        namespace: str,
        cache: CacheCapability,
        serializer: Optional[BlobSerializer] = None,
        accelerator: Optional[CacheCapability] = None,
        log_operations: bool = False
    ):
        """Initialize blob store.

        Args:
            namespace: Logical partition all ids of this store live in
            cache: Backing cache capability
            serializer: Payload serializer, pickle by default
            accelerator: Local read-through cache, a fixed 500 entry LRU by default
            log_operations: Emit a debug record for every operation

        Raises:
            InvalidNamespace: If namespace is not a string
        """
        if not isinstance(namespace, str):
            raise InvalidNamespace(namespace)

        self._namespace = namespace
        self._namespace_prefix = DEFAULT_NAMESPACE_PREFIX
        self._cache = cache
        self._serializer = serializer if serializer is not None else PickleBlobSerializer()
        if accelerator is None:
            accelerator = CacheFactory.get_instance().new_fixed_in_memory_lru_cache(
                DEFAULT_ACCELERATOR_CAPACITY
            )
        self._accelerator = accelerator
        self._usage_state = True
        # 0 = stored until deleted or dropped
        self._expiry = 0
        self._log_operations = log_operations

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def namespace_prefix(self) -> str:
        return self._namespace_prefix

    @property
    def expiry(self) -> int:
        return self._expiry

    def can_use(self) -> bool:
        return self._usage_state

    def set_usage_state(self, usage_state: bool) -> None:
        """Specify whether callers should use this store at all."""
        self._usage_state = bool(usage_state)

    def set_expiry_in_seconds(self, expiry: int) -> None:
        """Specify the expiry applied to containers returned by ``read``."""
        if isinstance(expiry, bool) or not isinstance(expiry, int) or expiry < 0:
            raise ValueError(f"Expiry must be a non-negative integer, got {expiry!r}")
        self._expiry = expiry

    def set_namespace_prefix(self, prefix: str) -> None:
        """Specify the prefix of every key computed from now on.

        Raises:
            InvalidPrefix: If prefix is not a string
        """
        if not isinstance(prefix, str):
            raise InvalidPrefix(prefix)
        self._namespace_prefix = prefix

    def get_key(self, id: str) -> str:
        """Build the fully-qualified cache key for an id.

        Raises:
            InvalidIdentifier: If id is not a string
        """
        return BlobKey(self._namespace_prefix, self._namespace, id).value

    def exists(self, id: str) -> bool:
        return self._cache.contains(self.get_key(id))

    def get_stats(self) -> Dict[str, Any]:
        return {
            **self._cache.get_stats(),
            "internal_cache": self._accelerator.get_stats(),
        }

    def read(self, id: str) -> Container:
        """Read the container stored for an id.

        Unknown ids yield an empty container and are registered in the
        namespace tracking record right away, before anything is saved.

        Raises:
            InvalidIdentifier: If id is not a string
        """
        full_key = self.get_key(id)

        # Accelerator values are already deserialized
        if self._accelerator.contains(full_key):
            data = copy.deepcopy(self._accelerator.fetch(full_key))
            self._log("Accelerator hit: %s", full_key)
        elif self._cache.contains(full_key):
            payload = self._cache.fetch(full_key)
            if payload:
                data = self._serializer.deserialize(payload)
                self._accelerator.save(full_key, data)
            else:
                data = None
            self._log("Backing cache hit: %s", full_key)
        else:
            self._add_to_internal_list(full_key)
            data = {}
            self._log("Miss, registered in tracking record: %s", full_key)

        container = Container(full_key, to_collection(data))
        container.set_expiry_in_seconds(self._expiry)

        return container

    def save(self, container: Container) -> None:
        """Write a container under its own id with its own expiry.

        The tracking record is not touched.
        """
        data = container.get_data()
        expiry = container.get_expiry()

        self._accelerator.save(container.get_id(), copy.deepcopy(data), expiry)
        self._cache.save(container.get_id(), self._serializer.serialize(data), expiry)

        self._log("Saved %s (expiry=%s)", container.get_id(), expiry)

    def delete(self, id: str) -> None:
        """Delete an id from the tracking record, the backing cache and the accelerator.

        Raises:
            InvalidIdentifier: If id is not a string
        """
        full_key = self.get_key(id)

        self._remove_from_internal_list(full_key)
        self._cache.delete(full_key)
        self._accelerator.delete(full_key)

        self._log("Deleted %s", full_key)

    def drop(self) -> int:
        """Delete every tracked container of this namespace at once.

        Issues one backing cache delete per tracked id and evicts the same
        ids from the accelerator. The tracking record itself is kept, so a
        repeated drop deletes the same (now absent) keys again.

        Returns:
            Number of tracked ids deleted
        """
        record = self._load_tracking_record(self._get_tracker_key())

        for full_key in record:
            self._cache.delete(full_key)
            self._accelerator.delete(full_key)

        logger.info(
            f"Dropped {len(record)} containers from namespace "
            f"{self._namespace_prefix}:{self._namespace}"
        )
        return len(record)

    def _get_tracker_key(self) -> str:
        return TrackerKey(self._namespace_prefix, self._namespace).value

    def _load_tracking_record(self, tracker_key: str) -> TrackingRecord:
        payload = self._cache.fetch(tracker_key)
        if not payload:
            return TrackingRecord()

        return TrackingRecord.from_payload(self._serializer.deserialize(payload))

    def _store_tracking_record(self, tracker_key: str, record: TrackingRecord) -> None:
        # Tracking record never expires
        self._cache.save(tracker_key, self._serializer.serialize(record.to_payload()), 0)

    def _add_to_internal_list(self, full_key: str) -> None:
        tracker_key = self._get_tracker_key()
        record = self._load_tracking_record(tracker_key)
        record.add(full_key)
        self._store_tracking_record(tracker_key, record)

    def _remove_from_internal_list(self, full_key: str) -> None:
        tracker_key = self._get_tracker_key()
        record = self._load_tracking_record(tracker_key)
        record.remove(full_key)
        self._store_tracking_record(tracker_key, record)

    def _log(self, message: str, *args: Any) -> None:
        if self._log_operations:
            logger.debug(message, *args)

    def __repr__(self) -> str:
        return f"BlobStore(namespace={self._namespace!r}, prefix={self._namespace_prefix!r})"
