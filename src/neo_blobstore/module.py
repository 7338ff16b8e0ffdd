"""Blob store module wiring.

Builds backing caches, serializers and stores from a BlobStoreConfig so
applications do not assemble the parts by hand.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Dict, Optional

from .application.services.blob_store import BlobStore
from .core.protocols.blob_serializer import BlobSerializer
from .core.protocols.cache_capability import CacheCapability
from .infrastructure.configuration import (
    BlobStoreConfig,
    CacheBackend,
    SerializerType,
    create_blob_store_config,
)
from .infrastructure.factories import CacheFactory
from .infrastructure.serializers import create_json_serializer, create_pickle_serializer

logger = logging.getLogger(__name__)


class BlobStoreModule:
    """Blob store module.

    Provides:
    - Backing cache selected by configuration (memory or Redis)
    - Payload serializer selected by configuration (pickle or JSON)
    - One BlobStore per namespace sharing that cache and serializer
    """

    def __init__(
        self,
        config: Optional[BlobStoreConfig] = None,
        cache: Optional[CacheCapability] = None,
        cache_factory: Optional[CacheFactory] = None
    ):
        """Initialize blob store module.

        Args:
            config: Store configuration, read from the environment when omitted
            cache: Backing cache to use instead of the configured backend
            cache_factory: Factory for caches, the shared instance by default
        """
        self._config = config or create_blob_store_config()
        self._cache_factory = cache_factory or CacheFactory.get_instance()
        self._cache = cache
        self._serializer: Optional[BlobSerializer] = None

    def get_name(self) -> str:
        return "blobstore"

    @property
    def config(self) -> BlobStoreConfig:
        return self._config

    def get_cache(self) -> CacheCapability:
        """Get the backing cache, creating it on first use."""
        if self._cache is None:
            self._cache = self._create_cache()
        return self._cache

    def get_serializer(self) -> BlobSerializer:
        if self._serializer is None:
            self._serializer = self._create_serializer()
        return self._serializer

    def create_store(self, namespace: str) -> BlobStore:
        """Create a blob store for a namespace.

        Raises:
            InvalidNamespace: If namespace is not a string
        """
        store = BlobStore(
            namespace,
            self.get_cache(),
            serializer=self.get_serializer(),
            accelerator=self._cache_factory.new_fixed_in_memory_lru_cache(
                self._config.accelerator_capacity
            ),
            log_operations=self._config.log_operations
        )
        store.set_namespace_prefix(self._config.namespace_prefix)
        store.set_expiry_in_seconds(self._config.default_expiry_seconds)
        store.set_usage_state(self._config.usage_enabled)

        return store

    def get_info(self) -> Dict[str, Any]:
        return {
            "module": self.get_name(),
            "backend": self._config.backend.value,
            "serializer": self._config.serializer.value,
            "namespace_prefix": self._config.namespace_prefix,
            "config_source": self._config.config_source.value,
        }

    def _create_cache(self) -> CacheCapability:
        if self._config.backend == CacheBackend.REDIS:
            logger.info(
                f"Using Redis backing cache at {self._config.redis_host}:{self._config.redis_port}"
            )
            return self._cache_factory.new_redis_cache(
                **self._config.get_redis_connection_params()
            )

        logger.info("Using in-memory backing cache")
        return self._cache_factory.new_memory_cache()

    def _create_serializer(self) -> BlobSerializer:
        if self._config.serializer == SerializerType.JSON:
            return create_json_serializer(
                use_compression=self._config.enable_compression,
                compression_threshold=self._config.compression_threshold_bytes
            )

        return create_pickle_serializer(
            use_compression=self._config.enable_compression,
            compression_threshold=self._config.compression_threshold_bytes
        )


def create_blob_store(
    namespace: str,
    config: Optional[BlobStoreConfig] = None,
    cache: Optional[CacheCapability] = None
) -> BlobStore:
    """Create a configured blob store for a namespace.

    Args:
        namespace: Namespace of the store
        config: Store configuration, read from the environment when omitted
        cache: Backing cache to use instead of the configured backend

    Returns:
        Configured blob store
    """
    return BlobStoreModule(config=config, cache=cache).create_store(namespace)
