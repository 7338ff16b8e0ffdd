"""Cache factory for the blob store."""

import logging
import threading
from typing import Any, Dict, Optional

from ...core.exceptions import BlobStoreError
from ..caches import FixedLruCache, MemoryCache, RedisCache

logger = logging.getLogger(__name__)


class CacheFactory:
    """Cache factory following maximum separation principle.

    Handles ONLY cache instantiation and configuration. Does not handle
    key construction, serialization or namespace tracking.
    """

    _instance: Optional["CacheFactory"] = None
    _instance_lock = threading.Lock()

    def __init__(self, cache_config: Optional[Dict[str, Any]] = None):
        """Initialize cache factory.

        Args:
            cache_config: Cache configuration dictionary
        """
        self.config = cache_config or {}
        self._validate_config()

    @classmethod
    def get_instance(cls) -> "CacheFactory":
        """Get the process-wide shared factory."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def clear_instance(cls) -> None:
        with cls._instance_lock:
            cls._instance = None

    def _validate_config(self) -> None:
        """Validate cache configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        capacity = self.config.get("lru_capacity", 500)
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("LRU capacity must be a positive integer")

        redis_params = self.config.get("redis", {})
        if not isinstance(redis_params, dict):
            raise ValueError("Redis configuration must be a dictionary")

        logger.debug("Cache factory configuration validated successfully")

    def new_fixed_in_memory_lru_cache(self, capacity: Optional[int] = None) -> FixedLruCache:
        """Create fixed-capacity LRU cache.

        Args:
            capacity: Maximum number of entries, defaults to the configured lru_capacity

        Raises:
            BlobStoreError: If cache creation fails
        """
        capacity = capacity if capacity is not None else self.config.get("lru_capacity", 500)

        try:
            cache = FixedLruCache(capacity=capacity)
        except ValueError as e:
            logger.error(f"Failed to create fixed LRU cache: {e}")
            raise BlobStoreError(
                "Fixed LRU cache creation failed",
                error_code="BLOBSTORE_CACHE_CREATION_FAILED",
                details={"cache_type": "fixed_lru", "capacity": capacity, "error": str(e)}
            ) from e

        logger.debug(f"Created fixed LRU cache with capacity: {capacity}")
        return cache

    def new_memory_cache(self) -> MemoryCache:
        logger.debug("Creating memory cache")
        return MemoryCache()

    def new_redis_cache(self, redis_client=None, **connection_params) -> RedisCache:
        """Create Redis cache.

        Uses the given client, or builds one from connection parameters
        merged over the factory's ``redis`` configuration.

        Raises:
            BlobStoreError: If cache creation fails
        """
        if redis_client is not None:
            logger.debug("Creating Redis cache with injected client")
            return RedisCache(redis_client)

        params = {**self.config.get("redis", {}), **connection_params}

        try:
            cache = RedisCache.from_connection_params(**params)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to create Redis cache: {e}")
            raise BlobStoreError(
                "Redis cache creation failed",
                error_code="BLOBSTORE_CACHE_CREATION_FAILED",
                details={"cache_type": "redis", "host": params.get("host"), "error": str(e)}
            ) from e

        logger.debug(f"Created Redis cache for {params.get('host', 'localhost')}:{params.get('port', 6379)}")
        return cache
