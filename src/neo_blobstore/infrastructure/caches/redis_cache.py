"""Redis cache.

ONLY Redis implementation - key-value storage on a Redis server through an
injected synchronous redis-py client.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Dict, Optional

import redis

logger = logging.getLogger(__name__)

INFO_FIELDS = (
    "redis_version",
    "used_memory",
    "used_memory_human",
    "connected_clients",
    "keyspace_hits",
    "keyspace_misses",
    "evicted_keys",
)


class RedisCache:
    """Redis cache adapter.

    Redis errors are logged and re-raised unchanged; there is no retry
    or fallback at this layer.
    """

    implementation = "redis"

    def __init__(self, redis_client: "redis.Redis"):
        """Initialize Redis cache.

        Args:
            redis_client: Synchronous Redis client instance
        """
        if redis_client is None:
            raise ValueError("Redis client is required")

        self.redis_client = redis_client
        self._stats = {
            "contains_count": 0,
            "fetch_count": 0,
            "save_count": 0,
            "delete_count": 0,
            "hit_count": 0,
            "miss_count": 0,
            "error_count": 0,
        }

    @classmethod
    def from_connection_params(
        cls,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        ssl: bool = False,
        socket_timeout: Optional[float] = 5,
        **kwargs
    ) -> "RedisCache":
        """Create adapter with a new client from connection parameters."""
        client = redis.Redis(
            host=host,
            port=port,
            db=db,
            password=password,
            ssl=ssl,
            socket_timeout=socket_timeout,
            **kwargs
        )
        return cls(client)

    def contains(self, key: str) -> bool:
        self._stats["contains_count"] += 1
        try:
            return bool(self.redis_client.exists(key))
        except redis.RedisError as e:
            self._stats["error_count"] += 1
            logger.error(f"Redis EXISTS failed for {key}: {e}")
            raise

    def fetch(self, key: str) -> Any:
        """Get raw stored value, None when absent."""
        self._stats["fetch_count"] += 1
        try:
            value = self.redis_client.get(key)
        except redis.RedisError as e:
            self._stats["error_count"] += 1
            logger.error(f"Redis GET failed for {key}: {e}")
            raise

        if value is None:
            self._stats["miss_count"] += 1
            logger.debug(f"Redis miss: {key}")
        else:
            self._stats["hit_count"] += 1
        return value

    def save(self, key: str, value: Any, ttl: int = 0) -> bool:
        self._stats["save_count"] += 1
        try:
            if ttl and ttl > 0:
                result = self.redis_client.set(key, value, ex=ttl)
            else:
                result = self.redis_client.set(key, value)
        except redis.RedisError as e:
            self._stats["error_count"] += 1
            logger.error(f"Redis SET failed for {key}: {e}")
            raise

        return bool(result)

    def delete(self, key: str) -> bool:
        self._stats["delete_count"] += 1
        try:
            return self.redis_client.delete(key) > 0
        except redis.RedisError as e:
            self._stats["error_count"] += 1
            logger.error(f"Redis DEL failed for {key}: {e}")
            raise

    def get_stats(self) -> Dict[str, Any]:
        """Get client counters merged with selected server INFO fields."""
        stats: Dict[str, Any] = {**self._stats, "implementation": self.implementation}

        try:
            info = self.redis_client.info()
        except redis.RedisError as e:
            self._stats["error_count"] += 1
            logger.warning(f"Redis INFO unavailable: {e}")
            stats["server"] = None
            return stats

        stats["server"] = {field: info[field] for field in INFO_FIELDS if field in info}
        return stats
