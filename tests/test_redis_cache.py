"""
Test Redis cache adapter against a mocked redis-py client.
"""

import pytest
import redis
from unittest.mock import MagicMock

from neo_blobstore import BlobStore, CacheCapability, Container, FixedLruCache, RedisCache


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.exists.return_value = 0
    client.get.return_value = None
    client.set.return_value = True
    client.delete.return_value = 0
    client.info.return_value = {
        "redis_version": "7.2.0",
        "used_memory": 1024,
        "keyspace_hits": 3,
        "keyspace_misses": 1,
        "role": "master",
    }
    return client


def test_requires_client():
    with pytest.raises(ValueError):
        RedisCache(None)


def test_implements_capability(redis_client):
    assert isinstance(RedisCache(redis_client), CacheCapability)


def test_contains_maps_to_exists(redis_client):
    cache = RedisCache(redis_client)
    redis_client.exists.return_value = 1

    assert cache.contains("blobstore:Foo:bar") is True
    redis_client.exists.assert_called_once_with("blobstore:Foo:bar")


def test_fetch_returns_none_when_absent(redis_client):
    cache = RedisCache(redis_client)

    assert cache.fetch("missing") is None
    assert cache.get_stats()["miss_count"] == 1


def test_save_with_and_without_ttl(redis_client):
    cache = RedisCache(redis_client)

    cache.save("a", b"payload", 30)
    redis_client.set.assert_called_with("a", b"payload", ex=30)

    cache.save("b", b"payload", 0)
    redis_client.set.assert_called_with("b", b"payload")


def test_delete_reports_removal(redis_client):
    cache = RedisCache(redis_client)
    redis_client.delete.return_value = 1

    assert cache.delete("a") is True
    redis_client.delete.assert_called_once_with("a")


def test_errors_propagate_unchanged(redis_client):
    cache = RedisCache(redis_client)
    redis_client.get.side_effect = redis.ConnectionError("down")

    with pytest.raises(redis.ConnectionError):
        cache.fetch("a")

    assert cache.get_stats()["error_count"] == 1


def test_stats_include_selected_server_info(redis_client):
    stats = RedisCache(redis_client).get_stats()

    assert stats["implementation"] == "redis"
    assert stats["server"]["redis_version"] == "7.2.0"
    assert "role" not in stats["server"]


def test_stats_without_server_info(redis_client):
    redis_client.info.side_effect = redis.ConnectionError("down")

    assert RedisCache(redis_client).get_stats()["server"] is None


def test_from_connection_params_builds_client(mocker):
    redis_cls = mocker.patch("neo_blobstore.infrastructure.caches.redis_cache.redis.Redis")

    cache = RedisCache.from_connection_params(host="cache.internal", port=6380, db=1)

    redis_cls.assert_called_once_with(
        host="cache.internal",
        port=6380,
        db=1,
        password=None,
        ssl=False,
        socket_timeout=5
    )
    assert cache.redis_client is redis_cls.return_value


def test_blob_store_over_redis(redis_client):
    """Test the store writes serialized payloads through the adapter."""
    store = BlobStore("Foo", RedisCache(redis_client), accelerator=FixedLruCache(capacity=5))
    store.save(Container("blobstore:Foo:bar", {"a": 1}))

    key, payload = redis_client.set.call_args.args
    assert key == "blobstore:Foo:bar"
    assert isinstance(payload, bytes)
