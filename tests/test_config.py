"""
Test blob store configuration loading and validation.
"""

import json

import pytest

from neo_blobstore import (
    BlobStoreConfig,
    CacheBackend,
    SerializerType,
    create_blob_store_config,
)
from neo_blobstore.infrastructure.configuration import ConfigSource


def test_defaults():
    config = BlobStoreConfig()

    assert config.namespace_prefix == "blobstore"
    assert config.default_expiry_seconds == 0
    assert config.accelerator_capacity == 500
    assert config.usage_enabled is True
    assert config.backend == CacheBackend.MEMORY
    assert config.serializer == SerializerType.PICKLE
    assert config.config_source == ConfigSource.DEFAULTS


@pytest.mark.parametrize("overrides", [
    {"default_expiry_seconds": -1},
    {"accelerator_capacity": 0},
    {"redis_port": 70000},
    {"compression_threshold_bytes": -5},
    {"redis_socket_timeout": 0},
])
def test_invalid_values_raise(overrides):
    with pytest.raises(ValueError):
        BlobStoreConfig(**overrides)


def test_from_environment(monkeypatch):
    monkeypatch.setenv("NEO_BLOBSTORE_NAMESPACE_PREFIX", "coffee")
    monkeypatch.setenv("NEO_BLOBSTORE_DEFAULT_EXPIRY_SECONDS", "120")
    monkeypatch.setenv("NEO_BLOBSTORE_BACKEND", "REDIS")
    monkeypatch.setenv("NEO_BLOBSTORE_SERIALIZER", "json")
    monkeypatch.setenv("NEO_BLOBSTORE_USAGE_ENABLED", "false")
    monkeypatch.setenv("NEO_BLOBSTORE_REDIS_PORT", "6380")

    config = BlobStoreConfig.from_environment()

    assert config.namespace_prefix == "coffee"
    assert config.default_expiry_seconds == 120
    assert config.backend == CacheBackend.REDIS
    assert config.serializer == SerializerType.JSON
    assert config.usage_enabled is False
    assert config.redis_port == 6380
    assert config.config_source == ConfigSource.ENVIRONMENT


def test_from_environment_invalid_value(monkeypatch):
    monkeypatch.setenv("NEO_BLOBSTORE_ACCELERATOR_CAPACITY", "many")

    with pytest.raises(ValueError, match="NEO_BLOBSTORE_ACCELERATOR_CAPACITY"):
        BlobStoreConfig.from_environment()


def test_from_yaml_file(tmp_path):
    config_file = tmp_path / "blobstore.yaml"
    config_file.write_text(
        "namespace_prefix: smw\n"
        "backend: redis\n"
        "redis_host: cache.internal\n"
        "accelerator_capacity: 50\n"
    )

    config = BlobStoreConfig.from_file(config_file)

    assert config.namespace_prefix == "smw"
    assert config.backend == CacheBackend.REDIS
    assert config.redis_host == "cache.internal"
    assert config.accelerator_capacity == 50
    assert config.config_source == ConfigSource.FILE
    assert config.config_file_path == str(config_file)


def test_from_json_file(tmp_path):
    config_file = tmp_path / "blobstore.json"
    config_file.write_text(json.dumps({"serializer": "json", "default_expiry_seconds": 30}))

    config = BlobStoreConfig.from_file(config_file)

    assert config.serializer == SerializerType.JSON
    assert config.default_expiry_seconds == 30


def test_from_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        BlobStoreConfig.from_file(tmp_path / "missing.yaml")

    unsupported = tmp_path / "blobstore.ini"
    unsupported.write_text("[blobstore]\n")
    with pytest.raises(ValueError):
        BlobStoreConfig.from_file(unsupported)


def test_from_dict_ignores_unknown_keys():
    config = BlobStoreConfig.from_dict({"namespace_prefix": "x", "unknown": 1})

    assert config.namespace_prefix == "x"
    assert config.config_source == ConfigSource.OVERRIDE


def test_update_and_to_dict():
    config = BlobStoreConfig().update(backend="redis", redis_db=2)

    assert config.backend == CacheBackend.REDIS
    assert config.redis_db == 2
    assert config.to_dict()["backend"] == "redis"
    assert config.is_redis_enabled()
    assert config.get_redis_connection_params()["db"] == 2


def test_to_yaml_contains_values():
    assert "namespace_prefix: blobstore" in BlobStoreConfig().to_yaml()


def test_create_blob_store_config_sources(tmp_path):
    assert create_blob_store_config("defaults").config_source == ConfigSource.DEFAULTS

    overridden = create_blob_store_config("defaults", overrides={"namespace_prefix": "y"})
    assert overridden.namespace_prefix == "y"

    with pytest.raises(ValueError):
        create_blob_store_config("file")

    with pytest.raises(ValueError):
        create_blob_store_config("database")
