"""Blob store configuration management.

ONLY blob store configuration - handles store settings, defaults,
validation, and environment or file based configuration.

Following maximum separation architecture - one file = one purpose.
"""

import json
import os
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


class ConfigSource(Enum):
    """Configuration source types."""
    ENVIRONMENT = "environment"
    FILE = "file"
    DEFAULTS = "defaults"
    OVERRIDE = "override"


class CacheBackend(Enum):
    """Supported backing cache types."""
    MEMORY = "memory"
    REDIS = "redis"


class SerializerType(Enum):
    """Supported payload serializer types."""
    PICKLE = "pickle"
    JSON = "json"


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class BlobStoreConfig:
    """Blob store configuration.

    Centralizes store settings with environment variable support,
    file-based configuration, and validation.
    """

    # Store settings
    namespace_prefix: str = "blobstore"
    default_expiry_seconds: int = 0  # 0 = no expiry
    accelerator_capacity: int = 500
    usage_enabled: bool = True

    # Backend configuration
    backend: CacheBackend = CacheBackend.MEMORY
    serializer: SerializerType = SerializerType.PICKLE
    enable_compression: bool = False
    compression_threshold_bytes: int = 1024

    # Redis settings (when backend=redis)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: Optional[str] = None
    redis_ssl: bool = False
    redis_socket_timeout: int = 5

    # Development settings
    log_operations: bool = False

    # Configuration metadata
    config_source: ConfigSource = ConfigSource.DEFAULTS
    config_file_path: Optional[str] = None
    environment_prefix: str = "NEO_BLOBSTORE"

    def __post_init__(self):
        """Coerce enum fields and validate configuration values."""
        if not isinstance(self.backend, CacheBackend):
            self.backend = CacheBackend(self.backend)
        if not isinstance(self.serializer, SerializerType):
            self.serializer = SerializerType(self.serializer)
        if not isinstance(self.config_source, ConfigSource):
            self.config_source = ConfigSource(self.config_source)

        self._validate_configuration()

    def _validate_configuration(self):
        if not isinstance(self.namespace_prefix, str):
            raise ValueError("namespace_prefix must be a string")

        if self.default_expiry_seconds < 0:
            raise ValueError("default_expiry_seconds must be non-negative")

        if self.accelerator_capacity <= 0:
            raise ValueError("accelerator_capacity must be positive")

        if self.compression_threshold_bytes < 0:
            raise ValueError("compression_threshold_bytes must be non-negative")

        if self.redis_port < 1 or self.redis_port > 65535:
            raise ValueError("redis_port must be between 1 and 65535")

        if self.redis_socket_timeout <= 0:
            raise ValueError("redis_socket_timeout must be positive")

    @classmethod
    def from_environment(
        cls,
        prefix: str = "NEO_BLOBSTORE",
        defaults: Optional['BlobStoreConfig'] = None
    ) -> 'BlobStoreConfig':
        """Create configuration from environment variables.

        Args:
            prefix: Environment variable prefix
            defaults: Default configuration to override

        Returns:
            Configuration instance
        """
        base_config = defaults or cls()

        env_mapping = {
            f"{prefix}_NAMESPACE_PREFIX": ("namespace_prefix", str),
            f"{prefix}_DEFAULT_EXPIRY_SECONDS": ("default_expiry_seconds", int),
            f"{prefix}_ACCELERATOR_CAPACITY": ("accelerator_capacity", int),
            f"{prefix}_USAGE_ENABLED": ("usage_enabled", _to_bool),
            f"{prefix}_BACKEND": ("backend", lambda x: CacheBackend(x.lower())),
            f"{prefix}_SERIALIZER": ("serializer", lambda x: SerializerType(x.lower())),
            f"{prefix}_ENABLE_COMPRESSION": ("enable_compression", _to_bool),
            f"{prefix}_COMPRESSION_THRESHOLD_BYTES": ("compression_threshold_bytes", int),
            f"{prefix}_REDIS_HOST": ("redis_host", str),
            f"{prefix}_REDIS_PORT": ("redis_port", int),
            f"{prefix}_REDIS_DB": ("redis_db", int),
            f"{prefix}_REDIS_PASSWORD": ("redis_password", str),
            f"{prefix}_REDIS_SSL": ("redis_ssl", _to_bool),
            f"{prefix}_REDIS_SOCKET_TIMEOUT": ("redis_socket_timeout", int),
            f"{prefix}_LOG_OPERATIONS": ("log_operations", _to_bool),
        }

        config_dict = {}

        for env_var, (field_name, converter) in env_mapping.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    config_dict[field_name] = converter(env_value)
                except (ValueError, TypeError) as e:
                    raise ValueError(f"Invalid value for {env_var}: {env_value} - {e}") from e

        config_dict.update({
            "config_source": ConfigSource.ENVIRONMENT,
            "environment_prefix": prefix
        })

        return cls(**{**base_config.__dict__, **config_dict})

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        defaults: Optional['BlobStoreConfig'] = None
    ) -> 'BlobStoreConfig':
        """Create configuration from file (JSON or YAML).

        Args:
            file_path: Path to configuration file
            defaults: Default configuration to override

        Returns:
            Configuration instance
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, 'r') as f:
            if file_path.suffix.lower() in ['.yaml', '.yml']:
                config_data = yaml.safe_load(f) or {}
            elif file_path.suffix.lower() == '.json':
                config_data = json.load(f)
            else:
                raise ValueError(f"Unsupported configuration file format: {file_path.suffix}")

        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {file_path}")

        base_config = defaults or cls()
        config_data.update({
            "config_source": ConfigSource.FILE,
            "config_file_path": str(file_path)
        })

        return cls(**{**base_config.__dict__, **config_data})

    @classmethod
    def from_dict(
        cls,
        config_dict: Dict[str, Any],
        source: ConfigSource = ConfigSource.OVERRIDE
    ) -> 'BlobStoreConfig':
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        config_data = {key: value for key, value in config_dict.items() if key in known}
        config_data["config_source"] = source

        return cls(**config_data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config_dict = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                config_dict[field_name] = field_value.value
            else:
                config_dict[field_name] = field_value

        return config_dict

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), default_flow_style=False)

    def update(self, **kwargs) -> 'BlobStoreConfig':
        """Create new configuration with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        config_dict["config_source"] = ConfigSource.OVERRIDE

        return self.__class__(**config_dict)

    def get_redis_connection_params(self) -> Dict[str, Any]:
        """Get Redis connection parameters."""
        return {
            "host": self.redis_host,
            "port": self.redis_port,
            "db": self.redis_db,
            "password": self.redis_password,
            "ssl": self.redis_ssl,
            "socket_timeout": self.redis_socket_timeout,
        }

    def is_redis_enabled(self) -> bool:
        return self.backend == CacheBackend.REDIS

    def __str__(self) -> str:
        return f"BlobStoreConfig(backend={self.backend.value}, source={self.config_source.value})"


def create_blob_store_config(
    source: str = "environment",
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> BlobStoreConfig:
    """Factory function to create blob store configuration.

    Args:
        source: Configuration source ("environment", "file", "defaults")
        config_path: Path to configuration file (if source="file")
        overrides: Optional configuration overrides

    Returns:
        Configured blob store configuration instance
    """
    if source == "environment":
        config = BlobStoreConfig.from_environment()
    elif source == "file":
        if not config_path:
            raise ValueError("config_path required when source='file'")
        config = BlobStoreConfig.from_file(config_path)
    elif source == "defaults":
        config = BlobStoreConfig()
    else:
        raise ValueError(f"Invalid configuration source: {source}")

    if overrides:
        config = config.update(**overrides)

    return config
