"""Configuration management for wcount."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from wcount.config.paths import default_config_path
from wcount.platform.logging import logger

CHUNK_SIZE_DEFAULT: Final[int] = 16 * 1024
WORKER_MULTIPLIER_DEFAULT: Final[int] = 4


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Size in bytes of each read issued against an input
    chunk_size: int = CHUNK_SIZE_DEFAULT

    # Worker pool size as a multiple of the available CPUs
    worker_multiplier: int = WORKER_MULTIPLIER_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "Config":
        """Build a configuration from a parsed TOML table.

        Unknown keys are ignored so older binaries accept newer files.

        Raises:
            ConfigError: If a known key carries a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in raw.items():
            if key not in known:
                logger.debug("Ignoring unknown configuration key: %s", key)
                continue
            values[key] = value

        for key in ("chunk_size", "worker_multiplier"):
            value = values.get(key)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigError(f"'{key}' must be an integer, got {value!r}")

        log_file = values.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(f"'log_file' must be a string, got {log_file!r}")

        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written to disk.

        Args:
            config_file: Explicit file to read instead of the default location.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file or default_config_path()

        if target.is_file():
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration from %s: %s", target, e)
                raise ConfigError(f"{target}: {e}") from e

            instance = cls.from_mapping(config_dict)
            logger.debug("Configuration loaded from %s", target)
        else:
            instance = cls()
            logger.debug("No configuration at %s, using defaults", target)

        cls._instance = instance
        return instance


# Global configuration instance
config = Config.load()
