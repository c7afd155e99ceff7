"""Shared path utilities for configuration and log locations.

This module centralizes how the application discovers locations for
its config file.

Policy:
- Config: ``$WCOUNT_CONFIG`` when set, otherwise
  ``~/.config/wcount/config.toml``.
- Logs: only written when the config names a ``log_file``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_PATH: Final[str] = "WCOUNT_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _default_config_dir() -> Path:
    """Return the per-user configuration directory."""

    return Path.home() / ".config" / "wcount"


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Args:
        env: Environment mapping to consult instead of ``os.environ``.

    Returns:
        Path: Resolved config file location. The file may not exist.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _default_config_dir() / "config.toml",
    )


__all__ = [
    "default_config_path",
    "resolve_overridable_path",
]
