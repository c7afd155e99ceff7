"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``WCOUNT_CONFIG`` at a temporary file that does not exist yet."""

    target = tmp_path / "wcount" / "config.toml"
    monkeypatch.setenv("WCOUNT_CONFIG", str(target))
    return target


@pytest.fixture
def fresh_config() -> Iterator[None]:
    """Reset configuration singletons around a test run."""

    import wcount.config.config as config_module

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield None
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
