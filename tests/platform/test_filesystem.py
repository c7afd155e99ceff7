"""Tests for source opening helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from wcount.platform.filesystem import advise_sequential, open_for_counting


def test_open_for_counting_reads_and_closes(tmp_path: Path) -> None:
    target = tmp_path / "data.bin"
    _ = target.write_bytes(b"payload")

    with open_for_counting(target) as handle:
        assert handle.read(3) == b"pay"

    assert handle.closed


def test_open_for_counting_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        with open_for_counting(tmp_path / "absent"):
            pass


def test_advise_sequential_issues_hint(mocker: MockerFixture) -> None:
    fadvise = mocker.patch.object(os, "posix_fadvise", create=True)
    _ = mocker.patch.object(os, "POSIX_FADV_SEQUENTIAL", 2, create=True)

    assert advise_sequential(7)
    fadvise.assert_called_once_with(7, 0, 0, 2)


def test_advise_sequential_tolerates_rejection(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(os, "posix_fadvise", create=True, side_effect=OSError(22, "Invalid argument"))
    _ = mocker.patch.object(os, "POSIX_FADV_SEQUENTIAL", 2, create=True)

    assert not advise_sequential(7)


def test_advise_sequential_without_platform_support(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delattr(os, "posix_fadvise", raising=False)

    assert not advise_sequential(7)
