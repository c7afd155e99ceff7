"""Filesystem helpers for opening count sources."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from wcount.platform.logging import logger


def advise_sequential(fileno: int) -> bool:
    """Hint the kernel that ``fileno`` will be read front to back.

    Returns:
        bool: ``True`` when the hint was issued. Platforms without
        ``posix_fadvise`` and descriptors that reject it return ``False``.
    """
    fadvise = getattr(os, "posix_fadvise", None)
    if fadvise is None:
        return False
    try:
        fadvise(fileno, 0, 0, os.POSIX_FADV_SEQUENTIAL)
    except OSError as e:
        logger.debug("posix_fadvise failed on fd %d: %s", fileno, e)
        return False
    return True


@contextmanager
def open_for_counting(path: Path) -> Iterator[BinaryIO]:
    """Open ``path`` for unbuffered binary reads and close it afterwards.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "rb", buffering=0) as handle:
        _ = advise_sequential(handle.fileno())
        yield handle


__all__ = ["advise_sequential", "open_for_counting"]
