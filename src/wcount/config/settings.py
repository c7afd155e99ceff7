"""Where: src/wcount/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

import os

from wcount.config.config import (
    CHUNK_SIZE_DEFAULT,
    WORKER_MULTIPLIER_DEFAULT,
    config as app_config,
)

# Reader ----------------------------------------------------------------------

_chunk_size = getattr(app_config, "chunk_size", CHUNK_SIZE_DEFAULT)
CHUNK_SIZE: int = _chunk_size if _chunk_size > 0 else CHUNK_SIZE_DEFAULT


# Dispatcher ------------------------------------------------------------------

_worker_multiplier = getattr(app_config, "worker_multiplier", WORKER_MULTIPLIER_DEFAULT)
WORKER_MULTIPLIER: int = (
    _worker_multiplier if _worker_multiplier > 0 else WORKER_MULTIPLIER_DEFAULT
)


def max_workers_for(source_count: int, multiplier: int = WORKER_MULTIPLIER) -> int:
    """Size the worker pool for ``source_count`` files.

    The pool never exceeds the number of files and never drops below one.
    """
    cpus = os.cpu_count() or 1
    return max(1, min(source_count, multiplier * cpus))


__all__ = [
    "CHUNK_SIZE",
    "WORKER_MULTIPLIER",
    "max_workers_for",
]
