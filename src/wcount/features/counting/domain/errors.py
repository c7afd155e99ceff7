"""Summary: Exception types raised while counting a single source.
Why: Let pipelines turn failures into per-source results without string matching.
"""

from __future__ import annotations


class CountingError(Exception):
    """Base class for failures scoped to one input source."""


class CharacterDecodeError(CountingError):
    """Raised when a source is not valid UTF-8.

    Only the character metric is affected; byte, line, and word counts for
    the same source stay valid.
    """

    def __init__(self, reason: str) -> None:
        self.reason: str = reason
        super().__init__(f"invalid UTF-8 input: {reason}")


class SourceReadError(CountingError):
    """Raised when reading a source fails part way through."""

    def __init__(self, name: str, cause: OSError) -> None:
        self.name: str = name
        self.cause: OSError = cause
        super().__init__(f"{name}: {describe_os_error(cause)}")


def describe_os_error(error: OSError) -> str:
    """Return the OS-level text for ``error`` without errno or filename decoration."""

    return error.strerror or str(error)


__all__ = [
    "CharacterDecodeError",
    "CountingError",
    "SourceReadError",
    "describe_os_error",
]
