"""Summary: Pull fixed-size chunks from a byte stream until it is exhausted.
Why: Give the counting engine uniform buffers regardless of the source type.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from wcount.features.counting.domain.errors import SourceReadError


@runtime_checkable
class ReadableStream(Protocol):
    """Minimal binary stream interface consumed by the reader."""

    def read(self, size: int = -1, /) -> bytes:
        ...


def iter_chunks(stream: ReadableStream, chunk_size: int, *, name: str = "") -> Iterator[bytes]:
    """Yield successive non-empty chunks of at most ``chunk_size`` bytes.

    Args:
        stream: Binary stream to drain.
        chunk_size: Maximum number of bytes requested per read.
        name: Display name used when reporting a read failure.

    Raises:
        ValueError: If ``chunk_size`` is not positive.
        SourceReadError: If the underlying read fails part way through.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as e:
            raise SourceReadError(name, e) from e
        if not chunk:
            return
        yield chunk


__all__ = ["ReadableStream", "iter_chunks"]
