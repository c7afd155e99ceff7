"""Where: src/wcount/features/counting/domain/models.py
What: Value objects shared by the counting pipeline and the report formatter.
Why: Keep per-source state explicit and immutable so pipelines never share it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class Metric(StrEnum):
    """Countable metrics, declared in report column order."""

    CHARS = "chars"
    LINES = "lines"
    WORDS = "words"
    BYTES = "bytes"


DEFAULT_METRICS: tuple[Metric, ...] = (Metric.LINES, Metric.WORDS, Metric.BYTES)

STDIN_MARKER: str = "-"


@dataclass(frozen=True, slots=True)
class InputSource:
    """One requested input.

    Attributes:
        index: Ordinal position in the request, also the result slot.
        name: Display name; empty for the implicit stdin source.
        path: File to open, or ``None`` for standard input.
    """

    index: int
    name: str
    path: Path | None = None

    @property
    def is_stdin(self) -> bool:
        return self.path is None

    @classmethod
    def from_arguments(cls, names: list[str]) -> list["InputSource"]:
        """Build sources for positional arguments.

        No names yields a single unnamed stdin source; ``-`` names stdin
        explicitly.
        """
        if not names:
            return [cls(index=0, name="")]
        return [
            cls(index=i, name=name, path=None if name == STDIN_MARKER else Path(name))
            for i, name in enumerate(names)
        ]


@dataclass(frozen=True, slots=True)
class CarryState:
    """Counting state threaded from one chunk into the next."""

    in_word: bool = False
    # Leading bytes of a UTF-8 sequence cut off by the chunk boundary.
    pending: bytes = b""
    char_error: str | None = None


@dataclass(frozen=True, slots=True)
class PartialCounts:
    """Increments contributed by a single chunk or by the final flush."""

    bytes: int = 0
    lines: int = 0
    words: int = 0
    chars: int = 0


@dataclass(frozen=True, slots=True)
class CountResult:
    """Final counts for one source.

    ``error`` marks a source that could not be opened or read; such results
    are excluded from totals and column widths. ``char_error`` only voids the
    character count.
    """

    bytes: int = 0
    lines: int = 0
    words: int = 0
    chars: int = 0
    error: str | None = None
    char_error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def failure(cls, message: str) -> "CountResult":
        return cls(error=message)

    def value(self, metric: Metric) -> int:
        """Return the count for ``metric``."""
        return int(getattr(self, metric.value))


@dataclass(frozen=True, slots=True)
class ReportConfiguration:
    """Metrics requested for one invocation."""

    bytes: bool = False
    lines: bool = False
    words: bool = False
    chars: bool = False

    @property
    def metrics(self) -> tuple[Metric, ...]:
        """Requested metrics in column order, or the default triple."""

        selected = tuple(metric for metric in Metric if getattr(self, metric.value))
        return selected or DEFAULT_METRICS

    @property
    def count_chars(self) -> bool:
        return Metric.CHARS in self.metrics


__all__ = [
    "CarryState",
    "CountResult",
    "DEFAULT_METRICS",
    "InputSource",
    "Metric",
    "PartialCounts",
    "ReportConfiguration",
    "STDIN_MARKER",
]
