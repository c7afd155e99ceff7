"""Command line argument options."""

from dataclasses import dataclass, field
from typing import final

from wcount.features.counting import ReportConfiguration


@final
@dataclass(slots=True)
class CountArgs:
    """Parsed command line arguments for a counting run."""

    files: list[str] = field(default_factory=list)
    report: ReportConfiguration = field(default_factory=ReportConfiguration)


__all__ = ["CountArgs"]
