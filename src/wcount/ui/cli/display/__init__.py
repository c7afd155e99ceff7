"""Display management for CLI interface."""

from wcount.ui.cli.display.report import ReportDisplay

__all__ = ["ReportDisplay"]
