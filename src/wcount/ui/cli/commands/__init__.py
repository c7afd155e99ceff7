"""Command execution package for CLI."""

from wcount.ui.cli.commands.count import CountCommand

__all__ = ["CountCommand"]
