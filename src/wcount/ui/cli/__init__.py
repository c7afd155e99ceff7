"""Command line interface package."""

from wcount.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
