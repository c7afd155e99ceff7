"""Command line argument handling package."""

from wcount.ui.cli.args.parser import ArgumentParser
from wcount.ui.cli.args.options import CountArgs

__all__ = ["ArgumentParser", "CountArgs"]
