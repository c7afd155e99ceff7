"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from wcount import __version__
from wcount.config.config import Config
from wcount.features.counting import ReportConfiguration
from wcount.platform.logging import setup_logger
from wcount.ui.cli.args.options import CountArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="wcount",
            usage="%(prog)s [OPTION]... [FILE]...",
            description=(
                "Print newline, word, and byte counts for each FILE, and a total line "
                "if more than one FILE is specified. A word is a non-zero-length "
                "sequence of characters delimited by white space. With no FILE, or "
                "when FILE is -, read standard input."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="Files to count",
        )
        _ = parser.add_argument(
            "-c",
            "--bytes",
            action="store_true",
            help="print the byte counts",
        )
        _ = parser.add_argument(
            "-l",
            "--lines",
            action="store_true",
            help="print the newline counts",
        )
        _ = parser.add_argument(
            "-w",
            "--words",
            action="store_true",
            help="print the word counts",
        )
        _ = parser.add_argument(
            "-m",
            "--chars",
            action="store_true",
            help="print the character counts",
        )

        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-d",
            "--debug",
            action="store_true",
            help="log per-file progress and timings to stderr",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="log errors only",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CountArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CountArgs: Processed command line arguments.

        Raises:
            SystemExit: On invalid options or ``--help``/``--version``.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.debug:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        report = ReportConfiguration(
            bytes=parsed_args.bytes,
            lines=parsed_args.lines,
            words=parsed_args.words,
            chars=parsed_args.chars,
        )

        return CountArgs(
            files=list(parsed_args.files),
            report=report,
        )
