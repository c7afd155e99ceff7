"""Command line interface for wcount."""

import sys
from collections.abc import Sequence
from typing import final

from wcount.platform.logging import logger
from wcount.ui.cli.args import ArgumentParser
from wcount.ui.cli.commands import CountCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 when any input failed, 130 when interrupted.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            report = CountCommand(args).execute()
            if report.has_failures:
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside :class:`CommandProcessor`, so this return is
        only reached when every input was counted.
    """
    CommandProcessor.process_command()
    return 0
