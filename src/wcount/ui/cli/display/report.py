"""src/wcount/ui/cli/display/report.py
What: Write the rendered count report to standard output.
Why: Keep output handling out of the counting and formatting layers.
"""

from __future__ import annotations

import sys
from typing import BinaryIO, final

from wcount.application.services.count_service import CountReport

# Undecodable file names arrive as lone surrogates; this restores their bytes.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


@final
class ReportDisplay:
    """Handles report output in CLI."""

    stream: BinaryIO | None

    def __init__(self, stream: BinaryIO | None = None) -> None:
        """Initialize report display.

        Args:
            stream: Binary stream to write to. Defaults to stdout's buffer,
                looked up when the report is shown.
        """
        self.stream = stream

    def show_report(self, report: CountReport) -> None:
        """Write the report bytes unchanged.

        Names are emitted exactly as given, including tabs, carriage returns,
        and bytes that are not valid UTF-8.

        Args:
            report: Completed counting report.
        """
        if not report.text:
            return
        stream = self.stream
        if stream is None:
            sys.stdout.flush()
            stream = sys.stdout.buffer
        _ = stream.write(report.text.encode(_ENCODING, _ERRORS))
        stream.flush()
