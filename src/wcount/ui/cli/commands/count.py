"""src/wcount/ui/cli/commands/count.py
What: Execute a counting run for parsed CLI arguments.
Why: Bridge parsed arguments with the application service and report display.
"""

from wcount.application.services.count_service import CountReport, CountRequest, CountService
from wcount.ui.cli.args.options import CountArgs
from wcount.ui.cli.display.report import ReportDisplay


class CountCommand:
    """Command for counting the requested inputs."""

    args: CountArgs
    app: CountService
    request: CountRequest
    report_display: ReportDisplay

    def __init__(
        self,
        args: CountArgs,
        *,
        app: CountService | None = None,
        report_display: ReportDisplay | None = None,
    ) -> None:
        """Initialize count command.

        Args:
            args: Command line arguments.
            app: Application service; a default one is built when omitted.
            report_display: Output target; stdout when omitted.
        """
        self.args = args
        self.app = app or CountService()
        self.request = CountRequest(names=list(args.files), config=args.report)
        self.report_display = report_display or ReportDisplay()

    def execute(self) -> CountReport:
        """Execute the counting run and print its report.

        Returns:
            The completed report.
        """
        report = self.app.run(self.request)
        self.report_display.show_report(report)
        return report
