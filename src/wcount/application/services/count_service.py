"""Application service for counting inputs.

This layer builds sources, runs the dispatcher, and renders the report so
the CLI only deals with arguments and presentation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, final

from wcount.features.counting import CountResult, Dispatcher, InputSource, ReportConfiguration
from wcount.features.report import render_report


@dataclass(frozen=True)
class CountRequest:
    """Input parameters for a counting run.

    Attributes:
        names: Positional inputs; empty means standard input.
        config: Metrics to report.
    """

    names: list[str] = field(default_factory=list)
    config: ReportConfiguration = field(default_factory=ReportConfiguration)


@dataclass(frozen=True)
class CountReport:
    """Outcome of a counting run."""

    sources: list[InputSource]
    results: list[CountResult]
    text: str

    @property
    def has_failures(self) -> bool:
        """Whether any source failed, including character decoding failures."""

        return any(
            result.failed or result.char_error is not None for result in self.results
        )


@final
class CountService:
    """Orchestrate dispatch and rendering for one invocation."""

    def __init__(
        self,
        *,
        dispatcher_factory: Callable[[ReportConfiguration], Dispatcher] | None = None,
    ) -> None:
        """Create a service with an overridable dispatcher factory.

        Tests inject dispatchers bound to in-memory streams; production code
        uses the default file opener and stdin.
        """
        self._dispatcher_factory: Callable[[ReportConfiguration], Dispatcher] = (
            dispatcher_factory or Dispatcher
        )

    def run(self, request: CountRequest) -> CountReport:
        """Count every requested input and render the report.

        Args:
            request: Inputs and metrics for this run.

        Returns:
            CountReport: Sources, index-aligned results, and report text.
        """
        sources = InputSource.from_arguments(request.names)
        dispatcher = self._dispatcher_factory(request.config)
        results = dispatcher.dispatch(sources)
        text = render_report(sources, results, request.config)
        return CountReport(sources=sources, results=results, text=text)


__all__ = ["CountReport", "CountRequest", "CountService"]
