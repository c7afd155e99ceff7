"""Where: src/wcount/features/report/usecases/formatter.py
What: Aggregate completed count results and render the aligned text report.
Why: Keep totals and column widths pure functions of the whole result set.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from wcount.features.counting.domain.models import (
    CountResult,
    InputSource,
    Metric,
    ReportConfiguration,
)

COLUMN_MARGIN: Final[int] = 2
TOTAL_LABEL: Final[str] = "total"


def compute_totals(results: Sequence[CountResult]) -> CountResult:
    """Sum every metric over the results that did not fail."""

    succeeded = [result for result in results if not result.failed]
    return CountResult(
        bytes=sum(result.bytes for result in succeeded),
        lines=sum(result.lines for result in succeeded),
        words=sum(result.words for result in succeeded),
        chars=sum(result.chars for result in succeeded),
    )


def compute_column_widths(
    results: Sequence[CountResult],
    metrics: Sequence[Metric],
    totals: CountResult | None = None,
) -> dict[Metric, int]:
    """Compute one display width per requested metric.

    Each width fits the widest per-source or summed value, plus
    :data:`COLUMN_MARGIN`. Failed results are ignored.

    Args:
        results: Every result of the invocation, failed ones included.
        metrics: Metrics that will be rendered.
        totals: Precomputed totals; derived from ``results`` when omitted.

    Returns:
        dict[Metric, int]: Column width keyed by metric.
    """
    if totals is None:
        totals = compute_totals(results)

    rows = [result for result in results if not result.failed]
    rows.append(totals)

    return {
        metric: max(len(str(row.value(metric))) for row in rows) + COLUMN_MARGIN
        for metric in metrics
    }


def _format_fields(result: CountResult, metrics: Sequence[Metric], widths: dict[Metric, int]) -> str:
    return "".join(f"{result.value(metric):>{widths[metric]}} " for metric in metrics)


def render_rows(
    sources: Sequence[InputSource],
    results: Sequence[CountResult],
    config: ReportConfiguration,
) -> list[str]:
    """Render one row per source in input order, plus a total row for several sources.

    Raises:
        ValueError: If ``sources`` and ``results`` are not index-aligned.
    """
    if len(sources) != len(results):
        raise ValueError(
            f"{len(sources)} source(s) but {len(results)} result(s); collections must align"
        )

    metrics = config.metrics
    totals = compute_totals(results)
    widths = compute_column_widths(results, metrics, totals)

    rows: list[str] = []
    for source, result in zip(sources, results):
        if result.error is not None:
            rows.append(f"{source.name}: {result.error}")
            continue
        rows.append(_format_fields(result, metrics, widths) + source.name)

    if len(sources) > 1:
        rows.append(_format_fields(totals, metrics, widths) + TOTAL_LABEL)

    return rows


def render_report(
    sources: Sequence[InputSource],
    results: Sequence[CountResult],
    config: ReportConfiguration,
) -> str:
    """Render the complete newline-terminated report."""

    return "".join(f"{row}\n" for row in render_rows(sources, results, config))


__all__ = [
    "COLUMN_MARGIN",
    "TOTAL_LABEL",
    "compute_column_widths",
    "compute_totals",
    "render_report",
    "render_rows",
]
