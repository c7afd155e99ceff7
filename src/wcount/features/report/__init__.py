"""Summary: Report feature exports for aggregation and rendering.
Why: Provide a single import surface for the UI and application layers.
"""

from .usecases.formatter import (
    COLUMN_MARGIN,
    TOTAL_LABEL,
    compute_column_widths,
    compute_totals,
    render_report,
    render_rows,
)

__all__ = [
    "COLUMN_MARGIN",
    "TOTAL_LABEL",
    "compute_column_widths",
    "compute_totals",
    "render_report",
    "render_rows",
]
