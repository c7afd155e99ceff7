"""Rich handler rendering structured counting events.

Where: platform/logging/handlers.py
What: Style ``counting_event`` log records with icons, colours, and compact metrics.
Why: Keep presentation rules for diagnostics out of the counting pipeline.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class CountingRichHandler(RichHandler):
    """Rich handler that renders counting events on a single styled line."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "counting.dispatch.start": ("🚀", "cyan"),
        "counting.dispatch.complete": ("✅", "green"),
        "counting.source.start": ("📄", "blue"),
        "counting.source.complete": ("🔢", "green"),
        "counting.source.error": ("⛔", "red"),
        "counting.chars.error": ("⚠️", "yellow"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "counting.dispatch.start": "Dispatch start",
        "counting.dispatch.complete": "Dispatch complete",
        "counting.source.start": "Counting ",
        "counting.source.complete": "Counted ",
        "counting.source.error": "Failed ",
        "counting.chars.error": "Character decoding failed for ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _display_name(record: logging.LogRecord) -> str:
        name = getattr(record, "source_name", None)
        if not isinstance(name, str):
            return ""
        return name or "<stdin>"

    @staticmethod
    def _collect_metrics(record: logging.LogRecord, event: str) -> list[str]:
        """Gather the ``key=value`` details shown after an event."""

        metrics: list[str] = []
        if event == "counting.dispatch.start":
            for key, label in (("total_sources", "sources"), ("max_workers", "workers")):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{label}={value}")
        elif event == "counting.dispatch.complete":
            failed = getattr(record, "failed", None)
            if isinstance(failed, int):
                metrics.append(f"failed={failed}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
        elif event == "counting.source.complete":
            for key in ("lines", "words", "bytes"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(duration_ms, (int, float)):
                metrics.append(f"{duration_ms:.2f} ms")
        else:
            error_message = getattr(record, "error_message", None)
            if error_message:
                metrics.append(str(error_message))
        return metrics

    def _render_counting_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured counting events with dedicated styling."""

        event = getattr(record, "counting_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_PREFIXES.get(event, event))

        if event.startswith("counting.source") or event == "counting.chars.error":
            sequence = getattr(record, "sequence", None)
            total_sources = getattr(record, "total_sources", None)
            _ = body.append(self._display_name(record), style=Style(color="white"))
            if isinstance(sequence, int) and isinstance(total_sources, int) and total_sources > 0:
                _ = body.append(f" [{sequence}/{total_sources}]")

        metrics = self._collect_metrics(record, event)
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for counting events."""

        counting_text = self._render_counting_message(record)
        if counting_text is not None:
            return counting_text

        return super().render_message(record, message)


__all__ = ["CountingRichHandler"]
