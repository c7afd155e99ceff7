# Where: wcount.features.counting.__init__
# What: Expose counting services, value objects, and errors.
# Why: Provide a cohesive import surface for UI and integration layers.

from .domain.errors import CharacterDecodeError, CountingError, SourceReadError
from .domain.models import (
    CarryState,
    CountResult,
    InputSource,
    Metric,
    PartialCounts,
    ReportConfiguration,
)
from .usecases.dispatcher import CountingEvent, Dispatcher
from .usecases.engine import CountingEngine
from .usecases.reader import iter_chunks

__all__ = [
    "CarryState",
    "CharacterDecodeError",
    "CountResult",
    "CountingEngine",
    "CountingError",
    "CountingEvent",
    "Dispatcher",
    "InputSource",
    "Metric",
    "PartialCounts",
    "ReportConfiguration",
    "SourceReadError",
    "iter_chunks",
]
