"""Event system: bus and event types for extraction and viewport changes."""

from queryback.events.bus import EventBus
from queryback.events.types import (
    BreakpointEntered,
    BreakpointExited,
    ExtractionCompleted,
    ExtractionFailed,
    ExtractionStarted,
    StylesAggregated,
)

__all__ = [
    "EventBus",
    "BreakpointEntered",
    "BreakpointExited",
    "ExtractionCompleted",
    "ExtractionFailed",
    "ExtractionStarted",
    "StylesAggregated",
]
