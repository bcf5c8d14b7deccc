"""Event types emitted by a Queryback pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionStarted:
    run: int
    source_count: int

    event_name = "extraction:start"


@dataclass(frozen=True)
class StylesAggregated:
    run: int
    external_count: int
    failed_count: int

    event_name = "extraction:aggregated"


@dataclass(frozen=True)
class ExtractionCompleted:
    run: int
    generation: int
    breakpoint_count: int
    diagnostic_count: int

    event_name = "extraction:complete"


@dataclass(frozen=True)
class ExtractionFailed:
    run: int
    error: str

    event_name = "extraction:fail"


@dataclass(frozen=True)
class BreakpointEntered:
    name: str
    width: float

    @property
    def event_name(self) -> str:
        return f"breakpoint:{self.name}:enter"


@dataclass(frozen=True)
class BreakpointExited:
    name: str
    width: float

    @property
    def event_name(self) -> str:
        return f"breakpoint:{self.name}:exit"
