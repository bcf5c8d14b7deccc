"""Diagnostic model: structured, non-fatal findings collected during extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


MALFORMED_ANNOTATION = "malformed_annotation"
FETCH_FAILURE = "fetch_failure"
UNPARSEABLE_MEASUREMENT = "unparseable_measurement"
EMPTY_INPUT = "empty_input"
PIPELINE_ERROR = "pipeline_error"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the style sheets being scanned.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        name: The breakpoint name involved, if applicable.
        locator: The external style sheet involved, if applicable.
        line: 1-based line in the combined style text, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    name: str | None = None
    locator: str | None = None
    line: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.name:
            location = f" [breakpoint={self.name}]"
        elif self.locator:
            location = f" [stylesheet={self.locator}]"
        if self.line is not None:
            location += f" [line={self.line}]"
        return f"{self.severity.value}{location}: {self.message}"
