"""Core data model for breakpoint extraction."""

from queryback.model.constraint import Constraint, Measurement, Unit
from queryback.model.diagnostic import Diagnostic, Severity
from queryback.model.source import (
    ExternalStyle,
    InlineStyle,
    StyleElement,
    StyleHandle,
    StyleSource,
)

__all__ = [
    "Constraint",
    "Diagnostic",
    "ExternalStyle",
    "InlineStyle",
    "Measurement",
    "Severity",
    "StyleElement",
    "StyleHandle",
    "StyleSource",
    "Unit",
]
