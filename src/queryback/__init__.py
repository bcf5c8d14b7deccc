"""Queryback: named media-query breakpoints extracted from style sheets."""
from __future__ import annotations

__version__ = "0.2.0"

from queryback.config import QuerybackConfig  # noqa: E402
from queryback.errors import ConfigError, FetchError, QuerybackError  # noqa: E402
from queryback.matcher import MatchDelta, ViewportMatcher  # noqa: E402
from queryback.model import Constraint, Diagnostic, Measurement, Severity, StyleElement, Unit  # noqa: E402
from queryback.pipeline import ExtractionResult, Queryback  # noqa: E402
from queryback.registry import BreakpointRegistry  # noqa: E402

__all__ = [
    "__version__",
    "BreakpointRegistry",
    "ConfigError",
    "Constraint",
    "Diagnostic",
    "ExtractionResult",
    "FetchError",
    "MatchDelta",
    "Measurement",
    "Queryback",
    "QuerybackConfig",
    "QuerybackError",
    "Severity",
    "StyleElement",
    "Unit",
    "ViewportMatcher",
]
