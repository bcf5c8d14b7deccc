"""Turn an ``@media`` header into structured width constraints."""

from __future__ import annotations

import logging
import re

from queryback.model.constraint import Constraint, Measurement, Unit
from queryback.model.diagnostic import UNPARSEABLE_MEASUREMENT, Diagnostic, Severity

__all__ = ["extract_constraints", "parse_measurement", "split_sub_queries"]

logger = logging.getLogger(__name__)

# Leading media type, e.g. "screen", "only screen", "not print"
_MEDIA_TYPE_RE = re.compile(
    r"^\s*(?:(?P<prefix>only|not)\s+)?(?P<type>[A-Za-z]+)", re.IGNORECASE
)

# A width feature: (min-width: 768px)
_WIDTH_RE = re.compile(
    r"\(\s*(?P<bound>min|max)-width\s*:\s*(?P<value>[^)]*?)\s*\)",
    re.IGNORECASE,
)

_MEASUREMENT_RE = re.compile(
    r"^(?P<number>[0-9]*\.?[0-9]+)\s*(?P<unit>px|em)$",
    re.IGNORECASE,
)


def split_sub_queries(header: str) -> list[str]:
    """Split a media query list on commas that are not inside parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in header:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


def parse_measurement(raw: str) -> Measurement | None:
    """Parse ``768px`` / ``48em``; returns None for anything else."""
    match = _MEASUREMENT_RE.match(raw.strip())
    if match is None:
        return None
    return Measurement(
        value=float(match.group("number")),
        unit=Unit(match.group("unit").lower()),
    )


def _media_type(sub_query: str) -> tuple[str, bool]:
    """Return the media type and whether the sub-query is negated with ``not``."""
    head = sub_query.split("(", 1)[0]
    match = _MEDIA_TYPE_RE.match(head)
    if match is None:
        return "all", False
    negated = (match.group("prefix") or "").lower() == "not"
    media_type = match.group("type").lower()
    if media_type == "not":
        return "all", True
    if media_type == "and":
        return "all", negated
    return media_type, negated


def extract_constraints(
    header: str, name: str | None = None, line: int | None = None
) -> tuple[tuple[Constraint, ...], tuple[Diagnostic, ...]]:
    """Build one :class:`Constraint` per comma-separated sub-query of *header*.

    Width values that are not ``<number>px`` or ``<number>em`` are skipped
    with an ``unparseable_measurement`` diagnostic. When a sub-query names
    the same bound twice, the first valid one is kept.
    """
    constraints: list[Constraint] = []
    diagnostics: list[Diagnostic] = []

    for sub_query in split_sub_queries(header):
        bounds: dict[str, Measurement] = {}
        for feature in _WIDTH_RE.finditer(sub_query):
            bound = feature.group("bound").lower()
            raw_value = feature.group("value")
            measurement = parse_measurement(raw_value)
            if measurement is None:
                logger.debug("Skipping unparseable %s-width %r in %r", bound, raw_value, name)
                diagnostics.append(
                    Diagnostic(
                        rule=UNPARSEABLE_MEASUREMENT,
                        severity=Severity.WARNING,
                        message=f"Cannot parse {bound}-width value {raw_value!r}",
                        name=name,
                        line=line,
                    )
                )
                continue
            bounds.setdefault(bound, measurement)

        media_type, negated = _media_type(sub_query)
        constraints.append(
            Constraint(
                media_type=media_type,
                min_width=bounds.get("min"),
                max_width=bounds.get("max"),
                negated=negated,
            )
        )

    return tuple(constraints), tuple(diagnostics)
