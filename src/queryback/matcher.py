"""ViewportMatcher: tracks which breakpoints are active as the viewport width changes."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from queryback.model.constraint import Constraint
from queryback.registry import BreakpointRegistry


@dataclass(frozen=True)
class ViewportState:
    width: float | None = None
    active: frozenset[str] = frozenset()


@dataclass(frozen=True)
class MatchDelta:
    """Result of one evaluation."""

    width: float
    active: frozenset[str]
    entered: frozenset[str]
    exited: frozenset[str]

    @property
    def changed(self) -> bool:
        return bool(self.entered or self.exited)


class ViewportMatcher:
    """Compares a viewport width against every breakpoint in a registry.

    A breakpoint is active when any of its constraints matches. Only the
    media types in *media_types* can match a width check.
    """

    def __init__(
        self,
        registry: BreakpointRegistry,
        base_font_size: float = 16.0,
        media_types: Iterable[str] = ("all", "screen"),
    ) -> None:
        self.registry = registry
        self.base_font_size = base_font_size
        self.media_types = frozenset(t.lower() for t in media_types)
        self._state = ViewportState()

    @property
    def state(self) -> ViewportState:
        return self._state

    def reset(self) -> None:
        self._state = ViewportState()

    def constraint_matches(self, constraint: Constraint, width: float) -> bool:
        return self._query_matches(constraint, width) != constraint.negated

    def _query_matches(self, constraint: Constraint, width: float) -> bool:
        if constraint.media_type not in self.media_types:
            return False
        if constraint.min_width is not None and width < constraint.min_width.to_pixels(self.base_font_size):
            return False
        if constraint.max_width is not None and width > constraint.max_width.to_pixels(self.base_font_size):
            return False
        return True

    def active_names(self, width: float) -> frozenset[str]:
        _, breakpoints = self.registry.snapshot()
        return frozenset(
            name
            for name, constraints in breakpoints.items()
            if any(self.constraint_matches(c, width) for c in constraints)
        )

    def evaluate(self, width: float) -> MatchDelta:
        """Evaluate *width* and return what entered and exited since the last call."""
        if not math.isfinite(width) or width < 0:
            raise ValueError(f"viewport width must be a finite, non-negative number, got {width!r}")
        active = self.active_names(width)
        previous = self._state.active
        self._state = ViewportState(width=width, active=active)
        return MatchDelta(
            width=width,
            active=active,
            entered=active - previous,
            exited=previous - active,
        )
