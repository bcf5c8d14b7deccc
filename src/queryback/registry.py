"""BreakpointRegistry: name -> constraints mapping with a generation counter."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from queryback.model.constraint import Constraint


class BreakpointRegistry:
    """Owns the breakpoint mapping for one pipeline.

    Names may repeat across annotated rules; every occurrence appends its
    constraints under the same key. ``generation`` increases on every
    reset and every full repopulation.
    """

    def __init__(self) -> None:
        self._breakpoints: dict[str, list[Constraint]] = {}
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def generation(self) -> int:
        return self._generation

    def reset(self) -> None:
        """Forget every breakpoint."""
        with self._lock:
            self._breakpoints = {}
            self._generation += 1

    def add(self, name: str, constraint: Constraint) -> None:
        """Append *constraint* to *name*, creating the entry if needed."""
        with self._lock:
            self._breakpoints.setdefault(name, []).append(constraint)

    def replace(self, entries: Iterable[tuple[str, Constraint]]) -> int:
        """Atomically swap in a freshly parsed mapping; returns the new generation."""
        fresh: dict[str, list[Constraint]] = {}
        for name, constraint in entries:
            fresh.setdefault(name, []).append(constraint)
        with self._lock:
            self._breakpoints = fresh
            self._generation += 1
            return self._generation

    def get(self, name: str) -> tuple[Constraint, ...]:
        with self._lock:
            return tuple(self._breakpoints.get(name, ()))

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._breakpoints)

    def snapshot(self) -> tuple[int, dict[str, tuple[Constraint, ...]]]:
        """Return ``(generation, mapping)`` read under one lock."""
        with self._lock:
            return self._generation, {k: tuple(v) for k, v in self._breakpoints.items()}

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._breakpoints

    def __len__(self) -> int:
        with self._lock:
            return len(self._breakpoints)
