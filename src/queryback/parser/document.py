"""Parse combined style text into (name, constraint) entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from queryback.model.constraint import Constraint
from queryback.model.diagnostic import Diagnostic
from queryback.parser.annotations import DEFAULT_KEYWORD, parse_annotations
from queryback.parser.constraints import extract_constraints

__all__ = ["ParsedStyles", "parse_breakpoints"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedStyles:
    """Entries in source order; a name appears once per constraint it owns."""

    entries: tuple[tuple[str, Constraint], ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(name for name, _ in self.entries))


def parse_breakpoints(text: str, keyword: str = DEFAULT_KEYWORD) -> ParsedStyles:
    """Scan *text* for annotated rules and extract every constraint they declare."""
    scan = parse_annotations(text, keyword=keyword)
    entries: list[tuple[str, Constraint]] = []
    diagnostics: list[Diagnostic] = list(scan.diagnostics)

    for block in scan.blocks:
        constraints, problems = extract_constraints(block.header, name=block.name, line=block.line)
        logger.debug("Breakpoint %s: %d constraint(s) from %r", block.name, len(constraints), block.header)
        entries.extend((block.name, c) for c in constraints)
        diagnostics.extend(problems)

    return ParsedStyles(entries=tuple(entries), diagnostics=tuple(diagnostics))
