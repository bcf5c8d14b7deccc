"""Classify style handles into inline text and external locators."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from queryback.model.source import ExternalStyle, InlineStyle, StyleHandle, StyleSource

__all__ = ["CollectedSources", "collect_sources"]


@dataclass(frozen=True)
class CollectedSources:
    """Result of classifying the handles from one selector scan."""

    sources: tuple[StyleSource, ...]

    @property
    def inline_text(self) -> str:
        return "".join(s.text for s in self.sources if isinstance(s, InlineStyle))

    @property
    def external_locators(self) -> tuple[str, ...]:
        return tuple(s.locator for s in self.sources if isinstance(s, ExternalStyle))

    @property
    def is_empty(self) -> bool:
        return not self.external_locators and not self.inline_text


def collect_sources(handles: Iterable[StyleHandle]) -> CollectedSources:
    """Partition *handles* into inline and external sources, keeping document order.

    No I/O happens here. External handles without a locator are dropped.
    """
    sources: list[StyleSource] = []
    for handle in handles:
        if handle.is_external:
            if handle.locator:
                sources.append(ExternalStyle(locator=handle.locator))
        else:
            sources.append(InlineStyle(text=handle.text or ""))
    return CollectedSources(sources=tuple(sources))
