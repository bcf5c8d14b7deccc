"""Style source model: handles from the selector scan and their classified forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


class StyleHandle(Protocol):
    """Anything the selector scan hands over: an inline block or a linked sheet."""

    @property
    def is_external(self) -> bool: ...

    @property
    def text(self) -> str: ...

    @property
    def locator(self) -> str | None: ...


@dataclass(frozen=True)
class StyleElement:
    """A ``<style>`` or ``<link>`` element found in an HTML document."""

    tag: str
    text: str = ""
    locator: str | None = None

    @property
    def is_external(self) -> bool:
        return self.tag == "link"


@dataclass(frozen=True)
class InlineStyle:
    text: str


@dataclass(frozen=True)
class ExternalStyle:
    locator: str


StyleSource = Union[InlineStyle, ExternalStyle]
