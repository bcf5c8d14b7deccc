"""Constraint model: width measurements and per-sub-query breakpoint constraints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(Enum):
    """Length units accepted in width expressions."""

    PX = "px"
    EM = "em"


@dataclass(frozen=True)
class Measurement:
    """A width bound such as ``768px`` or ``48em``."""

    value: float
    unit: Unit = Unit.PX

    def to_pixels(self, base_font_size: float = 16.0) -> float:
        """Return the bound in pixels; ems scale by *base_font_size*."""
        if self.unit is Unit.EM:
            return self.value * base_font_size
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit.value}"


@dataclass(frozen=True)
class Constraint:
    """One OR'd sub-query of a named media rule.

    A constraint with neither bound only tests the media type. A negated
    constraint (``not print and ...``) matches exactly when the rest would not.
    """

    media_type: str = "all"
    min_width: Measurement | None = None
    max_width: Measurement | None = None
    negated: bool = False

    @property
    def is_media_type_only(self) -> bool:
        return self.min_width is None and self.max_width is None

    def describe(self) -> str:
        parts = [self.media_type]
        if self.min_width is not None:
            parts.append(f"(min-width: {self.min_width})")
        if self.max_width is not None:
            parts.append(f"(max-width: {self.max_width})")
        text = " and ".join(parts)
        return f"not {text}" if self.negated else text

    def to_dict(self) -> dict:
        return {
            "media_type": self.media_type,
            "min_width": str(self.min_width) if self.min_width else None,
            "max_width": str(self.max_width) if self.max_width else None,
            "negated": self.negated,
        }
