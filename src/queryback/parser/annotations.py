"""Scanner for name-annotated ``@media`` rules.

Annotation example:
    /* Queryback Name: tablet */
    @media screen and (min-width: 768px) and (max-width: 1024px) {
        ...
    }

Only the rule header is captured; rule bodies are never parsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from queryback.model.diagnostic import MALFORMED_ANNOTATION, Diagnostic, Severity

__all__ = ["AnnotatedBlock", "AnnotationScan", "normalize_lines", "parse_annotations"]

DEFAULT_KEYWORD = "Queryback Name"

_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

# Horizontal whitespace at the start or end of any line
_EDGE_WS_RE = re.compile(r"^[^\S\n]+|[^\S\n]+$", re.MULTILINE)

# The rule header that must follow an annotation comment
_MEDIA_RE = re.compile(
    r"""
    \s*                      # whitespace and newlines only
    @media\b
    (?P<header>[^{};]*)      # media query list
    \{                       # opening brace of the rule
    """,
    re.VERBOSE | re.IGNORECASE,
)


@dataclass(frozen=True)
class AnnotatedBlock:
    """One annotated ``@media`` header found in the style text."""

    name: str
    header: str
    line: int


@dataclass(frozen=True)
class AnnotationScan:
    blocks: tuple[AnnotatedBlock, ...]
    diagnostics: tuple[Diagnostic, ...] = ()


@lru_cache(maxsize=16)
def _comment_pattern(keyword: str) -> re.Pattern[str]:
    # One or more spaces or tabs separate the delimiters, keyword and name
    return re.compile(
        r"/\*[ \t]+" + re.escape(keyword) + r":[ \t]+(?P<name>[^\n]*?)[ \t]+\*/",
        re.IGNORECASE,
    )


def normalize_lines(text: str) -> str:
    """Strip leading and trailing whitespace from every line, keeping line breaks."""
    return _EDGE_WS_RE.sub("", text.replace("\r\n", "\n"))


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def parse_annotations(text: str, keyword: str = DEFAULT_KEYWORD) -> AnnotationScan:
    """Find every annotated ``@media`` header in *text*, in source order.

    Annotations that are not directly followed by an ``@media`` header, or
    whose name is not made of letters, digits, ``_`` and ``-``, are skipped
    and reported as ``malformed_annotation`` diagnostics.
    """
    content = normalize_lines(text)
    blocks: list[AnnotatedBlock] = []
    diagnostics: list[Diagnostic] = []

    for comment in _comment_pattern(keyword).finditer(content):
        raw_name = comment.group("name")
        line = _line_of(content, comment.start())

        if not _NAME_RE.fullmatch(raw_name):
            diagnostics.append(
                Diagnostic(
                    rule=MALFORMED_ANNOTATION,
                    severity=Severity.WARNING,
                    message=f"Invalid breakpoint name {raw_name!r}",
                    line=line,
                )
            )
            continue

        media = _MEDIA_RE.match(content, comment.end())
        header = media.group("header").strip() if media else ""
        if not header:
            diagnostics.append(
                Diagnostic(
                    rule=MALFORMED_ANNOTATION,
                    severity=Severity.WARNING,
                    message="Annotation is not followed by an @media rule header",
                    name=raw_name,
                    line=line,
                )
            )
            continue

        blocks.append(AnnotatedBlock(name=raw_name, header=header, line=line))

    return AnnotationScan(blocks=tuple(blocks), diagnostics=tuple(diagnostics))
