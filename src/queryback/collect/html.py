"""Discover ``<style>`` and ``<link rel="stylesheet">`` elements in an HTML document."""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from urllib.parse import urljoin

from queryback.model.source import StyleElement

__all__ = ["StyleElementIndex", "discover_styles"]

logger = logging.getLogger(__name__)

SUPPORTED_TAGS = frozenset({"link", "style"})


class StyleElementIndex(HTMLParser):
    """Collects style elements in document order."""

    def __init__(self, tags: frozenset[str], base_url: str | None = None) -> None:
        super().__init__(convert_charrefs=True)
        self.tags = tags
        self.base_url = base_url
        self.elements: list[StyleElement] = []
        self._style_chunks: list[str] | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        tag = tag.lower()
        if tag == "style" and "style" in self.tags:
            self._style_chunks = []
        elif tag == "link" and "link" in self.tags:
            attr_map = {k.lower(): (v or "") for k, v in attrs}
            rels = attr_map.get("rel", "").lower().split()
            href = attr_map.get("href", "").strip()
            if "stylesheet" in rels and href:
                if self.base_url:
                    href = urljoin(self.base_url, href)
                self.elements.append(StyleElement(tag="link", locator=href))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.handle_starttag(tag, attrs)

    def handle_data(self, data: str) -> None:
        if self._style_chunks is not None:
            self._style_chunks.append(data)

    def handle_endtag(self, tag: str) -> None:
        if tag.lower() == "style" and self._style_chunks is not None:
            self.elements.append(StyleElement(tag="style", text="".join(self._style_chunks)))
            self._style_chunks = None


def discover_styles(
    html: str,
    selector: str = "link, style",
    base_url: str | None = None,
) -> list[StyleElement]:
    """Return the style elements of *html* matched by *selector*.

    The selector is a comma-separated list of tag names; only ``link`` and
    ``style`` are meaningful. Relative ``href`` values are resolved against
    *base_url* when given.
    """
    tags = {part.strip().lower() for part in selector.split(",") if part.strip()}
    for unknown in sorted(tags - SUPPORTED_TAGS):
        logger.warning("Ignoring unsupported selector part %r", unknown)
    index = StyleElementIndex(frozenset(tags & SUPPORTED_TAGS), base_url=base_url)
    index.feed(html)
    index.close()
    logger.debug("Discovered %d style element(s)", len(index.elements))
    return index.elements
