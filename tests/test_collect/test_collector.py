"""Tests for style handle classification and HTML discovery."""

from queryback.collect import collect_sources, discover_styles
from queryback.model import StyleElement
from queryback.model.source import ExternalStyle, InlineStyle


# ---------------------------------------------------------------------------
# collect_sources
# ---------------------------------------------------------------------------


class TestCollectSources:
    def test_partitions_in_document_order(self):
        handles = [
            StyleElement(tag="style", text="a{}"),
            StyleElement(tag="link", locator="https://x.test/one.css"),
            StyleElement(tag="style", text="b{}"),
            StyleElement(tag="link", locator="https://x.test/two.css"),
        ]
        collected = collect_sources(handles)
        assert collected.inline_text == "a{}b{}"
        assert collected.external_locators == ("https://x.test/one.css", "https://x.test/two.css")
        assert collected.sources[1] == ExternalStyle("https://x.test/one.css")
        assert collected.sources[0] == InlineStyle("a{}")

    def test_empty(self):
        collected = collect_sources([])
        assert collected.is_empty
        assert collected.inline_text == ""

    def test_external_without_locator_dropped(self):
        collected = collect_sources([StyleElement(tag="link", locator="")])
        assert collected.is_empty

    def test_accepts_generators(self):
        collected = collect_sources(StyleElement(tag="style", text=t) for t in ("x", "y"))
        assert collected.inline_text == "xy"


# ---------------------------------------------------------------------------
# discover_styles
# ---------------------------------------------------------------------------


PAGE = """<!doctype html>
<html>
<head>
  <link rel="stylesheet" href="css/site.css">
  <link rel="icon" href="favicon.ico">
  <style>
    /* Queryback Name: small */
    @media (max-width: 480px) { body { font-size: 14px; } }
  </style>
  <LINK REL="Stylesheet" HREF="/print.css" />
</head>
<body><p style="color: red">hi</p></body>
</html>
"""


class TestDiscoverStyles:
    def test_finds_links_and_styles_in_order(self):
        elements = discover_styles(PAGE)
        assert [e.tag for e in elements] == ["link", "style", "link"]
        assert elements[0].locator == "css/site.css"
        assert "Queryback Name: small" in elements[1].text
        assert elements[2].locator == "/print.css"

    def test_non_stylesheet_links_ignored(self):
        elements = discover_styles(PAGE)
        assert all(e.locator != "favicon.ico" for e in elements)

    def test_base_url_resolution(self):
        elements = discover_styles(PAGE, base_url="https://example.test/blog/post.html")
        links = [e.locator for e in elements if e.is_external]
        assert links == ["https://example.test/blog/css/site.css", "https://example.test/print.css"]

    def test_selector_limits_tags(self):
        elements = discover_styles(PAGE, selector="style")
        assert [e.tag for e in elements] == ["style"]

    def test_unsupported_selector_part_ignored(self, caplog):
        with caplog.at_level("WARNING"):
            elements = discover_styles(PAGE, selector="link, div")
        assert [e.tag for e in elements] == ["link", "link"]
        assert "div" in caplog.text
