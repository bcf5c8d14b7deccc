"""Tests for the queryback CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from queryback.cli.main import cli


SITE_CSS = """
/* Queryback Name: tablet */
@media screen and (min-width: 768px) and (max-width: 1024px) {
  .nav { display: none; }
}
"""

PAGE = """<html><head>
<link rel="stylesheet" href="site.css">
<link rel="stylesheet" href="missing.css">
<style>
/* Queryback Name: phone */
@media (max-width: 30em) { body { font-size: 14px; } }
</style>
</head><body></body></html>
"""


@pytest.fixture
def page(tmp_path):
    (tmp_path / "site.css").write_text(SITE_CSS, encoding="utf-8")
    path = tmp_path / "index.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "extract" in result.output
        assert "match" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "queryback" in result.output


# ---------------------------------------------------------------------------
# extract command
# ---------------------------------------------------------------------------


class TestExtractCommand:
    def test_extract_html(self, page) -> None:
        result = CliRunner().invoke(cli, ["extract", str(page)])
        assert result.exit_code == 0, result.output
        assert "phone\n  all and (max-width: 30em)" in result.output
        assert "tablet\n  screen and (min-width: 768px) and (max-width: 1024px)" in result.output
        assert "missing.css" in result.output
        assert "Summary: 2 breakpoint(s), 0 error(s), 1 warning(s)" in result.output

    def test_extract_css_file(self, tmp_path) -> None:
        sheet = tmp_path / "only.css"
        sheet.write_text(SITE_CSS, encoding="utf-8")
        result = CliRunner().invoke(cli, ["extract", str(sheet)])
        assert result.exit_code == 0
        assert "tablet" in result.output

    def test_extract_json(self, page) -> None:
        result = CliRunner().invoke(cli, ["extract", str(page), "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["breakpoints"]["tablet"] == [
            {"media_type": "screen", "min_width": "768px", "max_width": "1024px", "negated": False}
        ]
        assert payload["diagnostics"][0]["rule"] == "fetch_failure"

    def test_extract_missing_source(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["extract", str(tmp_path / "nope.html")])
        assert result.exit_code == 1

    def test_extract_empty_selector(self, page) -> None:
        result = CliRunner().invoke(cli, ["extract", str(page), "--selector", ","])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# match command
# ---------------------------------------------------------------------------


class TestMatchCommand:
    def test_match_widths(self, page) -> None:
        result = CliRunner().invoke(
            cli, ["match", str(page), "--width", "400", "--width", "800", "--width", "800"]
        )
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines == [
            "400px: active=[phone] +phone",
            "800px: active=[tablet] +tablet -phone",
            "800px: active=[tablet]",
        ]

    def test_match_base_font_size(self, page) -> None:
        result = CliRunner().invoke(
            cli, ["match", str(page), "--width", "600", "--base-font-size", "20"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "600px: active=[phone] +phone"

    def test_match_requires_width(self, page) -> None:
        result = CliRunner().invoke(cli, ["match", str(page)])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# Remote sources
# ---------------------------------------------------------------------------


class TestRemoteSources:
    @pytest.fixture
    def remote(self, monkeypatch):
        import httpx

        import queryback.cli.extract as extract_module
        from queryback.fetch import FileStyleFetcher, HttpStyleFetcher, RoutingFetcher

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/app.css":
                return httpx.Response(200, text=SITE_CSS)
            return httpx.Response(404)

        def factory(config):
            http = HttpStyleFetcher(config, transport=httpx.MockTransport(handler))
            return RoutingFetcher(http=http, local=FileStyleFetcher())

        monkeypatch.setattr(extract_module, "default_fetcher", factory)

    def test_extract_css_url(self, remote) -> None:
        result = CliRunner().invoke(cli, ["extract", "https://site.test/app.css"])
        assert result.exit_code == 0, result.output
        assert "tablet\n  screen and (min-width: 768px) and (max-width: 1024px)" in result.output
        assert "No style sources found" not in result.output
        assert "Summary: 1 breakpoint(s)" in result.output

    def test_extract_css_url_with_query(self, remote) -> None:
        result = CliRunner().invoke(cli, ["extract", "https://site.test/app.css?v=3"])
        assert result.exit_code == 0, result.output
        assert "tablet" in result.output
