"""Local file fetcher and scheme-based routing between fetchers."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from queryback.config import QuerybackConfig
from queryback.errors import FetchError
from queryback.fetch.http import HttpStyleFetcher


class StyleFetcher(Protocol):
    """Resolves one locator to style sheet text, raising on failure."""

    def fetch(self, locator: str) -> str: ...


class FileStyleFetcher:
    """Reads ``file://`` URLs or plain filesystem paths."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root

    def _path_for(self, locator: str) -> Path:
        parsed = urlparse(locator)
        if parsed.scheme == "file":
            return Path(url2pathname(unquote(parsed.path)))
        path = Path(locator)
        if self.root is not None and not path.is_absolute():
            path = self.root / path
        return path

    def fetch(self, locator: str) -> str:
        path = self._path_for(locator)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(f"Could not read {path}: {exc}", locator=locator, cause=exc) from exc


class RoutingFetcher:
    """Sends ``http``/``https`` locators to one fetcher and everything else to another."""

    def __init__(self, http: StyleFetcher, local: StyleFetcher) -> None:
        self.http = http
        self.local = local

    def fetch(self, locator: str) -> str:
        scheme = urlparse(locator).scheme.lower()
        if scheme in ("http", "https"):
            return self.http.fetch(locator)
        return self.local.fetch(locator)

    def close(self) -> None:
        for fetcher in (self.http, self.local):
            close = getattr(fetcher, "close", None)
            if close is not None:
                close()


def default_fetcher(config: QuerybackConfig | None = None, root: Path | None = None) -> RoutingFetcher:
    """Build the fetcher used when none is injected."""
    return RoutingFetcher(http=HttpStyleFetcher(config), local=FileStyleFetcher(root))
