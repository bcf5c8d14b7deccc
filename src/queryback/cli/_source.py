"""Turn a CLI SOURCE argument into style handles."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import click

from queryback.collect.html import discover_styles
from queryback.errors import FetchError
from queryback.fetch.local import StyleFetcher
from queryback.model.source import StyleElement


def is_url(source: str) -> bool:
    return urlparse(source).scheme.lower() in ("http", "https")


def load_handles(
    source: str,
    fetcher: StyleFetcher,
    selector: str,
    base_url: str | None = None,
) -> list[StyleElement]:
    """Read SOURCE (HTML file, CSS file or http(s) URL) and return its style handles.

    A SOURCE whose path ends in ``.css`` is treated as a single style sheet.
    Exits with code 1 if SOURCE itself cannot be read.
    """
    if is_url(source):
        suffix = PurePosixPath(urlparse(source).path).suffix
        default_base = source
    else:
        path = Path(source)
        suffix = path.suffix
        default_base = path.resolve().as_uri()

    try:
        text = fetcher.fetch(source)
    except FetchError as exc:
        click.echo(f"Cannot read {source}: {exc}", err=True)
        raise SystemExit(1) from exc

    if suffix.lower() == ".css":
        return [StyleElement(tag="style", text=text)]
    return discover_styles(text, selector=selector, base_url=base_url or default_base)
