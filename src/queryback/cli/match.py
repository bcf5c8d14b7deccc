"""CLI command: queryback match -- report which breakpoints a viewport width activates."""

from __future__ import annotations

import dataclasses

import click

from queryback.cli._source import load_handles
from queryback.config import QuerybackConfig
from queryback.errors import ConfigError
from queryback.fetch.local import default_fetcher
from queryback.pipeline import Queryback


@click.command()
@click.argument("source")
@click.option("--width", "widths", type=click.FloatRange(min=0), multiple=True, required=True, help="Viewport width in px; repeat to simulate resizing.")
@click.option("--base-font-size", type=float, default=QuerybackConfig.base_font_size, show_default=True, help="Pixels per em.")
@click.option("--base-url", default=None, help="Resolve relative stylesheet links against this URL.")
@click.option("--selector", default=QuerybackConfig.selector, show_default=True, help="Style elements to collect.")
def match(
    source: str,
    widths: tuple[float, ...],
    base_font_size: float,
    base_url: str | None,
    selector: str,
) -> None:
    """Evaluate viewport widths in order and print entered/exited breakpoints."""
    config = dataclasses.replace(QuerybackConfig(), selector=selector, base_font_size=base_font_size)
    try:
        config.validate()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    fetcher = default_fetcher(config)
    try:
        handles = load_handles(source, fetcher, selector, base_url)
        with Queryback(config, fetcher=fetcher) as session:
            session.run(handles)
            for width in widths:
                delta = session.evaluate(width)
                parts = [f"{width:g}px: active=[{', '.join(sorted(delta.active))}]"]
                parts.extend(f"+{name}" for name in sorted(delta.entered))
                parts.extend(f"-{name}" for name in sorted(delta.exited))
                click.echo(" ".join(parts))
    finally:
        fetcher.close()
