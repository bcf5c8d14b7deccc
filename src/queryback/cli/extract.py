"""CLI command: queryback extract -- list the breakpoints declared by a document."""

from __future__ import annotations

import dataclasses
import json

import click

from queryback.cli._source import load_handles
from queryback.config import QuerybackConfig
from queryback.errors import ConfigError
from queryback.fetch.local import default_fetcher
from queryback.model.diagnostic import Severity
from queryback.pipeline import Queryback


@click.command()
@click.argument("source")
@click.option("--base-url", default=None, help="Resolve relative stylesheet links against this URL.")
@click.option("--selector", default=QuerybackConfig.selector, show_default=True, help="Style elements to collect.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def extract(source: str, base_url: str | None, selector: str, as_json: bool) -> None:
    """Extract annotated breakpoints from an HTML page, CSS file or URL.

    Prints every breakpoint with its constraints, followed by any
    diagnostics collected along the way.
    """
    config = dataclasses.replace(QuerybackConfig(), selector=selector)
    try:
        config.validate()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    fetcher = default_fetcher(config)
    try:
        handles = load_handles(source, fetcher, selector, base_url)
        with Queryback(config, fetcher=fetcher) as session:
            result = session.run(handles)
    finally:
        fetcher.close()

    if as_json:
        payload = {
            "breakpoints": {
                name: [c.to_dict() for c in constraints]
                for name, constraints in result.breakpoints.items()
            },
            "diagnostics": [
                {"rule": d.rule, "severity": d.severity.value, "message": d.message}
                for d in result.diagnostics
            ],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    for name, constraints in result.breakpoints.items():
        click.echo(name)
        for constraint in constraints:
            click.echo(f"  {constraint.describe()}")

    if result.diagnostics:
        click.echo()
        for diag in result.diagnostics:
            click.echo(str(diag))

    errors = [d for d in result.diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in result.diagnostics if d.severity is Severity.WARNING]
    click.echo()
    click.echo(
        f"Summary: {len(result.breakpoints)} breakpoint(s), "
        f"{len(errors)} error(s), {len(warnings)} warning(s)"
    )
