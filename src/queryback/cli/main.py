"""Queryback CLI entry point: Click group with subcommands."""

import logging

import click

from queryback import __version__


@click.group()
@click.version_option(version=__version__, prog_name="queryback")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug detail).")
def cli(verbose: int) -> None:
    """Queryback - extract named media-query breakpoints from style sheets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from queryback.cli.extract import extract  # noqa: E402
from queryback.cli.match import match  # noqa: E402

cli.add_command(extract)
cli.add_command(match)
