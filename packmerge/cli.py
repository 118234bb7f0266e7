"""Command-line interface for packmerge using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click
from packmerge import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """packmerge: optimal length-limited prefix code lengths."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Register subcommands
from packmerge.commands.lengths import lengths  # noqa: E402

cli.add_command(lengths)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
