"""gust CLI entry point: Click group with subcommands."""

import logging

import click

from gust import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gust")
@click.option("-v", "--verbose", is_flag=True, help="Log build progress to stderr")
def cli(verbose: bool) -> None:
    """gust - utility-first CSS generated from a design-token config."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from gust.cli.build import build  # noqa: E402
from gust.cli.init import init  # noqa: E402
from gust.cli.screens import screens  # noqa: E402

cli.add_command(build)
cli.add_command(init)
cli.add_command(screens)
