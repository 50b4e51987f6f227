"""CLI command: gust screens -- list breakpoints in emission order."""

from __future__ import annotations

import sys

import click

from gust.config import load_configuration, resolve_config
from gust.css.media import build_media_query
from gust.errors import GustError


@click.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Config file (.json or .py)",
)
def screens(config_path: str | None) -> None:
    """Show each configured breakpoint and the media query it produces."""
    try:
        configuration = resolve_config(load_configuration(config_path) if config_path else None)
    except GustError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not configuration.screens:
        click.echo("No screens configured.")
        return
    width = max(len(name) for name in configuration.screens)
    for name, value in configuration.screens.items():
        click.echo(f"  {name.ljust(width)}  @media {build_media_query(value)}")
