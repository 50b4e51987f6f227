"""CLI command: gust build -- process a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from gust.config import find_configuration, load_configuration
from gust.css import parse_css
from gust.errors import GustError
from gust.processor import process


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Config file (.json or .py); defaults to gust.config.py/.json in the cwd",
)
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write CSS here instead of stdout")
def build(stylesheet: str, config_path: str | None, output: str | None) -> None:
    """Process STYLESHEET: substitute directives and expand variants.

    Warnings are printed to stderr; the exit code is 1 on any error.
    """
    css_path = Path(stylesheet)

    try:
        if config_path is None:
            found = find_configuration()
            config_path = str(found) if found else None
        user_config = load_configuration(config_path) if config_path else None
        root = parse_css(css_path.read_text(encoding="utf-8"), filename=str(css_path))
        result = process(root, user_config)
    except GustError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for diag in result.diagnostics:
        click.echo(str(diag), err=True)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result.css, nl=False)
