"""CLI command: gust init -- write a starter config file."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

STARTER_CONFIG = {
    "theme": {"extend": {}},
    "variants": {},
    "separator": ":",
    "prefix": "",
    "important": False,
    "core_plugins": True,
}


@click.command()
@click.argument("path", type=click.Path(dir_okay=False), default="gust.config.json")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(path: str, force: bool) -> None:
    """Create a starter JSON config at PATH (default: gust.config.json)."""
    target = Path(path)
    if target.exists() and not force:
        click.echo(f"{target} already exists (use --force to overwrite)", err=True)
        sys.exit(1)
    target.write_text(json.dumps(STARTER_CONFIG, indent=2) + "\n", encoding="utf-8")
    click.echo(f"Created {target}")
