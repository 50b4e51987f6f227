"""Read a user configuration file. Every call reads the file again."""

from __future__ import annotations

import json
import logging
import runpy
from pathlib import Path
from typing import Any

from gust.errors import ConfigLoadError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES = ("gust.config.py", "gust.config.json")


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"Invalid JSON in {path}: {exc}", path=str(path), cause=exc) from exc


def _load_python(path: Path) -> Any:
    try:
        namespace = runpy.run_path(str(path))
    except Exception as exc:
        raise ConfigLoadError(f"Error executing {path}: {exc}", path=str(path), cause=exc) from exc
    if "config" not in namespace:
        raise ConfigLoadError(f"{path} does not define a module-level 'config'", path=str(path))
    return namespace["config"]


def load_configuration(path: str | Path) -> dict[str, Any]:
    """Load a user configuration mapping from a ``.json`` or ``.py`` file.

    Python files must define a module-level ``config`` dict; they may put
    plugin callables in ``config["plugins"]``.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}", path=str(path))

    if path.suffix == ".json":
        data = _load_json(path)
    elif path.suffix == ".py":
        data = _load_python(path)
    else:
        raise ConfigLoadError(
            f"Unsupported config file type '{path.suffix}' (expected .json or .py)",
            path=str(path),
        )

    if not isinstance(data, dict):
        raise ConfigLoadError(f"{path} must contain an object/dict at the top level", path=str(path))
    logger.debug("Loaded configuration from %s", path)
    return data


def find_configuration(directory: str | Path = ".") -> Path | None:
    """Return the first default-named config file in *directory*, if any."""
    for name in DEFAULT_CONFIG_NAMES:
        candidate = Path(directory) / name
        if candidate.is_file():
            return candidate
    return None
