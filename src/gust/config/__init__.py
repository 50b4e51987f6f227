"""Configuration: defaults, resolution and file loading."""

from gust.config.defaults import DEFAULT_CONFIG, DEFAULT_THEME, DEFAULT_VARIANTS
from gust.config.loader import find_configuration, load_configuration
from gust.config.resolver import MISSING, Configuration, resolve_config

__all__ = [
    "Configuration",
    "resolve_config",
    "load_configuration",
    "find_configuration",
    "MISSING",
    "DEFAULT_CONFIG",
    "DEFAULT_THEME",
    "DEFAULT_VARIANTS",
]
