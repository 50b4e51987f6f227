"""Plugins: the built-in registry, the plugin context and composition."""

from gust.plugins.base import (
    GeneratedStyles,
    Plugin,
    PluginContext,
    PluginHandler,
    parse_styles,
    wrap_with_variants,
)
from gust.plugins.composer import compose, resolve_plugins
from gust.plugins.core import CORE_PLUGIN_NAMES, CORE_PLUGINS, flatten_color_palette

__all__ = [
    "Plugin",
    "PluginHandler",
    "PluginContext",
    "GeneratedStyles",
    "parse_styles",
    "wrap_with_variants",
    "compose",
    "resolve_plugins",
    "CORE_PLUGINS",
    "CORE_PLUGIN_NAMES",
    "flatten_color_palette",
]
