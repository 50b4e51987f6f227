"""Plugin composition: run every enabled plugin once and collect its styles."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from gust.config.resolver import Configuration
from gust.errors import ConfigError, PluginExecutionError
from gust.plugins.base import GeneratedStyles, Plugin, PluginContext
from gust.plugins.core import CORE_PLUGINS

logger = logging.getLogger(__name__)


def _is_enabled(plugin: Plugin, setting: object) -> bool:
    """Apply the ``core_plugins`` setting to one built-in plugin.

    ``True``/``None`` enables everything, ``False`` disables everything, a
    mapping disables names mapped to a false value, a list is a whitelist.
    """
    if setting is None or setting is True:
        return True
    if setting is False:
        return False
    if isinstance(setting, Mapping):
        return bool(setting.get(plugin.name, True))
    if isinstance(setting, (list, tuple, set, frozenset)):
        return plugin.name in setting
    raise ConfigError(f"core_plugins must be a bool, mapping or list, got {type(setting).__name__}")


def resolve_plugins(config: Configuration) -> list[Plugin]:
    """Enabled built-in plugins, in registry order, followed by user plugins."""
    plugins = [p for p in CORE_PLUGINS if _is_enabled(p, config.core_plugins)]
    plugins.extend(Plugin.external(p) for p in config.plugins)
    return plugins


def compose(config: Configuration) -> GeneratedStyles:
    """Run each plugin exactly once and return the styles they registered.

    Entries keep plugin order and are never de-duplicated: two plugins
    emitting ``.block`` produce two rules, and the cascade decides. Any
    exception from a plugin aborts composition with
    :class:`PluginExecutionError`; no partial result is returned.
    """
    context = PluginContext(config)
    for plugin in resolve_plugins(config):
        logger.debug("Running plugin %s", plugin.name)
        try:
            plugin.handler(context)
        except Exception as exc:
            raise PluginExecutionError(plugin.name, cause=exc) from exc
    styles = context.styles
    logger.debug(
        "Composed %d base, %d component and %d utility node(s)",
        len(styles.base),
        len(styles.components),
        len(styles.utilities),
    )
    return styles
