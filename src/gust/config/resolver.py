"""Merge user configuration over the defaults into an immutable Configuration."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from gust.config.defaults import DEFAULT_CONFIG
from gust.errors import ConfigError, ConfigLookupError

logger = logging.getLogger(__name__)

# Sentinel for "no default supplied" in lookups.
MISSING: Any = object()

_PATH_SEGMENT_RE = re.compile(r"\[([^\]]*)\]|([^.\[\]]+)")

KNOWN_KEYS = frozenset(DEFAULT_CONFIG)


def split_path(path: str) -> list[str]:
    """Split ``"colors.red.500"`` or ``"spacing[0.5]"`` into key segments."""
    segments = []
    for bracketed, dotted in _PATH_SEGMENT_RE.findall(path):
        segment = bracketed or dotted
        segments.append(segment.strip("'\""))
    return segments


def get_path(data: Any, segments: list[str], default: Any = MISSING) -> Any:
    value = data
    for segment in segments:
        if not isinstance(value, Mapping) or segment not in value:
            return default
        value = value[segment]
    return value


def freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Configuration:
    """Resolved, read-only build configuration.

    Safe to share between concurrent builds: nothing in it can be mutated.
    """

    theme_config: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    variants_config: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    separator: str = ":"
    prefix: str | Callable[[str], str] = ""
    important: bool | str = False
    core_plugins: Any = True
    plugins: tuple[Any, ...] = ()

    @property
    def screens(self) -> Mapping[str, Any]:
        """Breakpoint name -> value, in emission order."""
        return self.theme_config.get("screens", MappingProxyType({}))

    def theme(self, path: str, default: Any = MISSING) -> Any:
        """Look up a theme value by dotted path.

        Raises :class:`ConfigLookupError` if the path is absent and no
        *default* was given.
        """
        value = get_path(self.theme_config, split_path(path))
        if value is MISSING:
            if default is MISSING:
                raise ConfigLookupError(path)
            return default
        return value

    def variants(self, name: str, default: Any = MISSING) -> list[str]:
        """Variants configured for a utility; ``[]`` when none are configured."""
        value = get_path(self.variants_config, split_path(name))
        if value is MISSING:
            return [] if default is MISSING else list(default)
        return list(value)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _value(maybe_fn: Any, lookup: Callable[..., Any]) -> Any:
    return maybe_fn(lookup) if callable(maybe_fn) else maybe_fn


def _merge_extensions(theme: dict[str, Any], extend: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(theme)
    for key, extension in extend.items():
        base = merged.get(key, {})
        if callable(base) or callable(extension):
            merged[key] = lambda lookup, base=base, extension=extension: {
                **_value(base, lookup),
                **_value(extension, lookup),
            }
        else:
            merged[key] = {**base, **extension}
    return merged


def _resolve_function_values(theme: dict[str, Any]) -> dict[str, Any]:
    """Call every callable theme value with a lookup over the resolved theme."""
    resolved: dict[str, Any] = {}
    in_progress: set[str] = set()

    def resolve_key(key: str) -> Any:
        if key not in resolved:
            if key in in_progress:
                raise ConfigError(f"Theme key '{key}' refers to itself.")
            in_progress.add(key)
            resolved[key] = _value(theme[key], lookup)
            in_progress.discard(key)
        return resolved[key]

    def lookup(path: str, default: Any = MISSING) -> Any:
        segments = split_path(path)
        if not segments or segments[0] not in theme:
            value = MISSING
        else:
            value = get_path(resolve_key(segments[0]), segments[1:])
        if value is MISSING:
            if default is MISSING:
                raise ConfigLookupError(path)
            return default
        return value

    for key in theme:
        resolve_key(key)
    return resolved


def resolve_config(user_config: Mapping[str, Any] | Configuration | None = None) -> Configuration:
    """Merge *user_config* over :data:`DEFAULT_CONFIG`.

    Top-level theme keys replace the defaults; ``theme.extend`` is merged
    into them. ``variants`` keys replace the default per utility. Other keys
    fall back to their defaults when absent.
    """
    if isinstance(user_config, Configuration):
        return user_config
    user = dict(user_config or {})

    unknown = set(user) - KNOWN_KEYS
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(sorted(unknown)))

    user_theme = dict(user.get("theme") or {})
    extend = user_theme.pop("extend", {}) or {}
    theme = {**DEFAULT_CONFIG["theme"], **user_theme}
    theme = _merge_extensions(theme, extend)

    separator = user.get("separator", DEFAULT_CONFIG["separator"])
    if not isinstance(separator, str):
        raise ConfigError(f"separator must be a string, got {type(separator).__name__}")

    variants = {**DEFAULT_CONFIG["variants"], **(user.get("variants") or {})}

    plugins = user.get("plugins", DEFAULT_CONFIG["plugins"]) or []

    configuration = Configuration(
        theme_config=freeze(_resolve_function_values(theme)),
        variants_config=freeze(variants),
        separator=separator,
        prefix=user.get("prefix", DEFAULT_CONFIG["prefix"]),
        important=user.get("important", DEFAULT_CONFIG["important"]),
        core_plugins=freeze(user.get("core_plugins", DEFAULT_CONFIG["core_plugins"])),
        plugins=tuple(plugins),
    )
    logger.debug(
        "Resolved configuration: %d theme key(s), %d screen(s), %d user plugin(s)",
        len(configuration.theme_config),
        len(configuration.screens),
        len(configuration.plugins),
    )
    return configuration
