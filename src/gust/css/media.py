"""Turn a breakpoint value from ``theme.screens`` into a media query."""

from __future__ import annotations

from typing import Any, Mapping

_FEATURES = {"min": "min-width", "max": "max-width"}


def _query(screen: Any) -> str:
    if isinstance(screen, str):
        screen = {"min": screen}
    if "raw" in screen:
        return str(screen["raw"])
    return " and ".join(f"({_FEATURES.get(feature, feature)}: {value})" for feature, value in screen.items())


def build_media_query(screens: str | Mapping[str, Any] | list | tuple) -> str:
    """Build media query params for a breakpoint.

    >>> build_media_query("640px")
    '(min-width: 640px)'
    >>> build_media_query({"min": "640px", "max": "767px"})
    '(min-width: 640px) and (max-width: 767px)'
    >>> build_media_query([{"max": "639px"}, {"min": "1024px"}])
    '(max-width: 639px), (min-width: 1024px)'
    >>> build_media_query({"raw": "print"})
    'print'
    """
    if isinstance(screens, (list, tuple)):
        return ", ".join(_query(screen) for screen in screens)
    return _query(screens)
