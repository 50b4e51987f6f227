"""Evaluate ``theme()`` calls in declaration values and at-rule params."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import replace

from gust.config.resolver import MISSING, Configuration
from gust.css.nodes import AtRule, Declaration, Node, Root, map_nodes
from gust.errors import ConfigError

# theme('colors.red.500') / theme("spacing.4", 1rem)
_THEME_CALL_RE = re.compile(
    r"""
    theme\(\s*
    (?P<quote>['"]?)(?P<path>[^'",)]+)(?P=quote)   # path, optionally quoted
    \s*(?:,\s*(?P<default>[^)]*?))?\s*             # optional fallback
    \)
    """,
    re.VERBOSE,
)


def _stringify(path: str, value: object) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    if isinstance(value, Mapping):
        raise ConfigError(f"theme('{path}') resolves to an object, not a value.")
    return str(value)


class ThemeFunctionTransform:
    """Replace ``theme('path')`` with the configured value.

    A missing path raises :class:`ConfigLookupError` unless the call passes a
    fallback as its second argument.
    """

    def __init__(self, config: Configuration) -> None:
        self.config = config

    def apply(self, root: Root) -> Root:
        return Root(nodes=map_nodes(root.nodes, self._evaluate), source=root.source)

    def evaluate(self, text: str) -> str:
        if "theme(" not in text:
            return text

        def substitute(match: re.Match[str]) -> str:
            path = match.group("path").strip()
            fallback = match.group("default")
            default = MISSING if fallback is None else fallback.strip().strip("'\"")
            return _stringify(path, self.config.theme(path, default))

        return _THEME_CALL_RE.sub(substitute, text)

    def _evaluate(self, node: Node) -> list[Node]:
        if isinstance(node, Declaration):
            return [replace(node, value=self.evaluate(node.value))]
        if isinstance(node, AtRule) and node.params:
            return [replace(node, params=self.evaluate(node.params))]
        return [node]
