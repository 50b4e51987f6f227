"""Replace ``@screen md { ... }`` with the breakpoint's ``@media`` block."""

from __future__ import annotations

from gust.config.resolver import Configuration
from gust.css.media import build_media_query
from gust.css.nodes import AtRule, Node, Root, map_nodes
from gust.errors import UnknownScreenError


class ScreenAtRuleTransform:
    def __init__(self, config: Configuration) -> None:
        self.config = config

    def apply(self, root: Root) -> Root:
        return Root(nodes=map_nodes(root.nodes, self._substitute), source=root.source)

    def _substitute(self, node: Node) -> list[Node]:
        if not isinstance(node, AtRule) or node.name != "screen":
            return [node]
        screen = node.params.strip()
        screens = self.config.screens
        if screen not in screens:
            raise UnknownScreenError(f"No `{screen}` screen found.", source=node.source, word=screen)
        return [AtRule(name="media", params=build_media_query(screens[screen]), nodes=node.nodes, source=node.source)]
