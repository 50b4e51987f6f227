"""Replace ``@tailwind base|components|utilities`` with generated styles."""

from __future__ import annotations

import logging

from gust.css.nodes import AtRule, Node, Root, map_nodes, with_source
from gust.errors import DeprecatedDirectiveError
from gust.plugins.base import GeneratedStyles

logger = logging.getLogger(__name__)

CATEGORIES = ("base", "components", "utilities")

PREFLIGHT_MESSAGE = "`@tailwind preflight` is not a valid at-rule, use `@tailwind base` instead."


class TailwindAtRuleTransform:
    """Splice each category's generated nodes in place of its marker.

    Every inserted node carries the marker's source location. Markers with
    other params (``screens`` or anything unknown) are left untouched.
    """

    def __init__(self, generated: GeneratedStyles) -> None:
        self.generated = generated

    def apply(self, root: Root) -> Root:
        return Root(nodes=map_nodes(root.nodes, self._substitute), source=root.source)

    def _substitute(self, node: Node) -> list[Node]:
        if not isinstance(node, AtRule) or node.name != "tailwind":
            return [node]
        if node.params == "preflight":
            raise DeprecatedDirectiveError(PREFLIGHT_MESSAGE, source=node.source, word="preflight")
        if node.params not in CATEGORIES:
            return [node]
        replacement = with_source(self.generated.category(node.params), node.source)
        logger.debug("Replaced @tailwind %s with %d node(s)", node.params, len(replacement))
        return replacement
