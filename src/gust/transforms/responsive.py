"""Expand ``@responsive`` blocks into one ``@media`` block per breakpoint.

    .flex { display: flex }                         .flex { display: flex }
    @responsive { .flex { display: flex } }   ->    @media (min-width: 640px) { .sm\\:flex { ... } }
                                                    @media (min-width: 768px) { .md\\:flex { ... } }

The unprefixed rules stay where the ``@responsive`` block was. The media
blocks replace the first ``@tailwind screens`` marker, or are appended to the
end of the stylesheet when there is none.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from functools import partial
from typing import Callable

from gust.config.resolver import Configuration
from gust.css.media import build_media_query
from gust.css.nodes import AtRule, Node, Root, Rule, clone, map_nodes, walk_rules
from gust.errors import SelectorSyntaxError
from gust.model.diagnostic import Diagnostic, Severity
from gust.selectors import build_selector_variant

logger = logging.getLogger(__name__)


def _is_screens_marker(node: Node) -> bool:
    return isinstance(node, AtRule) and node.name == "tailwind" and node.params == "screens"


class ResponsiveAtRuleTransform:
    """Collect every ``@responsive`` block and emit per-breakpoint copies.

    Selectors are rewritten independently: a selector that cannot be
    prefixed is reported through *on_error* (and recorded in
    ``diagnostics``) and left as it is, without stopping the pass.
    """

    def __init__(self, config: Configuration, on_error: Callable[[str], None] | None = None) -> None:
        self.config = config
        self.on_error = on_error
        self.diagnostics: list[Diagnostic] = []

    def apply(self, root: Root) -> Root:
        collected: list[Node] = []

        def hoist(node: Node) -> list[Node]:
            if isinstance(node, AtRule) and node.name == "responsive":
                children = node.nodes or []
                collected.extend(clone(children))
                return children
            return [node]

        nodes = map_nodes(root.nodes, hoist)
        if not collected:
            return Root(nodes=nodes, source=root.source)

        wrappers = [self._media_block(screen, value, collected) for screen, value in self.config.screens.items()]
        if not any(w.nodes for w in wrappers):
            return Root(nodes=nodes, source=root.source)

        logger.debug(
            "Expanding %d responsive node(s) across %d screen(s)", len(collected), len(wrappers)
        )
        return Root(nodes=self._place(nodes, wrappers), source=root.source)

    # --- building -------------------------------------------------------------

    def _media_block(self, screen: str, value: object, collected: list[Node]) -> AtRule:
        copies = clone(collected)
        for rule in walk_rules(copies):
            rule.selectors = [self._rewrite(selector, screen, rule) for selector in rule.selectors]
        return AtRule(name="media", params=build_media_query(value), nodes=copies)

    def _rewrite(self, selector: str, screen: str, rule: Rule) -> str:
        report = partial(self._report, selector=selector, rule=rule)
        try:
            return build_selector_variant(selector, screen, self.config.separator, report)
        except SelectorSyntaxError as exc:
            report(str(exc), severity=Severity.ERROR)
            return selector

    def _report(
        self, message: str, *, selector: str, rule: Rule, severity: Severity = Severity.WARNING
    ) -> None:
        self.diagnostics.append(
            Diagnostic(
                rule="responsive",
                severity=severity,
                message=message,
                selector=selector,
                source=rule.source,
            )
        )
        logger.warning("%s (selector %r)", message, selector)
        if self.on_error is not None:
            self.on_error(message)

    # --- placement ------------------------------------------------------------

    def _place(self, nodes: list[Node], wrappers: list[AtRule]) -> list[Node]:
        placed = False

        def replace_marker(node: Node) -> list[Node]:
            nonlocal placed
            if not _is_screens_marker(node):
                return [node]
            if placed:
                logger.debug("Dropping extra @tailwind screens marker at %s", node.source)
                return []
            placed = True
            return [replace(w, source=node.source) for w in wrappers]

        nodes = map_nodes(nodes, replace_marker)
        if not placed:
            nodes.extend(wrappers)
        return nodes
