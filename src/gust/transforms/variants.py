"""Expand ``@variants hover, focus { ... }`` into state-prefixed rule copies."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from gust.config.resolver import Configuration
from gust.css.nodes import AtRule, Node, Root, clone, map_nodes, walk_rules
from gust.errors import SelectorSyntaxError, UnknownVariantError
from gust.model.diagnostic import Diagnostic, Severity
from gust.selectors import build_group_variant, build_pseudo_class_variant

logger = logging.getLogger(__name__)

# (selector, separator, on_error) -> selector
SelectorModifier = Callable[..., str]

PSEUDO_CLASS_VARIANTS: dict[str, str] = {
    "hover": "hover",
    "focus": "focus",
    "active": "active",
    "visited": "visited",
    "disabled": "disabled",
    "focus-within": "focus-within",
    "first": "first-child",
    "last": "last-child",
    "odd": "nth-child(odd)",
    "even": "nth-child(even)",
}

GROUP_VARIANTS: dict[str, str] = {
    "group-hover": "hover",
    "group-focus": "focus",
}


def _variant_generators() -> dict[str, SelectorModifier | None]:
    generators: dict[str, SelectorModifier | None] = {"default": None}
    for variant, pseudo_class in PSEUDO_CLASS_VARIANTS.items():
        generators[variant] = partial(
            build_pseudo_class_variant, variant=variant, pseudo_class=pseudo_class
        )
    for variant, pseudo_class in GROUP_VARIANTS.items():
        generators[variant] = partial(build_group_variant, variant=variant, pseudo_class=pseudo_class)
    return generators


VARIANT_GENERATORS = _variant_generators()


def parse_variant_list(params: str) -> list[str]:
    return [v.strip() for v in params.split(",") if v.strip()]


class VariantsAtRuleTransform:
    """Replace each ``@variants`` block with one copy of its rules per variant.

    ``default`` (the unmodified rules) always comes first; the listed
    variants follow in the order given. When ``responsive`` is listed the
    whole output is wrapped in ``@responsive`` for the responsive pass.
    """

    def __init__(self, config: Configuration, on_error: Callable[[str], None] | None = None) -> None:
        self.config = config
        self.on_error = on_error
        self.diagnostics: list[Diagnostic] = []

    def apply(self, root: Root) -> Root:
        return Root(nodes=map_nodes(root.nodes, self._expand), source=root.source)

    def _expand(self, node: Node) -> list[Node]:
        if not isinstance(node, AtRule) or node.name != "variants":
            return [node]
        variants = parse_variant_list(node.params)
        for variant in variants:
            if variant != "responsive" and variant not in VARIANT_GENERATORS:
                raise UnknownVariantError(
                    f'Your config mentions the "{variant}" variant, '
                    f'but "{variant}" doesn\'t appear to be a variant.',
                    source=node.source,
                    word=variant,
                )

        ordered = [v for v in variants if v != "responsive"]
        if "default" not in ordered:
            ordered.insert(0, "default")

        output: list[Node] = []
        for variant in ordered:
            copies = clone(node.nodes or [])
            modifier = VARIANT_GENERATORS[variant]
            if variant in GROUP_VARIANTS:
                modifier = partial(modifier, group_class=self._group_class())
            if modifier is not None:
                for rule in walk_rules(copies):
                    rule.selectors = [self._modify(modifier, s, rule) for s in rule.selectors]
            output.extend(copies)

        if "responsive" in variants:
            return [AtRule(name="responsive", nodes=output, source=node.source)]
        return output

    def _group_class(self) -> str:
        """The ``.group`` scope class, with the configured prefix applied."""
        prefix = self.config.prefix
        value = prefix(".group") if callable(prefix) else prefix
        return f"{value}group"

    def _modify(self, modifier: SelectorModifier, selector: str, rule: Node) -> str:
        report = partial(self._report, selector=selector, rule=rule)
        try:
            return modifier(selector, separator=self.config.separator, on_error=report)
        except SelectorSyntaxError as exc:
            report(str(exc), severity=Severity.ERROR)
            return selector

    def _report(
        self, message: str, *, selector: str, rule: Node, severity: Severity = Severity.WARNING
    ) -> None:
        self.diagnostics.append(
            Diagnostic(
                rule="variants",
                severity=severity,
                message=message,
                selector=selector,
                source=rule.source,
            )
        )
        logger.warning("%s (selector %r)", message, selector)
        if self.on_error is not None:
            self.on_error(message)
