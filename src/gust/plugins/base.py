"""Plugin model and the context object handed to each plugin."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Protocol

from gust.config.resolver import MISSING, Configuration
from gust.css.nodes import AtRule, Declaration, Node, Rule, walk_decls, walk_rules
from gust.errors import ConfigError
from gust.selectors import escape_class_name, prefix_selector, split_selector_list

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

# Style objects: {selector: {property: value | [values] | nested style object}}
Styles = Mapping[str, Any]


class PluginHandler(Protocol):
    """Protocol for plugin functions: receive a context, register styles."""

    def __call__(self, context: PluginContext) -> None: ...


@dataclass(frozen=True)
class Plugin:
    """A named plugin. ``builtin`` plugins can be disabled via ``core_plugins``."""

    name: str
    handler: PluginHandler
    builtin: bool = False

    @classmethod
    def external(cls, handler: PluginHandler | Plugin) -> Plugin:
        """Wrap a user-supplied callable (or pass an existing Plugin through)."""
        if isinstance(handler, Plugin):
            return handler
        if not callable(handler):
            raise ConfigError(f"Plugins must be callables, got {type(handler).__name__}")
        return cls(name=getattr(handler, "__name__", "plugin"), handler=handler)


@dataclass
class GeneratedStyles:
    """Nodes generated by all plugins, grouped by category."""

    base: list[Node] = field(default_factory=list)
    components: list[Node] = field(default_factory=list)
    utilities: list[Node] = field(default_factory=list)

    def category(self, name: str) -> list[Node]:
        return getattr(self, name)


# ---------------------------------------------------------------------------
# Style objects -> nodes
# ---------------------------------------------------------------------------


def _property_name(name: str) -> str:
    """``backgroundColor`` -> ``background-color``; custom properties untouched."""
    if name.startswith("--") or "-" in name:
        return name
    return _CAMEL_RE.sub("-", name).lower()


def _body(styles: Mapping[str, Any]) -> list[Node]:
    nodes: list[Node] = []
    for key, value in styles.items():
        if isinstance(value, Mapping):
            nodes.extend(parse_styles({key: value}))
        elif isinstance(value, (list, tuple)):
            nodes.extend(Declaration(prop=_property_name(key), value=str(v)) for v in value)
        elif value is not None:
            nodes.append(Declaration(prop=_property_name(key), value=str(value)))
    return nodes


def parse_styles(styles: Styles | Iterable[Styles]) -> list[Node]:
    """Convert a style object (or a list of them) into stylesheet nodes.

    Keys starting with ``@`` become at-rules; every other key is a selector.
    """
    if not isinstance(styles, Mapping):
        return [node for item in styles for node in parse_styles(item)]
    nodes: list[Node] = []
    for key, value in styles.items():
        if key.startswith("@"):
            name, _, params = key[1:].partition(" ")
            nodes.append(AtRule(name=name, params=params.strip(), nodes=_body(value)))
        else:
            nodes.append(Rule(selectors=split_selector_list(key), nodes=_body(value)))
    return nodes


def wrap_with_variants(nodes: list[Node], variants: Iterable[str]) -> list[Node]:
    variants = list(variants)
    if not variants or not nodes:
        return nodes
    return [AtRule(name="variants", params=", ".join(variants), nodes=nodes)]


# ---------------------------------------------------------------------------
# Plugin context
# ---------------------------------------------------------------------------


class PluginContext:
    """Helpers bound to one configuration, collecting what plugins register."""

    def __init__(self, config: Configuration) -> None:
        self.config = config
        self.styles = GeneratedStyles()

    # --- lookups --------------------------------------------------------------

    def theme(self, path: str, default: Any = MISSING) -> Any:
        return self.config.theme(path, default)

    def variants(self, name: str, default: Any = MISSING) -> list[str]:
        return self.config.variants(name, default)

    def e(self, token: str) -> str:
        """Escape *token* for use inside a class name."""
        return escape_class_name(str(token))

    def prefix(self, selector: str) -> str:
        return prefix_selector(self.config.prefix, selector)

    # --- registration ---------------------------------------------------------

    def add_utilities(
        self,
        utilities: Styles | Iterable[Styles],
        variants: Iterable[str] = (),
        *,
        respect_prefix: bool = True,
        respect_important: bool = True,
    ) -> None:
        """Register utility rules, wrapped in ``@variants`` when *variants* is set."""
        nodes = parse_styles(utilities)
        for rule in walk_rules(nodes):
            if respect_prefix:
                rule.selectors = [self.prefix(s) for s in rule.selectors]
            if respect_important:
                self._apply_important(rule)
        self.styles.utilities.extend(wrap_with_variants(nodes, variants))

    def add_components(
        self,
        components: Styles | Iterable[Styles],
        variants: Iterable[str] = (),
        *,
        respect_prefix: bool = True,
    ) -> None:
        """Register component rules; prefixed like utilities but never important."""
        nodes = parse_styles(components)
        if respect_prefix:
            for rule in walk_rules(nodes):
                rule.selectors = [self.prefix(s) for s in rule.selectors]
        self.styles.components.extend(wrap_with_variants(nodes, variants))

    def add_base(self, base: Styles | Iterable[Styles]) -> None:
        """Register base (element-level) rules. No prefix, no variants."""
        self.styles.base.extend(parse_styles(base))

    def _apply_important(self, rule: Rule) -> None:
        important = self.config.important
        if important is True:
            for decl in walk_decls(rule.nodes):
                decl.important = True
        elif isinstance(important, str) and important:
            rule.selectors = [f"{important} {s}" for s in rule.selectors]
