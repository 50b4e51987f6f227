"""Build the stylesheet model from source text using tinycss2.

tinycss2 does the tokenizing and rule/declaration splitting; this module only
converts its output into :mod:`gust.css.nodes` objects:

    @tailwind base;                      -> AtRule("tailwind", "base")
    @responsive { .flex { ... } }        -> AtRule("responsive", "", [Rule])
    .a, .b:hover { color: red; }         -> Rule([".a", ".b:hover"], [Declaration])
"""

from __future__ import annotations

import tinycss2

from gust.css.nodes import AtRule, Comment, Declaration, Node, Root, Rule, Source
from gust.errors import CssSyntaxError
from gust.selectors import split_selector_list

__all__ = ["parse_css"]

# At-rules whose block holds declarations rather than rules.
_DECLARATION_AT_RULES = frozenset({"font-face", "page", "counter-style", "property", "viewport"})


def _source(item: object, filename: str | None) -> Source:
    return Source(
        line=getattr(item, "source_line", None),
        column=getattr(item, "source_column", None),
        file=filename,
    )


def _raise_for_error(item: object) -> None:
    if getattr(item, "type", None) == "error":
        raise CssSyntaxError(
            str(getattr(item, "message", "invalid stylesheet")),
            line=getattr(item, "source_line", None),
            column=getattr(item, "source_column", None),
        )


def _convert_at_rule(item: tinycss2.ast.AtRule, filename: str | None) -> AtRule:
    name = item.lower_at_keyword
    params = tinycss2.serialize(item.prelude).strip()
    if item.content is None:
        return AtRule(name=name, params=params, source=_source(item, filename))
    if name in _DECLARATION_AT_RULES:
        children = _convert_block(item.content, filename)
    else:
        children = _convert_rule_list(
            tinycss2.parse_stylesheet(item.content, skip_comments=False, skip_whitespace=True),
            filename,
        )
    return AtRule(name=name, params=params, nodes=children, source=_source(item, filename))


def _convert_rule_list(items: list, filename: str | None) -> list[Node]:
    nodes: list[Node] = []
    for item in items:
        _raise_for_error(item)
        if item.type == "comment":
            nodes.append(Comment(text=item.value.strip(), source=_source(item, filename)))
        elif item.type == "at-rule":
            nodes.append(_convert_at_rule(item, filename))
        elif item.type == "qualified-rule":
            selector = tinycss2.serialize(item.prelude).strip()
            nodes.append(
                Rule(
                    selectors=split_selector_list(selector),
                    nodes=_convert_block(item.content, filename),
                    source=_source(item, filename),
                )
            )
    return nodes


def _convert_block(content: list, filename: str | None) -> list[Node]:
    """Convert the contents of a ``{}`` block holding declarations."""
    nodes: list[Node] = []
    items = tinycss2.parse_blocks_contents(content, skip_comments=False, skip_whitespace=True)
    for item in items:
        _raise_for_error(item)
        if item.type == "declaration":
            nodes.append(
                Declaration(
                    prop=item.name,
                    value=tinycss2.serialize(item.value).strip(),
                    important=item.important,
                    source=_source(item, filename),
                )
            )
        else:
            nodes.extend(_convert_rule_list([item], filename))
    return nodes


def parse_css(source: str, filename: str | None = None) -> Root:
    """Parse stylesheet source text into a :class:`Root`.

    Raises :class:`CssSyntaxError` for anything tinycss2 reports as invalid.
    """
    items = tinycss2.parse_stylesheet(source, skip_comments=False, skip_whitespace=True)
    return Root(nodes=_convert_rule_list(items, filename), source=Source(1, 1, filename))
