"""Lark-based selector parser producing :mod:`gust.selectors.model` objects."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from gust.errors import SelectorSyntaxError
from gust.selectors.model import ComplexSelector, Compound, SimpleSelector

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_OPENERS = {"(": ")", "[": "]"}


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a ComplexSelector."""

    def type_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="type", value=str(items[0]))

    def universal(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="universal", value="*")

    def nesting(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="nesting", value="&")

    def class_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="class", value=str(items[0])[1:])

    def id_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="id", value=str(items[0])[1:])

    def attribute(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="attribute", value=str(items[0]))

    def pseudo(self, items: list[Token]) -> SimpleSelector:
        args = str(items[1]) if len(items) > 1 else ""
        return SimpleSelector(kind="pseudo", value=str(items[0]), args=args)

    def compound(self, items: list[SimpleSelector]) -> Compound:
        return Compound(parts=list(items))

    def start(self, items: list[object]) -> ComplexSelector:
        selector = ComplexSelector()
        for item in items:
            if isinstance(item, Compound):
                selector.compounds.append(item)
            else:
                selector.combinators.append(str(item).strip() or " ")
        return selector


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_selector(source: str) -> ComplexSelector:
    """Parse one complex selector (no top-level commas).

    Raises :class:`SelectorSyntaxError` when the text is not a selector.
    """
    text = source.strip()
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        raise SelectorSyntaxError(source, cause=e) from e
    return SelectorTransformer().transform(tree)


def split_selector_list(source: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas inside parentheses, attribute brackets, strings or escapes do not
    split: ``.a, :is(.b, .c)`` -> ``[".a", ":is(.b, .c)"]``.
    """
    parts: list[str] = []
    current: list[str] = []
    closers: list[str] = []
    quote = ""
    escaped = False
    for char in source:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif quote:
            if char == quote:
                quote = ""
        elif char in "\"'":
            quote = char
        elif char in _OPENERS:
            closers.append(_OPENERS[char])
        elif closers and char == closers[-1]:
            closers.pop()
        elif char == "," and not closers:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append("".join(current).strip())
    return [p for p in parts if p]
