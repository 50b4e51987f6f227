"""Selector model: SimpleSelector, Compound and ComplexSelector dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SimpleSelector:
    """One component of a compound selector.

    ``value`` is the raw source text without its sigil, so escapes survive a
    round trip: ``.sm\\:flex`` is stored as kind="class", value="sm\\:flex".
    """

    kind: str  # "type", "universal", "nesting", "class", "id", "attribute", "pseudo"
    value: str
    args: str = ""  # pseudo-class arguments, including parentheses

    def __str__(self) -> str:
        if self.kind == "class":
            return f".{self.value}"
        if self.kind == "id":
            return f"#{self.value}"
        return f"{self.value}{self.args}"


@dataclass
class Compound:
    """A run of simple selectors with no combinator between them."""

    parts: list[SimpleSelector] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(p) for p in self.parts)


@dataclass
class ComplexSelector:
    """Compounds joined by combinators (``" "``, ``">"``, ``"+"``, ``"~"``)."""

    compounds: list[Compound] = field(default_factory=list)
    combinators: list[str] = field(default_factory=list)

    def classes(self) -> list[SimpleSelector]:
        """All class components, in source order, outside pseudo arguments."""
        return [p for c in self.compounds for p in c.parts if p.kind == "class"]

    def __str__(self) -> str:
        out = str(self.compounds[0]) if self.compounds else ""
        for combinator, compound in zip(self.combinators, self.compounds[1:]):
            out += " " if combinator == " " else f" {combinator} "
            out += str(compound)
        return out
