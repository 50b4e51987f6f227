"""Stylesheet model: Root, AtRule, Rule, Declaration and Comment dataclasses."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator, Union


@dataclass(frozen=True)
class Source:
    """Where a node came from in the input stylesheet."""

    line: int | None = None
    column: int | None = None
    file: str | None = None

    def __str__(self) -> str:
        return f"{self.file or '<input>'}:{self.line}:{self.column}"


@dataclass
class Declaration:
    """A single ``property: value`` pair."""

    prop: str
    value: str
    important: bool = False
    source: Source | None = None


@dataclass
class Comment:
    """A ``/* ... */`` comment."""

    text: str
    source: Source | None = None


@dataclass
class Rule:
    """A qualified rule: a selector list and a block of child nodes."""

    selectors: list[str]
    nodes: list[Node] = field(default_factory=list)
    source: Source | None = None

    @property
    def selector(self) -> str:
        return ", ".join(self.selectors)


@dataclass
class AtRule:
    """An at-rule such as ``@media``, ``@tailwind`` or ``@responsive``.

    ``nodes`` is ``None`` for statement at-rules (``@tailwind base;``) and a
    list for block at-rules (``@media ... { }``), even when the block is empty.
    """

    name: str
    params: str = ""
    nodes: list[Node] | None = None
    source: Source | None = None


@dataclass
class Root:
    """The top of a stylesheet tree."""

    nodes: list[Node] = field(default_factory=list)
    source: Source | None = None


Node = Union[AtRule, Rule, Declaration, Comment]


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def clone(node):
    """Return a deep copy of *node* (or a list of nodes, or a Root)."""
    return copy.deepcopy(node)


def has_children(node: object) -> bool:
    return isinstance(node, (Rule, AtRule, Root)) and node.nodes is not None


def walk(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node in *nodes* depth-first, parents before children."""
    for node in nodes:
        yield node
        if has_children(node):
            yield from walk(node.nodes)  # type: ignore[union-attr]


def walk_rules(nodes: Iterable[Node]) -> Iterator[Rule]:
    for node in walk(nodes):
        if isinstance(node, Rule):
            yield node


def walk_at_rules(nodes: Iterable[Node], name: str | None = None) -> Iterator[AtRule]:
    for node in walk(nodes):
        if isinstance(node, AtRule) and (name is None or node.name == name):
            yield node


def walk_decls(nodes: Iterable[Node]) -> Iterator[Declaration]:
    for node in walk(nodes):
        if isinstance(node, Declaration):
            yield node


def map_nodes(nodes: Iterable[Node], fn: Callable[[Node], list[Node]]) -> list[Node]:
    """Rebuild a node list, replacing each node with ``fn(node)``.

    Children are rebuilt before their parent is handed to *fn*, and nodes
    returned by *fn* are not visited again. The input nodes are not mutated.
    """
    result: list[Node] = []
    for node in nodes:
        if isinstance(node, (Rule, AtRule)) and node.nodes is not None:
            node = replace(node, nodes=map_nodes(node.nodes, fn))
        result.extend(fn(node))
    return result


def with_source(nodes: Iterable[Node], source: Source | None) -> list[Node]:
    """Clone *nodes* and point every node in the copy at *source*."""
    copies = [clone(node) for node in nodes]
    for node in walk(copies):
        node.source = source
    return copies
