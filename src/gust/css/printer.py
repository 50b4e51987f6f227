"""Serialize the stylesheet model back to CSS text."""

from __future__ import annotations

from gust.css.nodes import AtRule, Comment, Declaration, Node, Root, Rule

__all__ = ["stringify"]

INDENT = "  "


def _print_declaration(decl: Declaration, depth: int) -> str:
    important = " !important" if decl.important else ""
    return f"{INDENT * depth}{decl.prop}: {decl.value}{important};"


def _print_block(head: str, children: list[Node], depth: int) -> str:
    pad = INDENT * depth
    if not children:
        return f"{pad}{head} {{}}"
    body = _print_nodes(children, depth + 1)
    return f"{pad}{head} {{\n{body}\n{pad}}}"


def _print_node(node: Node, depth: int) -> str:
    if isinstance(node, Declaration):
        return _print_declaration(node, depth)
    if isinstance(node, Comment):
        return f"{INDENT * depth}/* {node.text} */"
    if isinstance(node, Rule):
        head = f",\n{INDENT * depth}".join(node.selectors)
        return _print_block(head, node.nodes, depth)
    if isinstance(node, AtRule):
        head = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
        if node.nodes is None:
            return f"{INDENT * depth}{head};"
        return _print_block(head, node.nodes, depth)
    raise TypeError(f"Cannot print node of type {type(node).__name__}")


def _print_nodes(nodes: list[Node], depth: int) -> str:
    parts: list[str] = []
    previous: Node | None = None
    for node in nodes:
        if previous is not None:
            # Declarations sit on consecutive lines, everything else is spaced out.
            both_decls = isinstance(node, Declaration) and isinstance(previous, Declaration)
            parts.append("\n" if both_decls else "\n\n")
        parts.append(_print_node(node, depth))
        previous = node
    return "".join(parts)


def stringify(root: Root | list[Node]) -> str:
    """Render *root* (or a bare node list) as CSS text ending in a newline."""
    nodes = root.nodes if isinstance(root, Root) else root
    if not nodes:
        return ""
    return _print_nodes(nodes, 0) + "\n"
