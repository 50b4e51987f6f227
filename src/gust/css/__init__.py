from gust.css.nodes import (
    AtRule,
    Comment,
    Declaration,
    Node,
    Root,
    Rule,
    Source,
    clone,
    map_nodes,
    walk,
    walk_at_rules,
    walk_decls,
    walk_rules,
    with_source,
)
from gust.css.parser import parse_css
from gust.css.printer import stringify

__all__ = [
    "parse_css",
    "stringify",
    "Root",
    "AtRule",
    "Rule",
    "Declaration",
    "Comment",
    "Node",
    "Source",
    "clone",
    "map_nodes",
    "walk",
    "walk_rules",
    "walk_at_rules",
    "walk_decls",
    "with_source",
]
