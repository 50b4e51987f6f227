from gust.selectors.model import ComplexSelector, Compound, SimpleSelector
from gust.selectors.parser import parse_selector, split_selector_list
from gust.selectors.rewrite import (
    NO_CLASS_MESSAGE,
    build_group_variant,
    build_pseudo_class_variant,
    build_selector_variant,
    escape_class_name,
    prefix_selector,
    unescape_class_name,
)

__all__ = [
    "parse_selector",
    "split_selector_list",
    "SimpleSelector",
    "Compound",
    "ComplexSelector",
    "NO_CLASS_MESSAGE",
    "build_selector_variant",
    "build_pseudo_class_variant",
    "build_group_variant",
    "escape_class_name",
    "unescape_class_name",
    "prefix_selector",
]
