"""Class-name escaping and selector rewriting for variants and prefixes."""

from __future__ import annotations

from typing import Callable

import tinycss2
from tinycss2.serializer import serialize_identifier

from gust.selectors.model import ComplexSelector, SimpleSelector
from gust.selectors.parser import parse_selector

ErrorCallback = Callable[[str], None]

NO_CLASS_MESSAGE = "Variant cannot be generated because selector contains no classes."


def escape_class_name(name: str) -> str:
    """Escape *name* so it is a valid CSS identifier.

    ``"sm:flex"`` -> ``"sm\\:flex"``, ``"w-1/2"`` -> ``"w-1\\/2"``,
    ``"2xl"`` -> ``"\\32 xl"``.
    """
    if not name:
        return name
    return serialize_identifier(name)


def unescape_class_name(raw: str) -> str:
    """Inverse of :func:`escape_class_name` for raw selector text."""
    if "\\" not in raw:
        return raw
    token = tinycss2.parse_one_component_value(raw)
    if getattr(token, "type", None) == "ident":
        return token.value
    return raw


def _rename(part: SimpleSelector, name: str) -> None:
    part.value = escape_class_name(name)


def _report(on_error: ErrorCallback | None, message: str) -> None:
    if on_error is not None:
        on_error(message)


def build_selector_variant(
    selector: str,
    variant: str,
    separator: str,
    on_error: ErrorCallback | None = None,
) -> str:
    """Prefix the last class in *selector* with ``variant + separator``.

    ``.group:hover .flex > a`` with variant ``md`` becomes
    ``.group:hover .md\\:flex > a``. When the selector has no class at all,
    *on_error* is called once and the selector is returned unchanged.
    """
    parsed = parse_selector(selector)
    classes = parsed.classes()
    if not classes:
        _report(on_error, NO_CLASS_MESSAGE)
        return selector
    last = classes[-1]
    _rename(last, f"{variant}{separator}{unescape_class_name(last.value)}")
    return str(parsed)


def _pseudo_class_variant(
    parsed: ComplexSelector, variant: str, separator: str, pseudo_class: str
) -> None:
    for compound in parsed.compounds:
        parts: list[SimpleSelector] = []
        for part in compound.parts:
            parts.append(part)
            if part.kind == "class":
                _rename(part, f"{variant}{separator}{unescape_class_name(part.value)}")
                parts.append(SimpleSelector(kind="pseudo", value=f":{pseudo_class}"))
        compound.parts = parts


def build_pseudo_class_variant(
    selector: str,
    variant: str,
    separator: str,
    pseudo_class: str,
    on_error: ErrorCallback | None = None,
) -> str:
    """Prefix every class with the variant and follow it with ``:pseudo_class``.

    ``.bg-red`` with variant ``hover`` becomes ``.hover\\:bg-red:hover``.
    """
    parsed = parse_selector(selector)
    if not parsed.classes():
        _report(on_error, NO_CLASS_MESSAGE)
        return selector
    _pseudo_class_variant(parsed, variant, separator, pseudo_class)
    return str(parsed)


def build_group_variant(
    selector: str,
    variant: str,
    separator: str,
    pseudo_class: str,
    on_error: ErrorCallback | None = None,
    group_class: str = "group",
) -> str:
    """Scope *selector* under ``.group:<pseudo_class>`` and prefix its classes.

    ``.text-red`` with variant ``group-hover`` becomes
    ``.group:hover .group-hover\\:text-red``.
    """
    parsed = parse_selector(selector)
    classes = parsed.classes()
    if not classes:
        _report(on_error, NO_CLASS_MESSAGE)
        return selector
    for part in classes:
        _rename(part, f"{variant}{separator}{unescape_class_name(part.value)}")
    return f".{escape_class_name(group_class)}:{pseudo_class} {parsed}"


def prefix_selector(prefix: str | Callable[[str], str], selector: str) -> str:
    """Prefix every class in *selector* with the configured class prefix.

    *prefix* may be a string or a callable receiving the selector and
    returning the prefix to use.
    """
    value = prefix(selector) if callable(prefix) else prefix
    if not value:
        return selector
    parsed = parse_selector(selector)
    for part in parsed.classes():
        _rename(part, f"{value}{unescape_class_name(part.value)}")
    return str(parsed)
