"""Built-in utility plugins.

Each plugin maps one theme section to a family of single-purpose classes.
``CORE_PLUGINS`` fixes their order, which is also the order of the generated
utilities in the output.
"""

from __future__ import annotations

from typing import Any, Mapping

from gust.css.media import build_media_query
from gust.plugins.base import Plugin, PluginContext


def flatten_color_palette(colors: Mapping[str, Any]) -> dict[str, str]:
    """``{"red": {"500": "#f56565"}}`` -> ``{"red-500": "#f56565"}``."""
    flat: dict[str, str] = {}
    for name, value in colors.items():
        if isinstance(value, Mapping):
            for shade, color in value.items():
                flat[f"{name}-{shade}"] = color
        else:
            flat[name] = value
    return flat


def _class(ctx: PluginContext, name: str) -> str:
    return f".{ctx.e(name)}"


def _utility_name(prefix: str, modifier: str) -> str:
    """``("border", "default")`` -> ``"border"``; ``("-m", "-4")`` -> ``"-m-4"``."""
    if modifier == "default":
        return prefix
    if modifier.startswith("-"):
        return f"-{prefix}{modifier}"
    return f"{prefix}-{modifier}"


def _scale_plugin(theme_key: str, class_prefix: str, properties: tuple[str, ...]):
    def plugin(ctx: PluginContext) -> None:
        values = ctx.theme(theme_key, {})
        utilities = {
            _class(ctx, _utility_name(class_prefix, str(modifier))): {p: value for p in properties}
            for modifier, value in values.items()
        }
        ctx.add_utilities(utilities, ctx.variants(theme_key))

    plugin.__name__ = theme_key
    return plugin


def _color_plugin(theme_key: str, class_prefix: str, prop: str):
    def plugin(ctx: PluginContext) -> None:
        colors = flatten_color_palette(ctx.theme(theme_key, {}))
        utilities = {
            _class(ctx, _utility_name(class_prefix, modifier)): {prop: value}
            for modifier, value in colors.items()
        }
        ctx.add_utilities(utilities, ctx.variants(theme_key))

    plugin.__name__ = theme_key
    return plugin


def _spacing_plugin(theme_key: str, short: str, prop: str):
    sides = (
        ("", (prop,)),
        ("y", (f"{prop}-top", f"{prop}-bottom")),
        ("x", (f"{prop}-left", f"{prop}-right")),
        ("t", (f"{prop}-top",)),
        ("r", (f"{prop}-right",)),
        ("b", (f"{prop}-bottom",)),
        ("l", (f"{prop}-left",)),
    )

    def plugin(ctx: PluginContext) -> None:
        values = ctx.theme(theme_key, {})
        utilities: list[dict[str, Any]] = []
        for side, props in sides:
            utilities.append(
                {
                    _class(ctx, _utility_name(f"{short}{side}", str(modifier))): {p: value for p in props}
                    for modifier, value in values.items()
                }
            )
        ctx.add_utilities(utilities, ctx.variants(theme_key))

    plugin.__name__ = theme_key
    return plugin


# ---------------------------------------------------------------------------
# Plugins with fixed class lists
# ---------------------------------------------------------------------------


PREFLIGHT = {
    "*, ::before, ::after": {
        "box-sizing": "border-box",
        "border-width": "0",
        "border-style": "solid",
        "border-color": "currentColor",
    },
    "html": {"line-height": "1.5", "-webkit-text-size-adjust": "100%"},
    "body": {"margin": "0"},
    "h1, h2, h3, h4, h5, h6": {"font-size": "inherit", "font-weight": "inherit"},
    "img, svg, video": {"display": "block", "vertical-align": "middle"},
}


def preflight(ctx: PluginContext) -> None:
    ctx.add_base(PREFLIGHT)


def container(ctx: PluginContext) -> None:
    """``.container``: full width, capped at each breakpoint's min-width."""
    options = ctx.theme("container", {})
    styles: list[dict[str, Any]] = [{".container": {"width": "100%"}}]
    if options.get("center"):
        styles[0][".container"].update({"margin-right": "auto", "margin-left": "auto"})
    if options.get("padding"):
        styles[0][".container"].update(
            {"padding-right": options["padding"], "padding-left": options["padding"]}
        )
    for value in ctx.theme("screens", {}).values():
        if isinstance(value, str):
            styles.append({f"@media {build_media_query(value)}": {".container": {"max-width": value}}})
    ctx.add_components(styles)


def display(ctx: PluginContext) -> None:
    ctx.add_utilities(
        {
            ".block": {"display": "block"},
            ".inline-block": {"display": "inline-block"},
            ".inline": {"display": "inline"},
            ".flex": {"display": "flex"},
            ".inline-flex": {"display": "inline-flex"},
            ".table": {"display": "table"},
            ".grid": {"display": "grid"},
            ".hidden": {"display": "none"},
        },
        ctx.variants("display"),
    )


def position(ctx: PluginContext) -> None:
    ctx.add_utilities(
        {f".{value}": {"position": value} for value in ("static", "fixed", "absolute", "relative", "sticky")},
        ctx.variants("position"),
    )


CORE_PLUGINS: list[Plugin] = [
    Plugin("preflight", preflight, builtin=True),
    Plugin("container", container, builtin=True),
    Plugin("display", display, builtin=True),
    Plugin("position", position, builtin=True),
    Plugin("backgroundColor", _color_plugin("backgroundColor", "bg", "background-color"), builtin=True),
    Plugin("borderColor", _color_plugin("borderColor", "border", "border-color"), builtin=True),
    Plugin("textColor", _color_plugin("textColor", "text", "color"), builtin=True),
    Plugin("padding", _spacing_plugin("padding", "p", "padding"), builtin=True),
    Plugin("margin", _spacing_plugin("margin", "m", "margin"), builtin=True),
    Plugin("width", _scale_plugin("width", "w", ("width",)), builtin=True),
    Plugin("height", _scale_plugin("height", "h", ("height",)), builtin=True),
    Plugin("opacity", _scale_plugin("opacity", "opacity", ("opacity",)), builtin=True),
    Plugin("fontSize", _scale_plugin("fontSize", "text", ("font-size",)), builtin=True),
    Plugin("fontWeight", _scale_plugin("fontWeight", "font", ("font-weight",)), builtin=True),
    Plugin("fill", _scale_plugin("fill", "fill", ("fill",)), builtin=True),
    Plugin("stroke", _scale_plugin("stroke", "stroke", ("stroke",)), builtin=True),
]

CORE_PLUGIN_NAMES = [p.name for p in CORE_PLUGINS]
