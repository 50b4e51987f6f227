"""Default configuration: theme tokens, per-utility variants and options.

Theme values may be callables receiving a ``theme(path)`` lookup; they are
resolved once when the configuration is built, after user overrides apply.
"""

from __future__ import annotations

from typing import Any


def _negative(scale: dict[str, str]) -> dict[str, str]:
    return {f"-{key}": f"-{value}" for key, value in scale.items() if key != "0"}


COLORS: dict[str, Any] = {
    "transparent": "transparent",
    "black": "#000",
    "white": "#fff",
    "gray": {
        "100": "#f7fafc",
        "200": "#edf2f7",
        "300": "#e2e8f0",
        "400": "#cbd5e0",
        "500": "#a0aec0",
        "600": "#718096",
        "700": "#4a5568",
        "800": "#2d3748",
        "900": "#1a202c",
    },
    "red": {
        "100": "#fff5f5",
        "200": "#fed7d7",
        "300": "#feb2b2",
        "400": "#fc8181",
        "500": "#f56565",
        "600": "#e53e3e",
        "700": "#c53030",
        "800": "#9b2c2c",
        "900": "#742a2a",
    },
    "green": {
        "100": "#f0fff4",
        "200": "#c6f6d5",
        "300": "#9ae6b4",
        "400": "#68d391",
        "500": "#48bb78",
        "600": "#38a169",
        "700": "#2f855a",
        "800": "#276749",
        "900": "#22543d",
    },
    "blue": {
        "100": "#ebf8ff",
        "200": "#bee3f8",
        "300": "#90cdf4",
        "400": "#63b3ed",
        "500": "#4299e1",
        "600": "#3182ce",
        "700": "#2b6cb0",
        "800": "#2c5282",
        "900": "#2a4365",
    },
}

SPACING: dict[str, str] = {
    "px": "1px",
    "0": "0",
    "1": "0.25rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "32": "8rem",
    "40": "10rem",
    "48": "12rem",
    "56": "14rem",
    "64": "16rem",
}

DEFAULT_THEME: dict[str, Any] = {
    # Insertion order is the order media queries are emitted in.
    "screens": {
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
    },
    "colors": COLORS,
    "spacing": SPACING,
    "backgroundColor": lambda theme: theme("colors"),
    "textColor": lambda theme: theme("colors"),
    "borderColor": lambda theme: {**theme("colors"), "default": theme("colors.gray.300", "currentColor")},
    "padding": lambda theme: theme("spacing"),
    "margin": lambda theme: {"auto": "auto", **theme("spacing"), **_negative(dict(theme("spacing")))},
    "width": lambda theme: {
        "auto": "auto",
        **theme("spacing"),
        "1/2": "50%",
        "1/3": "33.333333%",
        "2/3": "66.666667%",
        "1/4": "25%",
        "3/4": "75%",
        "full": "100%",
        "screen": "100vw",
    },
    "height": lambda theme: {
        "auto": "auto",
        **theme("spacing"),
        "full": "100%",
        "screen": "100vh",
    },
    "opacity": {
        "0": "0",
        "25": "0.25",
        "50": "0.5",
        "75": "0.75",
        "100": "1",
    },
    "fontSize": {
        "xs": "0.75rem",
        "sm": "0.875rem",
        "base": "1rem",
        "lg": "1.125rem",
        "xl": "1.25rem",
        "2xl": "1.5rem",
        "3xl": "1.875rem",
        "4xl": "2.25rem",
    },
    "fontWeight": {
        "light": "300",
        "normal": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
    },
    "fill": {"current": "currentColor"},
    "stroke": {"current": "currentColor"},
    "container": {},
}

DEFAULT_VARIANTS: dict[str, list[str]] = {
    "backgroundColor": ["responsive", "hover", "focus"],
    "borderColor": ["responsive", "hover", "focus"],
    "display": ["responsive"],
    "fill": [],
    "fontSize": ["responsive"],
    "fontWeight": ["responsive", "hover", "focus"],
    "height": ["responsive"],
    "margin": ["responsive"],
    "opacity": ["responsive", "hover", "focus"],
    "padding": ["responsive"],
    "position": ["responsive"],
    "stroke": [],
    "textColor": ["responsive", "hover", "focus"],
    "width": ["responsive"],
}

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": DEFAULT_THEME,
    "variants": DEFAULT_VARIANTS,
    "separator": ":",
    "prefix": "",
    "important": False,
    "core_plugins": True,
    "plugins": [],
}
