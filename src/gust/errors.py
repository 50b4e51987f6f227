"""Error hierarchy for gust builds."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gust.css.nodes import Source


class GustError(Exception):
    """Base error for all gust errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(GustError):
    """Invalid or unusable configuration."""


class ConfigLookupError(ConfigError):
    """A theme (or variants) path does not exist in the configuration."""

    def __init__(self, path: str, *, section: str = "theme") -> None:
        super().__init__(f"'{path}' does not exist in your {section} config.")
        self.path = path
        self.section = section


class ConfigLoadError(ConfigError):
    """A configuration file could not be read."""

    def __init__(self, message: str, *, path: str = "", cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class CssSyntaxError(GustError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message, cause=cause)


class SelectorSyntaxError(GustError):
    """Raised when a selector cannot be parsed for rewriting."""

    def __init__(self, selector: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Could not parse selector {selector!r}.", cause=cause)
        self.selector = selector


# ---------------------------------------------------------------------------
# Directives
# ---------------------------------------------------------------------------


class DirectiveError(GustError):
    """An at-rule directive cannot be processed. Carries its source position."""

    def __init__(
        self,
        message: str,
        *,
        source: Source | None = None,
        word: str | None = None,
    ) -> None:
        self.source = source
        self.word = word
        self.line = source.line if source else None
        self.column = source.column if source else None
        if source is not None and source.line is not None:
            message = f"{source}: {message}"
        super().__init__(message)


class DeprecatedDirectiveError(DirectiveError):
    """A legacy directive such as ``@tailwind preflight`` was used."""


class UnknownScreenError(DirectiveError):
    """``@screen`` names a breakpoint missing from the configuration."""


class UnknownVariantError(DirectiveError):
    """``@variants`` names a variant with no generator."""


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------


class PluginExecutionError(GustError):
    """A plugin raised while generating styles. The build is aborted."""

    def __init__(self, plugin_name: str, *, cause: Exception | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Plugin '{plugin_name}' failed{detail}", cause=cause)
        self.plugin_name = plugin_name
