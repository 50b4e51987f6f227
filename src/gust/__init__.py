"""gust: utility-first CSS generation from a design-token configuration."""

__version__ = "0.1.0"

from gust.config import Configuration, load_configuration, resolve_config  # noqa: E402
from gust.css import parse_css, stringify  # noqa: E402
from gust.errors import (  # noqa: E402
    ConfigError,
    ConfigLoadError,
    ConfigLookupError,
    CssSyntaxError,
    DeprecatedDirectiveError,
    DirectiveError,
    GustError,
    PluginExecutionError,
    SelectorSyntaxError,
    UnknownScreenError,
    UnknownVariantError,
)
from gust.model import Diagnostic, Severity  # noqa: E402
from gust.plugins import GeneratedStyles, Plugin, PluginContext, compose  # noqa: E402
from gust.processor import BuildResult, compile_css, process  # noqa: E402

__all__ = [
    "__version__",
    # pipeline
    "process",
    "compile_css",
    "BuildResult",
    # config
    "Configuration",
    "resolve_config",
    "load_configuration",
    # stylesheet
    "parse_css",
    "stringify",
    # plugins
    "Plugin",
    "PluginContext",
    "GeneratedStyles",
    "compose",
    # diagnostics
    "Diagnostic",
    "Severity",
    # errors
    "GustError",
    "ConfigError",
    "ConfigLookupError",
    "ConfigLoadError",
    "CssSyntaxError",
    "SelectorSyntaxError",
    "DirectiveError",
    "DeprecatedDirectiveError",
    "UnknownScreenError",
    "UnknownVariantError",
    "PluginExecutionError",
]
