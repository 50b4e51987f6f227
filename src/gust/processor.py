"""Build pipeline: resolve config, compose plugins, run the transforms."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from gust.config.resolver import Configuration, resolve_config
from gust.css.nodes import Root, clone
from gust.css.parser import parse_css
from gust.css.printer import stringify
from gust.model.diagnostic import Diagnostic
from gust.plugins.composer import compose
from gust.transforms import apply_transforms, build_transforms

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """The transformed tree plus any selector problems recovered along the way."""

    root: Root
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def css(self) -> str:
        return stringify(self.root)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]

    @property
    def errors(self) -> list[Diagnostic]:
        """Selectors that could not be parsed, left unchanged in the output."""
        return [d for d in self.diagnostics if d.is_error]


def process(
    root: Root,
    config: Mapping[str, Any] | Configuration | None = None,
    *,
    on_error: Callable[[str], None] | None = None,
) -> BuildResult:
    """Run one full build over *root*.

    *root* is not modified; the build works on a copy and only returns once
    every step has succeeded. Configuration, directive and plugin errors
    propagate as :class:`gust.errors.GustError` subclasses. Selector
    problems are passed to *on_error* and collected in the result's
    ``diagnostics`` instead.
    """
    started = time.monotonic()
    configuration = resolve_config(config)
    generated = compose(configuration)
    transforms = build_transforms(configuration, generated, on_error=on_error)
    result = apply_transforms(clone(root), transforms)

    diagnostics: list[Diagnostic] = []
    for t in transforms:
        diagnostics.extend(getattr(t, "diagnostics", []))
    logger.debug(
        "Build finished in %.3fs with %d diagnostic(s)", time.monotonic() - started, len(diagnostics)
    )
    return BuildResult(root=result, diagnostics=diagnostics)


def compile_css(
    source: str,
    config: Mapping[str, Any] | Configuration | None = None,
    *,
    filename: str | None = None,
    on_error: Callable[[str], None] | None = None,
) -> str:
    """Parse *source*, build it and return the resulting CSS text."""
    return process(parse_css(source, filename=filename), config, on_error=on_error).css
