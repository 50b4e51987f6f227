"""Diagnostic model: structured warnings recorded during a build."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gust.css.nodes import Source


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single recoverable finding produced while transforming a stylesheet.

    Attributes:
        rule: Identifier for the step that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: The selector involved, if applicable.
        source: Where the offending node came from, if known.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    source: Source | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.source is not None and self.source.line is not None:
            location = f" [{self.source}]"
        if self.selector:
            location += f" [selector={self.selector}]"
        return f"{self.severity.value}{location}: {self.message}"
