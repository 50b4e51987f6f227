"""gust model layer -- public type re-exports."""

from gust.model.diagnostic import Diagnostic, Severity

__all__ = [
    "Severity",
    "Diagnostic",
]
