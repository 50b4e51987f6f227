"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from gust.css.nodes import Root


class Transform(Protocol):
    """A tree-to-tree transformation step."""

    def apply(self, root: Root) -> Root: ...
