from typing import Callable

from gust.config.resolver import Configuration
from gust.css.nodes import Root
from gust.plugins.base import GeneratedStyles
from gust.transforms.base import Transform
from gust.transforms.functions import ThemeFunctionTransform
from gust.transforms.responsive import ResponsiveAtRuleTransform
from gust.transforms.screen import ScreenAtRuleTransform
from gust.transforms.tailwind_at_rules import TailwindAtRuleTransform
from gust.transforms.variants import VariantsAtRuleTransform


def build_transforms(
    config: Configuration,
    generated: GeneratedStyles,
    on_error: Callable[[str], None] | None = None,
) -> list[Transform]:
    """The built-in transforms for one build, in the order they must run."""
    return [
        TailwindAtRuleTransform(generated),
        ThemeFunctionTransform(config),
        VariantsAtRuleTransform(config, on_error=on_error),
        ResponsiveAtRuleTransform(config, on_error=on_error),
        ScreenAtRuleTransform(config),
    ]


def apply_transforms(root: Root, transforms: list[Transform]) -> Root:
    """Apply *transforms* to *root* in order."""
    for t in transforms:
        root = t.apply(root)
    return root


__all__ = [
    "Transform",
    "build_transforms",
    "apply_transforms",
    "TailwindAtRuleTransform",
    "ThemeFunctionTransform",
    "VariantsAtRuleTransform",
    "ResponsiveAtRuleTransform",
    "ScreenAtRuleTransform",
]
