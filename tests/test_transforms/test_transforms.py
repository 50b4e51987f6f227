"""Tests for the stylesheet transforms."""

from __future__ import annotations

import pytest

from gust.config import resolve_config
from gust.css import AtRule, Declaration, Root, Rule, Source, clone, parse_css, stringify, walk
from gust.errors import (
    ConfigError,
    ConfigLookupError,
    DeprecatedDirectiveError,
    UnknownScreenError,
    UnknownVariantError,
)
from gust.model import Severity
from gust.plugins import GeneratedStyles
from gust.selectors import NO_CLASS_MESSAGE
from gust.transforms import (
    ResponsiveAtRuleTransform,
    ScreenAtRuleTransform,
    TailwindAtRuleTransform,
    ThemeFunctionTransform,
    VariantsAtRuleTransform,
    apply_transforms,
    build_transforms,
)
from gust.transforms.tailwind_at_rules import PREFLIGHT_MESSAGE

TWO_SCREENS = {"theme": {"screens": {"sm": "640px", "md": "768px"}}}


def _rule(selector: str, prop: str = "color", value: str = "red") -> Rule:
    return Rule(selectors=[selector], nodes=[Declaration(prop, value)])


def _generated() -> GeneratedStyles:
    return GeneratedStyles(
        base=[_rule("body", "margin", "0")],
        components=[_rule(".btn", "padding", "1rem")],
        utilities=[_rule(".flex", "display", "flex"), _rule(".block", "display", "block")],
    )


def _selectors(nodes) -> list[str]:
    return [n.selector for n in nodes if isinstance(n, Rule)]


# ---------------------------------------------------------------------------
# TailwindAtRuleTransform
# ---------------------------------------------------------------------------


class TestTailwindAtRules:
    def test_utilities_replaced_in_place(self):
        root = parse_css(".a { color: red }\n@tailwind utilities;\n.b { color: blue }")
        result = TailwindAtRuleTransform(_generated()).apply(root)
        assert _selectors(result.nodes) == [".a", ".flex", ".block", ".b"]

    def test_inserted_nodes_carry_marker_source(self):
        root = parse_css(".a { color: red }\n@tailwind utilities;", filename="app.css")
        result = TailwindAtRuleTransform(_generated()).apply(root)
        marker_source = Source(line=2, column=1, file="app.css")
        for node in walk(result.nodes[1:]):
            assert node.source == marker_source

    def test_all_categories(self):
        root = parse_css("@tailwind base;\n@tailwind components;\n@tailwind utilities;")
        result = TailwindAtRuleTransform(_generated()).apply(root)
        assert _selectors(result.nodes) == ["body", ".btn", ".flex", ".block"]

    def test_empty_category_removes_marker(self):
        root = parse_css("@tailwind components;")
        result = TailwindAtRuleTransform(GeneratedStyles()).apply(root)
        assert result.nodes == []

    def test_repeated_marker_gets_independent_copies(self):
        root = parse_css("@tailwind utilities;\n@tailwind utilities;")
        result = TailwindAtRuleTransform(_generated()).apply(root)
        assert _selectors(result.nodes) == [".flex", ".block", ".flex", ".block"]
        assert result.nodes[0] is not result.nodes[2]

    def test_generated_styles_not_mutated(self):
        generated = _generated()
        TailwindAtRuleTransform(generated).apply(parse_css("@tailwind utilities;"))
        assert generated.utilities[0].source is None

    def test_preflight_raises(self):
        root = parse_css(".a { color: red }\n@tailwind preflight;")
        with pytest.raises(DeprecatedDirectiveError) as exc_info:
            TailwindAtRuleTransform(_generated()).apply(root)
        assert exc_info.value.word == "preflight"
        assert exc_info.value.line == 2
        assert PREFLIGHT_MESSAGE in str(exc_info.value)

    def test_other_params_untouched(self):
        root = parse_css("@tailwind screens;\n@tailwind nonsense;")
        result = TailwindAtRuleTransform(_generated()).apply(root)
        assert [n.params for n in result.nodes] == ["screens", "nonsense"]

    def test_nested_marker(self):
        root = parse_css("@media print { @tailwind components; }")
        result = TailwindAtRuleTransform(_generated()).apply(root)
        assert _selectors(result.nodes[0].nodes) == [".btn"]

    def test_input_not_mutated(self):
        root = parse_css("@tailwind utilities;")
        before = clone(root)
        TailwindAtRuleTransform(_generated()).apply(root)
        assert root == before


# ---------------------------------------------------------------------------
# ThemeFunctionTransform
# ---------------------------------------------------------------------------


class TestThemeFunction:
    def _apply(self, css: str, user_config=None) -> Root:
        return ThemeFunctionTransform(resolve_config(user_config)).apply(parse_css(css))

    def test_declaration_value(self):
        result = self._apply(".a { color: theme('colors.red.500') }")
        assert result.nodes[0].nodes[0].value == "#f56565"

    def test_double_quotes_and_surrounding_text(self):
        result = self._apply('.a { border: 1px solid theme("colors.gray.300") }')
        assert result.nodes[0].nodes[0].value == "1px solid #e2e8f0"

    def test_bracket_path(self):
        result = self._apply(".a { width: theme('width[1/2]') }")
        assert result.nodes[0].nodes[0].value == "50%"

    def test_fallback(self):
        result = self._apply(".a { color: theme('colors.brand', #123) }")
        assert result.nodes[0].nodes[0].value == "#123"

    def test_missing_path_raises(self):
        with pytest.raises(ConfigLookupError):
            self._apply(".a { color: theme('colors.brand') }")

    def test_list_value_joined(self):
        user = {"theme": {"fontFamily": {"sans": ["Inter", "sans-serif"]}}}
        result = self._apply(".a { font-family: theme('fontFamily.sans') }", user)
        assert result.nodes[0].nodes[0].value == "Inter, sans-serif"

    def test_object_value_raises(self):
        with pytest.raises(ConfigError):
            self._apply(".a { color: theme('colors.red') }")

    def test_at_rule_params(self):
        result = self._apply("@media (min-width: theme('screens.md')) { .a { color: red } }")
        assert result.nodes[0].params == "(min-width: 768px)"


# ---------------------------------------------------------------------------
# VariantsAtRuleTransform
# ---------------------------------------------------------------------------


class TestVariantsAtRule:
    def test_default_then_listed_variants(self):
        root = parse_css("@variants hover, focus { .a { color: red } }")
        result = VariantsAtRuleTransform(resolve_config()).apply(root)
        assert _selectors(result.nodes) == [".a", ".hover\\:a:hover", ".focus\\:a:focus"]

    def test_explicit_default_position(self):
        root = parse_css("@variants hover, default { .a { color: red } }")
        result = VariantsAtRuleTransform(resolve_config()).apply(root)
        assert _selectors(result.nodes) == [".hover\\:a:hover", ".a"]

    def test_group_variant(self):
        root = parse_css("@variants group-hover { .a { color: red } }")
        result = VariantsAtRuleTransform(resolve_config()).apply(root)
        assert _selectors(result.nodes) == [".a", ".group:hover .group-hover\\:a"]

    def test_responsive_wraps_output(self):
        root = parse_css("@variants responsive, hover { .a { color: red } }")
        result = VariantsAtRuleTransform(resolve_config()).apply(root)
        assert len(result.nodes) == 1
        wrapper = result.nodes[0]
        assert wrapper.name == "responsive"
        assert _selectors(wrapper.nodes) == [".a", ".hover\\:a:hover"]

    def test_custom_separator(self):
        root = parse_css("@variants hover { .a { color: red } }")
        result = VariantsAtRuleTransform(resolve_config({"separator": "_"})).apply(root)
        assert _selectors(result.nodes) == [".a", ".hover_a:hover"]

    def test_group_class_takes_prefix(self):
        root = parse_css("@variants group-hover { .text-red { color: red } }")
        result = VariantsAtRuleTransform(resolve_config({"prefix": "tw-"})).apply(root)
        assert _selectors(result.nodes) == [".text-red", ".tw-group:hover .group-hover\\:text-red"]

    def test_group_class_takes_callable_prefix(self):
        config = resolve_config({"prefix": lambda selector: "x-"})
        root = parse_css("@variants group-focus { .a { color: red } }")
        result = VariantsAtRuleTransform(config).apply(root)
        assert _selectors(result.nodes)[1] == ".x-group:focus .group-focus\\:a"

    def test_unknown_variant_raises(self):
        root = parse_css("@variants wiggle { .a { color: red } }")
        with pytest.raises(UnknownVariantError) as exc_info:
            VariantsAtRuleTransform(resolve_config()).apply(root)
        assert exc_info.value.word == "wiggle"
        assert '"wiggle" variant' in str(exc_info.value)

    def test_selector_without_class_reported(self):
        errors = []
        transform = VariantsAtRuleTransform(resolve_config(), on_error=errors.append)
        result = transform.apply(parse_css("@variants hover { a { color: red } }"))
        assert _selectors(result.nodes) == ["a", "a"]
        assert errors == [NO_CLASS_MESSAGE]
        assert transform.diagnostics[0].rule == "variants"
        assert transform.diagnostics[0].selector == "a"


# ---------------------------------------------------------------------------
# ResponsiveAtRuleTransform
# ---------------------------------------------------------------------------


class TestResponsiveAtRule:
    def _apply(self, css: str, user_config=TWO_SCREENS, on_error=None):
        transform = ResponsiveAtRuleTransform(resolve_config(user_config), on_error=on_error)
        return transform, transform.apply(parse_css(css))

    def test_one_media_block_per_screen_in_order(self):
        _, result = self._apply("@responsive { .flex { display: flex } }")
        assert stringify(result) == (
            ".flex {\n"
            "  display: flex;\n"
            "}\n"
            "\n"
            "@media (min-width: 640px) {\n"
            "  .sm\\:flex {\n"
            "    display: flex;\n"
            "  }\n"
            "}\n"
            "\n"
            "@media (min-width: 768px) {\n"
            "  .md\\:flex {\n"
            "    display: flex;\n"
            "  }\n"
            "}\n"
        )

    def test_unprefixed_rules_stay_in_place(self):
        _, result = self._apply(".a { color: red }\n@responsive { .b { color: blue } }\n.c { color: green }")
        assert _selectors(result.nodes) == [".a", ".b", ".c"]
        assert [n.params for n in result.nodes[3:]] == ["(min-width: 640px)", "(min-width: 768px)"]

    def test_blocks_are_merged_per_screen(self):
        css = "@responsive { .a { color: red } }\n.x { color: blue }\n@responsive { .b { color: red } }"
        _, result = self._apply(css)
        media = [n for n in result.nodes if isinstance(n, AtRule)]
        assert len(media) == 2
        assert _selectors(media[0].nodes) == [".sm\\:a", ".sm\\:b"]
        assert _selectors(media[1].nodes) == [".md\\:a", ".md\\:b"]

    def test_every_selector_in_a_list_is_rewritten(self):
        _, result = self._apply("@responsive { .a, .b > span { color: red } }")
        assert result.nodes[1].nodes[0].selectors == [".sm\\:a", ".sm\\:b > span"]

    def test_selector_without_class_reported_per_screen(self):
        errors = []
        transform, result = self._apply(
            "@responsive { div { color: red } }", on_error=errors.append
        )
        assert errors == [NO_CLASS_MESSAGE, NO_CLASS_MESSAGE]
        assert [d.selector for d in transform.diagnostics] == ["div", "div"]
        assert _selectors(result.nodes[1].nodes) == ["div"]

    def test_unparseable_selector_reported_as_error(self):
        errors = []
        transform, result = self._apply("@responsive { svg|a { color: red } }", on_error=errors.append)
        assert errors == ["Could not parse selector 'svg|a'."] * 2
        assert [d.severity for d in transform.diagnostics] == [Severity.ERROR, Severity.ERROR]
        assert _selectors(result.nodes[1].nodes) == ["svg|a"]

    def test_selector_error_does_not_stop_other_rules(self):
        errors = []
        _, result = self._apply(
            "@responsive { div { color: red } .a { color: blue } }", on_error=errors.append
        )
        assert _selectors(result.nodes[2].nodes) == ["div", ".sm\\:a"]
        assert len(errors) == 2

    def test_no_responsive_blocks_is_noop(self):
        root = parse_css(".a { color: red }\n@tailwind screens;")
        transform = ResponsiveAtRuleTransform(resolve_config(TWO_SCREENS))
        assert transform.apply(root) == root

    def test_empty_responsive_block_is_removed_without_media(self):
        _, result = self._apply(".a { color: red }\n@responsive {}")
        assert _selectors(result.nodes) == [".a"]
        assert len(result.nodes) == 1

    def test_screens_marker_receives_media_blocks(self):
        css = "@responsive { .a { color: red } }\n@tailwind screens;\n.z { color: blue }"
        _, result = self._apply(css)
        assert isinstance(result.nodes[1], AtRule)
        assert result.nodes[1].name == "media"
        assert result.nodes[1].source.line == 2
        assert result.nodes[2].name == "media"
        assert result.nodes[3].selector == ".z"
        assert len(result.nodes) == 4

    def test_only_first_screens_marker_is_used(self):
        css = "@tailwind screens;\n@responsive { .a { color: red } }\n@tailwind screens;"
        _, result = self._apply(css)
        assert [n.name for n in result.nodes if isinstance(n, AtRule)] == ["media", "media"]
        assert result.nodes[2].selector == ".a"

    def test_screens_marker_kept_when_nothing_to_place(self):
        _, result = self._apply("@tailwind screens;")
        assert result.nodes[0].params == "screens"

    def test_zero_screens(self):
        _, result = self._apply(
            "@responsive { .a { color: red } }", user_config={"theme": {"screens": {}}}
        )
        assert _selectors(result.nodes) == [".a"]
        assert len(result.nodes) == 1

    def test_complex_screen_values(self):
        screens = {"tablet": {"min": "640px", "max": "1023px"}, "print": {"raw": "print"}}
        _, result = self._apply(
            "@responsive { .a { color: red } }", user_config={"theme": {"screens": screens}}
        )
        assert [n.params for n in result.nodes[1:]] == [
            "(min-width: 640px) and (max-width: 1023px)",
            "print",
        ]

    def test_input_not_mutated(self):
        root = parse_css("@responsive { .a { color: red } }")
        before = clone(root)
        ResponsiveAtRuleTransform(resolve_config(TWO_SCREENS)).apply(root)
        assert root == before


# ---------------------------------------------------------------------------
# ScreenAtRuleTransform
# ---------------------------------------------------------------------------


class TestScreenAtRule:
    def test_screen_becomes_media(self):
        root = parse_css("@screen md { .a { color: red } }")
        result = ScreenAtRuleTransform(resolve_config()).apply(root)
        assert result.nodes[0].name == "media"
        assert result.nodes[0].params == "(min-width: 768px)"
        assert _selectors(result.nodes[0].nodes) == [".a"]

    def test_unknown_screen_raises(self):
        root = parse_css("@screen huge { .a { color: red } }")
        with pytest.raises(UnknownScreenError, match="No `huge` screen found."):
            ScreenAtRuleTransform(resolve_config()).apply(root)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class TestApplyTransforms:
    def test_build_transforms_order(self):
        transforms = build_transforms(resolve_config(), GeneratedStyles())
        assert [type(t).__name__ for t in transforms] == [
            "TailwindAtRuleTransform",
            "ThemeFunctionTransform",
            "VariantsAtRuleTransform",
            "ResponsiveAtRuleTransform",
            "ScreenAtRuleTransform",
        ]

    def test_generated_variants_reach_responsive_pass(self):
        generated = GeneratedStyles(
            utilities=[AtRule("variants", "responsive", [_rule(".flex", "display", "flex")])]
        )
        config = resolve_config(TWO_SCREENS)
        result = apply_transforms(parse_css("@tailwind utilities;"), build_transforms(config, generated))
        assert _selectors(result.nodes) == [".flex"]
        assert [_selectors(n.nodes) for n in result.nodes[1:]] == [[".sm\\:flex"], [".md\\:flex"]]

    def test_custom_transform(self):
        class Uppercase:
            def apply(self, root: Root) -> Root:
                for node in walk(root.nodes):
                    if isinstance(node, Declaration):
                        node.value = node.value.upper()
                return root

        result = apply_transforms(parse_css(".a { color: red }"), [Uppercase()])
        assert result.nodes[0].nodes[0].value == "RED"
