"""Unit tests for RuleRegistry registration and resolution."""

import unittest

from css_style_linter.domain.config import LintConfiguration
from css_style_linter.domain.errors import (
    ConfigError,
    DuplicateRuleError,
    InvalidRuleOptionError,
    UnknownRuleError,
)
from css_style_linter.domain.registry import RuleRegistry
from css_style_linter.domain.rules.whitespace import IndentWidthRule, NoTabsRule

CATALOGUE = [
    "indent-width",
    "no-tabs",
    "brace-style",
    "declaration-colon-spacing",
    "one-selector-per-line",
    "one-declaration-per-line",
    "hex-case",
    "hex-shorthand",
    "quote-style",
    "zero-unit",
    "comma-space",
    "trailing-semicolon",
    "blank-line-between-rulesets",
    "declaration-alphabetical-order",
    "nesting-depth",
    "comment-block-delimiter",
    "selector-naming",
    "max-line-length",
]


class TestRuleRegistry(unittest.TestCase):
    """Test registration order, lookup and duplicate detection."""

    def setUp(self) -> None:
        self.registry = RuleRegistry.default()

    def test_default_registers_catalogue_in_order(self) -> None:
        self.assertEqual(self.registry.rule_ids, CATALOGUE)
        self.assertEqual(len(self.registry), 18)

    def test_lookup(self) -> None:
        self.assertIn("hex-case", self.registry)
        self.assertNotIn("nope", self.registry)
        self.assertIsNone(self.registry.get("nope"))
        self.assertEqual(self.registry.get("no-tabs").rule_id, "no-tabs")

    def test_duplicate_registration_rejected(self) -> None:
        registry = RuleRegistry([IndentWidthRule()])
        with self.assertRaises(DuplicateRuleError) as ctx:
            registry.register(IndentWidthRule())
        self.assertEqual(ctx.exception.rule_id, "indent-width")
        self.assertIsInstance(ctx.exception, ConfigError)


class TestRuleResolution(unittest.TestCase):
    """Test resolve() against configurations."""

    def setUp(self) -> None:
        self.registry = RuleRegistry.default()

    def resolve(self, rules: dict[str, object]):  # type: ignore[no-untyped-def]
        return self.registry.resolve(LintConfiguration.from_mapping(rules))

    def test_empty_configuration_enables_everything_with_defaults(self) -> None:
        active = self.resolve({})
        self.assertEqual([a.rule_id for a in active], CATALOGUE)
        self.assertEqual(active[0].options["size"], 2)

    def test_disabled_rules_dropped(self) -> None:
        active = self.resolve({"hex-case": False, "no-tabs": {"enabled": False}})
        ids = [a.rule_id for a in active]
        self.assertNotIn("hex-case", ids)
        self.assertNotIn("no-tabs", ids)
        self.assertEqual(len(ids), 16)

    def test_options_merged_over_defaults(self) -> None:
        active = self.resolve({"comment-block-delimiter": {"width": 60}})
        options = next(a for a in active if a.rule_id == "comment-block-delimiter").options
        self.assertEqual(dict(options), {"width": 60, "l1_blank_lines": 2, "l2_blank_lines": 1})

    def test_rule_defaults_never_mutated(self) -> None:
        self.resolve({"indent-width": {"size": 4}})
        self.assertEqual(IndentWidthRule.defaults["size"], 2)

    def test_unknown_rule_id(self) -> None:
        with self.assertRaises(UnknownRuleError) as ctx:
            self.resolve({"no-such-rule": True})
        self.assertEqual(ctx.exception.rule_id, "no-such-rule")

    def test_unknown_option(self) -> None:
        with self.assertRaises(InvalidRuleOptionError) as ctx:
            self.resolve({"indent-width": {"width": 2}})
        self.assertEqual(ctx.exception.option, "width")

    def test_mistyped_option(self) -> None:
        with self.assertRaises(InvalidRuleOptionError):
            self.resolve({"indent-width": {"size": "2"}})

    def test_bool_is_not_an_int_option(self) -> None:
        with self.assertRaises(InvalidRuleOptionError):
            self.resolve({"indent-width": {"size": True}})

    def test_option_outside_choices(self) -> None:
        with self.assertRaises(InvalidRuleOptionError) as ctx:
            self.resolve({"hex-case": {"case": "mixed"}})
        self.assertIn("'upper', 'lower'", str(ctx.exception))

    def test_options_of_disabled_rules_still_validated(self) -> None:
        with self.assertRaises(InvalidRuleOptionError):
            self.resolve({"quote-style": {"enabled": False, "style": "backtick"}})

    def test_custom_registry_resolves_only_its_rules(self) -> None:
        registry = RuleRegistry([NoTabsRule()])
        with self.assertRaises(UnknownRuleError):
            registry.resolve(LintConfiguration.from_mapping({"hex-case": False}))


if __name__ == "__main__":
    unittest.main()
