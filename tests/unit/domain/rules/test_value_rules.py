"""Unit tests for hex colours, quotes, zero units and comma spacing."""

import unittest

from tests.lint_test_utils import positions, run_rule


class TestHexCaseRule(unittest.TestCase):
    """Test hex colour letter case."""

    def test_lowercase_hex_reported_by_default(self) -> None:
        result = run_rule("hex-case", "a {\n  color: #ffffff;\n}\n")
        self.assertEqual(positions(result), [(2, 10)])
        self.assertIn("'#FFFFFF'", result[0].message)
        self.assertEqual(result[0].span.end.column, 16)

    def test_uppercase_hex_passes_by_default(self) -> None:
        self.assertEqual(run_rule("hex-case", "a {\n  color: #FFF;\n}\n"), [])

    def test_lower_option(self) -> None:
        result = run_rule("hex-case", "a {\n  color: #FFF;\n}\n", case="lower")
        self.assertEqual(len(result), 1)
        self.assertIn("'#fff'", result[0].message)

    def test_non_colour_lengths_ignored(self) -> None:
        self.assertEqual(run_rule("hex-case", "a {\n  color: #abcde;\n}\n"), [])

    def test_url_and_string_contents_ignored(self) -> None:
        source = 'a {\n  background: url(#ffffff);\n  content: "#fff";\n}\n'
        self.assertEqual(run_rule("hex-case", source), [])

    def test_at_rule_arguments_checked(self) -> None:
        result = run_rule("hex-case", "@include tint(#abc);\n")
        self.assertEqual(positions(result), [(1, 15)])


class TestHexShorthandRule(unittest.TestCase):
    """Test shorthand hex detection."""

    def test_six_digit_reducible(self) -> None:
        result = run_rule("hex-shorthand", "a {\n  color: #FFCC00;\n}\n")
        self.assertEqual(positions(result), [(2, 10)])
        self.assertIn("'#FC0'", result[0].message)

    def test_mixed_case_pairs_still_reducible(self) -> None:
        result = run_rule("hex-shorthand", "a {\n  color: #ffffff;\n}\n")
        self.assertIn("'#fff'", result[0].message)

    def test_eight_digit_reducible(self) -> None:
        result = run_rule("hex-shorthand", "a {\n  color: #FFFFFFAA;\n}\n")
        self.assertIn("'#FFFA'", result[0].message)

    def test_irreducible_and_short_forms_pass(self) -> None:
        source = "a {\n  border-color: #FFCC01;\n  color: #FFF;\n}\n"
        self.assertEqual(run_rule("hex-shorthand", source), [])


class TestQuoteStyleRule(unittest.TestCase):
    """Test string quoting."""

    def test_single_quotes_reported_by_default(self) -> None:
        result = run_rule("quote-style", "a {\n  content: 'x';\n}\n")
        self.assertEqual(positions(result), [(2, 12)])
        self.assertEqual(result[0].span.end.column, 14)

    def test_double_quotes_pass(self) -> None:
        self.assertEqual(run_rule("quote-style", 'a {\n  content: "x";\n}\n'), [])

    def test_string_containing_wanted_quote_may_use_other(self) -> None:
        source = "a {\n  content: 'say \"hi\"';\n}\n"
        self.assertEqual(run_rule("quote-style", source), [])

    def test_single_option(self) -> None:
        result = run_rule("quote-style", 'a {\n  content: "x";\n}\n', style="single")
        self.assertEqual(len(result), 1)
        self.assertIn("single quotes", result[0].message)

    def test_attribute_selectors_checked(self) -> None:
        result = run_rule("quote-style", "a[href='x'] {\n  color: red;\n}\n")
        self.assertEqual(positions(result), [(1, 8)])

    def test_at_rule_preludes_checked(self) -> None:
        result = run_rule("quote-style", "@import 'base';\n")
        self.assertEqual(positions(result), [(1, 9)])


class TestZeroUnitRule(unittest.TestCase):
    """Test units on zero lengths."""

    def test_only_the_zero_length_is_reported(self) -> None:
        result = run_rule("zero-unit", "a {\n  width: 10px;\n  height: 0px;\n}\n")
        self.assertEqual(positions(result), [(3, 11)])
        self.assertIn("'0px'", result[0].message)

    def test_every_zero_in_a_shorthand(self) -> None:
        result = run_rule("zero-unit", "a {\n  margin: 0em 1em 0% 0;\n}\n")
        self.assertEqual(positions(result), [(2, 11), (2, 19)])

    def test_properties_requiring_units_skipped(self) -> None:
        self.assertEqual(run_rule("zero-unit", "a {\n  flex: 1 1 0px;\n}\n"), [])

    def test_function_arguments_skipped(self) -> None:
        self.assertEqual(run_rule("zero-unit", "a {\n  width: calc(100% - 0px);\n}\n"), [])

    def test_variables_skipped(self) -> None:
        self.assertEqual(run_rule("zero-unit", "$gutter: 0px;\n"), [])

    def test_fractions_and_times_pass(self) -> None:
        source = "a {\n  line-height: 0.5em;\n  transition: opacity 0s;\n}\n"
        self.assertEqual(run_rule("zero-unit", source), [])


class TestCommaSpaceRule(unittest.TestCase):
    """Test spacing after commas in values."""

    def test_missing_space_after_comma(self) -> None:
        result = run_rule("comma-space", "a {\n  font-family: Arial,sans-serif;\n}\n")
        self.assertEqual(positions(result), [(2, 21)])

    def test_function_arguments(self) -> None:
        result = run_rule("comma-space", "a {\n  color: rgba(0,0,0,.5);\n}\n")
        self.assertEqual(len(result), 3)

    def test_two_spaces_after_comma(self) -> None:
        result = run_rule("comma-space", "a {\n  font-family: Arial,  sans-serif;\n}\n")
        self.assertEqual(len(result), 1)

    def test_single_space_and_line_breaks_pass(self) -> None:
        source = (
            "a {\n"
            "  font-family: Arial, sans-serif;\n"
            "  transition: color 1s,\n"
            "    opacity 1s;\n"
            "}\n"
        )
        self.assertEqual(run_rule("comma-space", source), [])

    def test_commas_in_strings_ignored(self) -> None:
        self.assertEqual(run_rule("comma-space", 'a {\n  content: "a,b";\n}\n'), [])

    def test_mixin_arguments_checked(self) -> None:
        result = run_rule("comma-space", "@include m($a,$b);\n")
        self.assertEqual(len(result), 1)


if __name__ == "__main__":
    unittest.main()
