"""Unit tests for indent-width, no-tabs and max-line-length."""

import unittest

from css_style_linter.domain.rules import Severity
from tests.lint_test_utils import positions, run_rule


class TestIndentWidthRule(unittest.TestCase):
    """Leading spaces must be a multiple of the configured size."""

    def test_two_space_indent_passes(self) -> None:
        result = run_rule("indent-width", "a {\n  color: red;\n}\n")
        self.assertEqual(result, [])

    def test_three_space_indent_reported_at_node_start(self) -> None:
        result = run_rule("indent-width", "a {\n   color: red;\n}\n")
        self.assertEqual(positions(result), [(2, 4)])
        self.assertIn("not a multiple of 2", result[0].message)

    def test_size_option_is_honoured(self) -> None:
        result = run_rule("indent-width", "a {\n  color: red;\n}\n", size=4)
        self.assertEqual(positions(result), [(2, 3)])

    def test_comments_are_checked_too(self) -> None:
        result = run_rule("indent-width", "a {\n   /* note */\n  color: red;\n}\n")
        self.assertEqual(positions(result), [(2, 4)])

    def test_tab_indent_left_to_no_tabs(self) -> None:
        result = run_rule("indent-width", "a {\n\tcolor: red;\n}\n")
        self.assertEqual(result, [])

    def test_nodes_not_starting_their_line_are_skipped(self) -> None:
        result = run_rule("indent-width", ".a { color: red; }\n")
        self.assertEqual(result, [])


class TestNoTabsRule(unittest.TestCase):
    """Tabs in leading whitespace are errors."""

    def test_tab_indent_reported_as_error(self) -> None:
        result = run_rule("no-tabs", "a {\n\tcolor: red;\n}\n")
        self.assertEqual(positions(result), [(2, 1)])
        self.assertIs(result[0].severity, Severity.ERROR)

    def test_tab_after_spaces_reported_at_tab(self) -> None:
        result = run_rule("no-tabs", "a {\n  \tcolor: red;\n}\n")
        self.assertEqual(positions(result), [(2, 3)])

    def test_tab_inside_value_is_not_indentation(self) -> None:
        result = run_rule("no-tabs", "a {\n  font-family: a,\tb;\n}\n")
        self.assertEqual(result, [])


class TestMaxLineLengthRule(unittest.TestCase):
    """Lines longer than the maximum are reported from the first excess column."""

    def test_long_line_reported(self) -> None:
        result = run_rule("max-line-length", "a {\n  border-color: rebeccapurple;\n}\n", max=20)
        self.assertEqual(len(result), 1)
        self.assertEqual(positions(result), [(2, 21)])
        self.assertEqual(result[0].span.end.column, 30)

    def test_default_limit_is_eighty(self) -> None:
        source = 'a {\n  content: "' + "x" * 70 + '";\n}\n'
        result = run_rule("max-line-length", source)
        self.assertEqual(positions(result), [(2, 81)])
        self.assertIn("84 characters", result[0].message)

    def test_lines_with_url_are_exempt(self) -> None:
        source = 'a {\n  background: url("/some/very/long/path.png");\n}\n'
        result = run_rule("max-line-length", source, max=20)
        self.assertEqual(result, [])


if __name__ == "__main__":
    unittest.main()
