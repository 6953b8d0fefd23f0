"""Unit tests for comment-block-delimiter."""

import unittest

from css_style_linter.domain.rules.comments import CommentBlockDelimiterRule
from tests.lint_test_utils import positions, run_rule

RULE_ID = "comment-block-delimiter"
RULESET = ".a {\n  color: red;\n}\n"


def level_one(title: str = "Section", width: int = 74) -> str:
    return f"/* {'=' * width}\n   {title}\n   {'=' * width} */\n"


def level_two(title: str = "Sub-section", width: int = 74) -> str:
    return f"/* {title}\n   {'-' * width} */\n"


class TestCommentBlockDelimiterRule(unittest.TestCase):
    """Banner shapes, widths and the blank lines above them."""

    def test_level_one_banner_at_top_of_file(self) -> None:
        self.assertEqual(run_rule(RULE_ID, level_one() + "\n" + RULESET), [])

    def test_level_one_banner_after_two_blank_lines(self) -> None:
        self.assertEqual(run_rule(RULE_ID, RULESET + "\n\n" + level_one()), [])

    def test_level_one_banner_after_one_blank_line(self) -> None:
        result = run_rule(RULE_ID, RULESET + "\n" + level_one())
        self.assertEqual(positions(result), [(5, 1)])
        self.assertIn("Expected 2 blank line(s)", result[0].message)

    def test_level_two_banner_needs_one_blank_line(self) -> None:
        self.assertEqual(run_rule(RULE_ID, RULESET + "\n" + level_two()), [])
        result = run_rule(RULE_ID, RULESET + level_two())
        self.assertEqual(positions(result), [(4, 1)])

    def test_one_line_banner_without_blank_lines(self) -> None:
        result = run_rule(RULE_ID, RULESET + f"/* {'=' * 74} */\n")
        self.assertEqual(positions(result), [(4, 1), (4, 1)])
        messages = " ".join(v.message for v in result)
        self.assertIn("Level 1 banner", messages)
        self.assertIn("Expected 2 blank line(s) before level 1 banner comment, found 0", messages)

    def test_blank_line_counts_are_options(self) -> None:
        result = run_rule(RULE_ID, RULESET + "\n" + level_one(), l1_blank_lines=1)
        self.assertEqual(result, [])

    def test_wrong_width_reported_per_delimiter(self) -> None:
        result = run_rule(RULE_ID, level_one(width=70))
        self.assertEqual(positions(result), [(1, 4), (3, 4)])
        self.assertIn("70 characters wide (expected 74)", result[0].message)

    def test_width_option(self) -> None:
        self.assertEqual(run_rule(RULE_ID, level_one(width=10), width=10), [])

    def test_mixed_delimiters(self) -> None:
        source = f"/* {'=' * 74}\n   Section\n   {'-' * 74} */\n"
        result = run_rule(RULE_ID, source)
        self.assertEqual(len(result), 1)
        self.assertIn("mixes", result[0].message)

    def test_level_one_banner_missing_closing_delimiter(self) -> None:
        result = run_rule(RULE_ID, f"/* {'=' * 74}\n   Section */\n")
        self.assertEqual(len(result), 1)
        self.assertIn("Level 1 banner", result[0].message)

    def test_banner_opening_a_block_needs_no_blank_line(self) -> None:
        source = "a {\n  /* Sub\n     " + "-" * 74 + " */\n  color: red;\n}\n"
        self.assertEqual(run_rule(RULE_ID, source), [])

    def test_plain_and_line_comments_ignored(self) -> None:
        source = RULESET + "/* just a note */\n// ========\n"
        self.assertEqual(run_rule(RULE_ID, source), [])

    def test_delimiter_lines_found_with_offsets(self) -> None:
        lines = CommentBlockDelimiterRule.delimiter_lines("/* ===\n   x\n   === */")
        self.assertEqual([(d.index, d.offset, d.run) for d in lines], [(0, 3, "==="), (2, 15, "===")])


if __name__ == "__main__":
    unittest.main()
