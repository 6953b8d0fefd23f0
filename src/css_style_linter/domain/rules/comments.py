"""Banner comment (L1 ``===`` / L2 ``---``) formatting."""

from collections.abc import Mapping
from typing import Any, ClassVar, NamedTuple

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, SourceSpan, SyntaxNode
from css_style_linter.domain.rules import StyleRule, Violation


class DelimiterLine(NamedTuple):
    index: int
    offset: int
    run: str


class CommentBlockDelimiterRule(StyleRule):
    """
    Section banners follow one of two fixed shapes.

    Level 1::

        /* ==========================================================================
           Section title
           ========================================================================== */

    Level 2::

        /* Sub-section title
           -------------------------------------------------------------------------- */

    Every delimiter run is exactly ``width`` characters. A level 1 banner needs
    ``l1_blank_lines`` blank lines above it, level 2 ``l2_blank_lines``,
    unless it opens the file or a block.
    """

    rule_id = "comment-block-delimiter"
    description = "Format section comment banners with fixed-width delimiters."
    node_kinds = frozenset({NodeKind.COMMENT})
    defaults: ClassVar[Mapping[str, object]] = {
        "width": 74,
        "l1_blank_lines": 2,
        "l2_blank_lines": 1,
    }

    @staticmethod
    def delimiter_lines(text: str) -> list[DelimiterLine]:
        found: list[DelimiterLine] = []
        offset = 0
        for index, line in enumerate(text.split("\n")):
            content = line.strip()
            if content.startswith("/*"):
                content = content[2:]
            if content.endswith("*/"):
                content = content[:-2]
            content = content.strip()
            if len(content) >= 3 and len(set(content)) == 1 and content[0] in "=-":
                found.append(DelimiterLine(index, offset + line.index(content), content))
            offset += len(line) + 1
        return found

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        if node.inline or not node.text.startswith("/*"):
            return []
        delimiters = self.delimiter_lines(node.text)
        if not delimiters:
            return []

        violations: list[Violation] = []
        chars = {d.run[0] for d in delimiters}
        if len(chars) > 1:
            return [
                self.violation(
                    SourceSpan.at(node.span.start),
                    "Banner comment mixes '=' and '-' delimiters.",
                )
            ]
        level = 1 if chars == {"="} else 2
        width = int(options["width"])
        for delimiter in delimiters:
            if len(delimiter.run) != width:
                violations.append(
                    self.violation_at(
                        node,
                        delimiter.offset,
                        f"Banner delimiter is {len(delimiter.run)} characters wide "
                        f"(expected {width}).",
                        len(delimiter.run),
                    )
                )

        last_line = node.text.count("\n")
        indexes = {d.index for d in delimiters}
        if level == 1:
            well_formed = last_line >= 2 and indexes == {0, last_line}
        else:
            well_formed = last_line >= 1 and indexes == {last_line}
        if not well_formed:
            violations.append(
                self.violation(
                    SourceSpan.at(node.span.start),
                    f"Level {level} banner comment does not match the "
                    f"{'=== title ===' if level == 1 else 'title / ---'} layout.",
                )
            )

        required = int(options["l1_blank_lines" if level == 1 else "l2_blank_lines"])
        start_line = node.span.start.line
        if not context.starts_scope(start_line):
            found = context.blank_lines_before(start_line)
            if found < required:
                first_line = node.text.split("\n", 1)[0]
                violations.append(
                    self.violation_at(
                        node,
                        0,
                        f"Expected {required} blank line(s) before level {level} "
                        f"banner comment, found {found}.",
                        len(first_line),
                    )
                )
        return violations
