"""Punctuation rules: brace placement, colon spacing, semicolons."""

from collections.abc import Mapping
from typing import Any

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, SyntaxNode
from css_style_linter.domain.rules import Severity, StyleRule, Violation


class BraceStyleRule(StyleRule):
    """
    One space before ``{``; in the multi-line form ``}`` sits on its own line,
    in the same column as the first character of the ruleset.
    """

    rule_id = "brace-style"
    description = "Single space before the opening brace, closing brace aligned with the ruleset."
    node_kinds = frozenset({NodeKind.RULESET, NodeKind.AT_RULE})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        if not node.has_block:
            return []
        violations: list[Violation] = []
        brace = node.brace_offset
        text = node.text
        if brace < 2 or text[brace - 1] != " " or text[brace - 2] in " \t\n":
            violations.append(
                self.violation_at(node, brace, "Expected a single space before '{'.")
            )

        close = len(text) - 1
        if node.single_line or not text.endswith("}"):
            return violations
        position = node.locate(close)
        before = context.line(position.line)[: position.column - 1]
        if before.strip():
            violations.append(
                self.violation_at(node, close, "Closing brace should be on its own line.")
            )
        elif position.column != node.span.start.column:
            violations.append(
                self.violation_at(
                    node,
                    close,
                    "Closing brace should be aligned with the start of the ruleset "
                    f"(column {node.span.start.column}, found {position.column}).",
                )
            )
        return violations


class DeclarationColonSpacingRule(StyleRule):
    """No space before the colon of a declaration, exactly one after it."""

    rule_id = "declaration-colon-spacing"
    description = "Include a single space after the colon of a declaration."
    node_kinds = frozenset({NodeKind.DECLARATION})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        colon = node.colon_offset
        if colon < 0:
            return []
        violations: list[Violation] = []
        before = node.text[:colon]
        name_end = len(before.rstrip())
        if name_end < colon:
            violations.append(
                self.violation_at(
                    node, name_end, "Unexpected whitespace before ':'.", colon - name_end
                )
            )
        after = node.text[colon + 1 :]
        # A value starting on the next line is allowed.
        single_space = after.startswith(" ") and after[1:2] not in ("", " ", "\t", "\n")
        if not single_space and not after.startswith(("\n", "\r\n")):
            violations.append(
                self.violation_at(node, colon, "Expected a single space after ':'.")
            )
        return violations


class TrailingSemicolonRule(StyleRule):
    """Every declaration, including the last of a block, ends with ``;``."""

    rule_id = "trailing-semicolon"
    description = "Include a semicolon at the end of the last declaration in a block."
    severity = Severity.ERROR
    node_kinds = frozenset({NodeKind.DECLARATION})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        if node.terminated:
            return []
        return [
            self.violation_at(
                node,
                len(node.text.rstrip()) - 1,
                f"Missing ';' after declaration '{node.name}'.",
            )
        ]
