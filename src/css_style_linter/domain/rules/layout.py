"""Structural layout rules: selectors and declarations per line, spacing, nesting."""

from collections.abc import Mapping
from typing import Any, ClassVar

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, SourceSpan, SyntaxNode
from css_style_linter.domain.rules import StyleRule, Violation
from css_style_linter.domain.rules.comments import CommentBlockDelimiterRule
from css_style_linter.domain.scanning import SourceScanner


class OneSelectorPerLineRule(StyleRule):
    """Each selector of a multi-selector ruleset goes on its own line."""

    rule_id = "one-selector-per-line"
    description = "Use one discrete selector per line in multi-selector rulesets."
    node_kinds = frozenset({NodeKind.RULESET})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        prelude = SourceScanner.mask(node.prelude, parens=True, brackets=True)
        violations: list[Violation] = []
        for comma in SourceScanner.split_points(prelude):
            rest = prelude[comma + 1 :].split("\n", 1)[0]
            selector = rest.lstrip()
            if not selector:
                continue
            offset = comma + 1 + (len(rest) - len(selector))
            violations.append(
                self.violation_at(
                    node, offset, "Selector should be on its own line."
                )
            )
        return violations


class OneDeclarationPerLineRule(StyleRule):
    """A declaration may not start on the line the previous one ends on."""

    rule_id = "one-declaration-per-line"
    description = "Include one declaration per line in a declaration block."
    node_kinds = frozenset({NodeKind.DECLARATION})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        if context.block is not None and context.block.single_line:
            return []
        previous_end = context.state.get(self.rule_id)
        context.state[self.rule_id] = node.span.end.line
        if previous_end != node.span.start.line:
            return []
        return [
            self.violation(
                SourceSpan.at(node.span.start),
                f"Declaration '{node.name}' should be on its own line.",
            )
        ]


class BlankLineBetweenRulesetsRule(StyleRule):
    """
    Consecutive rulesets are separated by at least one blank line.

    Plain comments between two rulesets do not break their adjacency; the blank
    line may sit above or below them. A banner comment does, since
    comment-block-delimiter owns the spacing around banners.
    """

    rule_id = "blank-line-between-rulesets"
    description = "Separate each ruleset by a blank line."
    node_kinds = frozenset({NodeKind.RULESET})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        previous = self.previous_ruleset(node, context)
        if previous is None or node.single_line or previous.single_line:
            return []
        gap = range(previous.span.end.line + 1, node.span.start.line)
        if any(not context.line(number).strip() for number in gap):
            return []
        return [
            self.violation(
                SourceSpan.at(node.span.start),
                "Expected a blank line before this ruleset.",
            )
        ]

    @staticmethod
    def previous_ruleset(node: SyntaxNode, context: Context) -> SyntaxNode | None:
        """Closest earlier sibling when it is a ruleset, looking past plain comments."""
        siblings = context.block.children if context.block is not None else ()
        index = next((i for i, child in enumerate(siblings) if child is node), 0)
        for sibling in reversed(siblings[:index]):
            if sibling.kind is NodeKind.COMMENT and not CommentBlockDelimiterRule.delimiter_lines(
                sibling.text
            ):
                continue
            return sibling if sibling.kind is NodeKind.RULESET else None
        return None


class NestingDepthRule(StyleRule):
    """Nested blocks (rulesets and at-rules alike) may not go deeper than ``max``."""

    rule_id = "nesting-depth"
    description = "Limit nesting of rulesets and at-rules."
    node_kinds = frozenset({NodeKind.RULESET, NodeKind.AT_RULE})
    defaults: ClassVar[Mapping[str, object]] = {"max": 2}

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        if not node.has_block:
            return []
        limit = int(options["max"])
        level = context.depth + 1
        if level <= limit:
            return []
        return [
            self.violation_at(
                node,
                node.brace_offset,
                f"Nesting depth {level} exceeds the maximum of {limit}.",
            )
        ]
