"""Line-level whitespace rules: indentation width, tabs, line length."""

from collections.abc import Mapping
from typing import Any, ClassVar

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, Position, SourceSpan, SyntaxNode
from css_style_linter.domain.rules import Severity, StyleRule, Violation


class IndentWidthRule(StyleRule):
    """Leading spaces of every line that starts a node must be a multiple of ``size``."""

    rule_id = "indent-width"
    description = "Indent with a fixed number of spaces per level."
    node_kinds = frozenset(
        {NodeKind.RULESET, NodeKind.AT_RULE, NodeKind.DECLARATION, NodeKind.COMMENT}
    )
    defaults: ClassVar[Mapping[str, object]] = {"size": 2}

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        if node.inline:
            return []
        size = int(options["size"])
        line = context.line(node.span.start.line)
        indent = line[: len(line) - len(line.lstrip())]
        # Only lines the node starts; tabs belong to no-tabs.
        if node.span.start.column != len(indent) + 1 or "\t" in indent or size <= 0:
            return []
        if len(indent) % size == 0:
            return []
        return [
            self.violation(
                SourceSpan.at(node.span.start),
                f"Indentation of {len(indent)} spaces is not a multiple of {size}.",
            )
        ]


class NoTabsRule(StyleRule):
    """Tabs must not appear in leading whitespace."""

    rule_id = "no-tabs"
    description = "Use soft (space) indentation, never tabs."
    severity = Severity.ERROR
    node_kinds = frozenset({NodeKind.STYLESHEET})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        violations: list[Violation] = []
        for number, line in enumerate(context.lines, start=1):
            indent = line[: len(line) - len(line.lstrip())]
            tab = indent.find("\t")
            if tab >= 0:
                violations.append(
                    self.violation(
                        SourceSpan.at(Position(number, tab + 1)),
                        "Tab character used for indentation.",
                    )
                )
        return violations


class MaxLineLengthRule(StyleRule):
    """Lines stay within ``max`` characters; lines holding a ``url()`` are exempt."""

    rule_id = "max-line-length"
    description = "Keep lines to a sensible maximum length."
    node_kinds = frozenset({NodeKind.STYLESHEET})
    defaults: ClassVar[Mapping[str, object]] = {"max": 80}

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        limit = int(options["max"])
        violations: list[Violation] = []
        for number, line in enumerate(context.lines, start=1):
            if len(line) <= limit or "url(" in line.lower():
                continue
            violations.append(
                self.violation(
                    SourceSpan(Position(number, limit + 1), Position(number, len(line))),
                    f"Line is {len(line)} characters long (maximum {limit}).",
                )
            )
        return violations
