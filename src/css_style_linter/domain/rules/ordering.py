"""Declaration ordering within comment-delimited clusters."""

import re
from collections.abc import Mapping
from typing import Any

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, SourceSpan, SyntaxNode
from css_style_linter.domain.rules import StyleRule, Violation

VENDOR_PREFIX = re.compile(r"^-[a-z]+-")


class DeclarationAlphabeticalOrderRule(StyleRule):
    """
    Properties ascend alphabetically within a cluster.

    A cluster ends at a comment on its own line, or at a nested ruleset or
    at-rule; trailing comments and blank lines do not split it. Vendor
    prefixes are ignored for comparison. SCSS variables and custom properties
    are not ordered.
    """

    rule_id = "declaration-alphabetical-order"
    description = "Order declarations alphabetically within each cluster."
    node_kinds = frozenset(
        {NodeKind.DECLARATION, NodeKind.COMMENT, NodeKind.RULESET, NodeKind.AT_RULE}
    )

    @staticmethod
    def sort_name(prop: str) -> str:
        return VENDOR_PREFIX.sub("", prop.strip().lower())

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        if node.kind is not NodeKind.DECLARATION:
            if not node.inline:
                context.state.pop(self.rule_id, None)
            return []
        prop = node.name.strip()
        if not prop or prop.startswith(("$", "--")):
            return []
        current = (self.sort_name(prop), prop)
        previous = context.state.get(self.rule_id)
        context.state[self.rule_id] = current
        if not isinstance(previous, tuple) or current[0] >= previous[0]:
            return []
        return [
            self.violation(
                SourceSpan.at(node.span.start),
                f"Property '{prop}' should come before '{previous[1]}'.",
            )
        ]
