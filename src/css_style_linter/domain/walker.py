"""Depth-first, document-order traversal that drives the active rules."""

from collections.abc import Sequence

from css_style_linter.domain.collector import ViolationCollector
from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import SyntaxNode
from css_style_linter.domain.rules import ActiveRule


class Walker:
    """
    Visits every node of a tree, comments included, top to bottom.

    Each node is handed to the active rules whose kind filter matches, along
    with the Context of the block the node sits in. Entering a block-bearing
    node opens a fresh Context one level deeper; it is dropped when the walker
    leaves the block.
    """

    def __init__(self, rules: Sequence[ActiveRule], collector: ViolationCollector) -> None:
        self._rules = tuple(rules)
        self._collector = collector

    def walk(self, tree: SyntaxNode) -> None:
        context = Context.root(tree)
        self._visit(tree, context)
        self._visit_children(tree, context)

    def _visit(self, node: SyntaxNode, context: Context) -> None:
        for active in self._rules:
            if active.applies_to(node):
                self._collector.extend(active.rule.check(node, context, active.options))

    def _visit_children(self, node: SyntaxNode, context: Context) -> None:
        for child in node.children:
            self._visit(child, context)
            if child.has_block:
                self._visit_children(child, context.enter(child))
            context.previous = child
