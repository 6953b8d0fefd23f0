"""Selector naming convention for class and id names."""

import re
from collections.abc import Mapping
from typing import Any, ClassVar

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, SyntaxNode
from css_style_linter.domain.rules import StyleRule, Violation
from css_style_linter.domain.scanning import SourceScanner

SELECTOR_NAME = re.compile(r"([.#])(-?[_a-zA-Z][\w-]*)")


class SelectorNamingRule(StyleRule):
    """Class and id names match ``pattern`` (lowercase, hyphen-delimited by default)."""

    rule_id = "selector-naming"
    description = "Name classes and ids in lowercase, hyphen-delimited words."
    node_kinds = frozenset({NodeKind.RULESET})
    defaults: ClassVar[Mapping[str, object]] = {
        "pattern": r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
    }

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        pattern = re.compile(str(options["pattern"]))
        prelude = SourceScanner.mask(node.prelude, brackets=True)
        violations: list[Violation] = []
        for match in SELECTOR_NAME.finditer(prelude):
            # Parent-suffix selectors (&-item) and escaped names are not plain names.
            if match.start() and prelude[match.start() - 1] in "&\\":
                continue
            name = match.group(2)
            if pattern.match(name):
                continue
            kind = "Class" if match.group(1) == "." else "Id"
            violations.append(
                self.violation_at(
                    node,
                    match.start(),
                    f"{kind} name '{name}' does not match the naming convention.",
                    len(match.group(0)),
                )
            )
        return violations
