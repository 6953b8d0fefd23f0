"""Value rules: hex colours, quotes, zero units, comma spacing."""

import re
from collections.abc import Mapping
from typing import Any, ClassVar

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, SyntaxNode
from css_style_linter.domain.rules import StyleRule, Violation
from css_style_linter.domain.scanning import SourceScanner

HEX_COLOR = re.compile(r"(?<![\w&$-])#([0-9a-fA-F]+)(?![\w-])")

ZERO_LENGTH = re.compile(
    r"(?<![\w.#$-])(0+(?:\.0+)?)"
    r"(px|em|rem|ex|ch|vw|vh|vmin|vmax|cm|mm|in|pt|pc|q|%)(?![\w%-])",
    re.IGNORECASE,
)

# Zero needs a unit here (flex-basis: 0 is not flex-basis: 0%).
UNIT_REQUIRED_PROPERTIES: frozenset[str] = frozenset({"flex", "flex-basis"})


class ValueRegion:
    """Where a rule looks for values inside a node."""

    @staticmethod
    def offset_and_text(node: SyntaxNode) -> tuple[int, str]:
        """(offset into ``node.text``, text) of the value part of a node."""
        if node.kind is NodeKind.DECLARATION:
            if node.value_offset < 0:
                return (0, "")
            return (node.value_offset, node.text[node.value_offset :])
        if node.kind is NodeKind.AT_RULE:
            return (0, node.prelude)
        return (0, "")


class HexCaseRule(StyleRule):
    """Hex colours use one letter case throughout (upper by default)."""

    rule_id = "hex-case"
    description = "Write hex colour values in a consistent letter case."
    node_kinds = frozenset({NodeKind.DECLARATION, NodeKind.AT_RULE})
    defaults: ClassVar[Mapping[str, object]] = {"case": "upper"}
    choices: ClassVar[Mapping[str, tuple[object, ...]]] = {"case": ("upper", "lower")}

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        start, region = ValueRegion.offset_and_text(node)
        upper = options["case"] == "upper"
        violations: list[Violation] = []
        for match in HEX_COLOR.finditer(SourceScanner.mask(region)):
            literal = match.group(0)
            if len(match.group(1)) not in (3, 4, 6, 8):
                continue
            expected = literal.upper() if upper else literal.lower()
            if literal == expected:
                continue
            violations.append(
                self.violation_at(
                    node,
                    start + match.start(),
                    f"Hex colour '{literal}' should be written '{expected}'.",
                    len(literal),
                )
            )
        return violations


class HexShorthandRule(StyleRule):
    """Six- and eight-digit hex colours use the short form when it is equivalent."""

    rule_id = "hex-shorthand"
    description = "Use shorthand hex values where possible."
    node_kinds = frozenset({NodeKind.DECLARATION, NodeKind.AT_RULE})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        start, region = ValueRegion.offset_and_text(node)
        violations: list[Violation] = []
        for match in HEX_COLOR.finditer(SourceScanner.mask(region)):
            digits = match.group(1)
            if len(digits) not in (6, 8):
                continue
            pairs = [digits[i : i + 2] for i in range(0, len(digits), 2)]
            if any(pair[0].lower() != pair[1].lower() for pair in pairs):
                continue
            short = "#" + "".join(pair[0] for pair in pairs)
            violations.append(
                self.violation_at(
                    node,
                    start + match.start(),
                    f"Hex colour '{match.group(0)}' can be shortened to '{short}'.",
                    len(match.group(0)),
                )
            )
        return violations


class QuoteStyleRule(StyleRule):
    """
    Strings use the configured quote character.

    A string that contains the configured quote may use the other one, so no
    escaping is ever required to satisfy the rule.
    """

    rule_id = "quote-style"
    description = "Use double (or, if configured, single) quotes consistently."
    node_kinds = frozenset({NodeKind.RULESET, NodeKind.DECLARATION, NodeKind.AT_RULE})
    defaults: ClassVar[Mapping[str, object]] = {"style": "double"}
    choices: ClassVar[Mapping[str, tuple[object, ...]]] = {"style": ("double", "single")}

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        wanted = '"' if options["style"] == "double" else "'"
        text = node.text if node.kind is NodeKind.DECLARATION else node.prelude
        violations: list[Violation] = []
        for literal in SourceScanner.strings(text):
            if literal.quote == wanted or wanted in literal.inner(text):
                continue
            violations.append(
                self.violation_at(
                    node,
                    literal.start,
                    f"Strings should use {options['style']} quotes.",
                    literal.end - literal.start,
                )
            )
        return violations


class ZeroUnitRule(StyleRule):
    """Zero lengths carry no unit where the unit is optional."""

    rule_id = "zero-unit"
    description = "Avoid specifying units for zero values."
    node_kinds = frozenset({NodeKind.DECLARATION})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        prop = node.name.strip().lower()
        if prop.startswith(("$", "--")) or prop in UNIT_REQUIRED_PROPERTIES:
            return []
        start, region = ValueRegion.offset_and_text(node)
        # Function arguments (calc(), hsl(), ...) may need the unit.
        masked = SourceScanner.mask(region, parens=True)
        violations: list[Violation] = []
        for match in ZERO_LENGTH.finditer(masked):
            literal = match.group(0)
            violations.append(
                self.violation_at(
                    node,
                    start + match.start(),
                    f"Unit is unnecessary on zero length '{literal}'; use '0'.",
                    len(literal),
                )
            )
        return violations


class CommaSpaceRule(StyleRule):
    """Commas in values are followed by exactly one space (or a line break)."""

    rule_id = "comma-space"
    description = "Include a space after each comma in comma-separated values."
    node_kinds = frozenset({NodeKind.DECLARATION, NodeKind.AT_RULE})

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        start, region = ValueRegion.offset_and_text(node)
        masked = SourceScanner.mask(region)
        violations: list[Violation] = []
        for index, ch in enumerate(masked):
            if ch != ",":
                continue
            after = masked[index + 1 :]
            if after.startswith(("\n", "\r\n")) or after.lstrip(" ").startswith(")"):
                continue
            if after.startswith(" ") and after[1:2] not in ("", " ", "\t", "\n"):
                continue
            violations.append(
                self.violation_at(
                    node, start + index, "Expected a single space after ','."
                )
            )
        return violations
