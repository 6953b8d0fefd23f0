"""Domain models for rules and violations."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Protocol

from css_style_linter.domain.context import Context
from css_style_linter.domain.nodes import NodeKind, SourceSpan, SyntaxNode

__all__ = [
    "ActiveRule",
    "Checkable",
    "Severity",
    "StyleRule",
    "Violation",
]


class Severity(str, Enum):
    """How seriously a violation is reported."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Violation:
    """A single reported instance of non-conformance to one rule."""

    rule_id: str
    severity: Severity
    span: SourceSpan
    message: str

    @property
    def line(self) -> int:
        return self.span.start.line

    @property
    def column(self) -> int:
        return self.span.start.column

    @property
    def sort_key(self) -> tuple[int, int, str]:
        """Total order: (line, column) ascending, ties broken by rule id."""
        return (self.line, self.column, self.rule_id)

    def to_dict(self) -> dict[str, Any]:
        """Structured form for machine consumption."""
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value,
            "line": self.line,
            "column": self.column,
            "end_line": self.span.end.line,
            "end_column": self.span.end.column,
            "message": self.message,
        }


class Checkable(Protocol):
    """A rule: a kind filter plus a pure check function."""

    rule_id: str
    description: str
    severity: Severity
    node_kinds: frozenset[NodeKind]
    defaults: Mapping[str, object]

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        """Interrogate a node for style breaches."""
        ...


class StyleRule:
    """
    Base class for the built-in rules.

    Subclasses set the class attributes and implement ``check``. Rule
    instances carry no per-pass state; anything a rule has to remember between
    nodes lives in ``context.state[rule_id]``.
    """

    rule_id: ClassVar[str] = ""
    description: ClassVar[str] = ""
    severity: ClassVar[Severity] = Severity.WARNING
    node_kinds: ClassVar[frozenset[NodeKind]] = frozenset()
    defaults: ClassVar[Mapping[str, object]] = {}

    def check(
        self, node: SyntaxNode, context: Context, options: Mapping[str, Any]
    ) -> list[Violation]:
        raise NotImplementedError

    def violation(self, span: SourceSpan, message: str) -> Violation:
        return Violation(
            rule_id=self.rule_id,
            severity=self.severity,
            span=span,
            message=message,
        )

    def violation_at(
        self, node: SyntaxNode, offset: int, message: str, length: int = 1
    ) -> Violation:
        """Violation anchored ``offset`` characters into ``node.text``."""
        return self.violation(node.span_of(offset, length), message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id!r})"


@dataclass(frozen=True)
class ActiveRule:
    """A registered rule enabled by configuration, with its merged options."""

    rule: Checkable
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def rule_id(self) -> str:
        return self.rule.rule_id

    def applies_to(self, node: SyntaxNode) -> bool:
        return node.kind in self.rule.node_kinds
