"""Syntax tree contract shared by the parser gateway and the rules."""

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Kinds of nodes a stylesheet tree is made of."""

    STYLESHEET = "stylesheet"
    RULESET = "ruleset"
    DECLARATION = "declaration"
    COMMENT = "comment"
    AT_RULE = "at-rule"


@dataclass(frozen=True, order=True)
class Position:
    """A 1-based line and column in the source text."""

    line: int
    column: int


@dataclass(frozen=True, order=True)
class SourceSpan:
    """Start and end (inclusive) of a node or token in the source text."""

    start: Position
    end: Position

    @classmethod
    def at(cls, position: Position) -> "SourceSpan":
        """Span covering a single character."""
        return cls(start=position, end=position)


@dataclass(frozen=True)
class SyntaxNode:
    """
    Read-only node of a CSS/SCSS tree.

    ``text`` is the raw source of the node starting at ``span.start``. Offsets
    (``brace_offset``, ``colon_offset``, ``value_offset``) index into ``text``
    and are -1 when the node has no such token.
    """

    kind: NodeKind
    span: SourceSpan
    text: str
    children: tuple["SyntaxNode", ...] = ()
    name: str = ""
    value: str = ""
    brace_offset: int = -1
    colon_offset: int = -1
    value_offset: int = -1
    terminated: bool = False
    single_line: bool = False
    inline: bool = False
    source: str = field(default="", repr=False, compare=False)
    """Whole stylesheet text; only set on the STYLESHEET root."""

    @property
    def has_block(self) -> bool:
        """True for rulesets and at-rules that open a ``{}`` block."""
        return self.brace_offset >= 0

    @property
    def prelude(self) -> str:
        """Text before the opening brace (selector list or at-rule prelude)."""
        if self.brace_offset >= 0:
            return self.text[: self.brace_offset]
        return self.text

    @property
    def declarations(self) -> tuple["SyntaxNode", ...]:
        return tuple(c for c in self.children if c.kind is NodeKind.DECLARATION)

    def locate(self, offset: int) -> Position:
        """Map an offset inside ``text`` to a source position."""
        segment = self.text[:offset]
        newlines = segment.count("\n")
        if not newlines:
            return Position(self.span.start.line, self.span.start.column + offset)
        return Position(
            self.span.start.line + newlines,
            offset - segment.rfind("\n"),
        )

    def span_of(self, offset: int, length: int = 1) -> SourceSpan:
        """Span of ``length`` characters starting at ``offset`` inside ``text``."""
        return SourceSpan(
            start=self.locate(offset),
            end=self.locate(offset + max(length, 1) - 1),
        )

    def walk(self) -> "list[SyntaxNode]":
        """All nodes of the subtree in document order, self first."""
        nodes = [self]
        for child in self.children:
            nodes.extend(child.walk())
        return nodes
