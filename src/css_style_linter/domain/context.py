"""Block-scoped traversal state handed to rules by the walker."""

from dataclasses import dataclass, field

from css_style_linter.domain.nodes import SyntaxNode


@dataclass
class Context:
    """
    Transient state for one declaration block.

    The walker opens a fresh Context when it enters a block and drops it on
    exit, so nothing a rule stores here leaks into sibling blocks or into
    another lint pass. Rules keep their own scratch values in ``state`` under
    their rule id.
    """

    lines: tuple[str, ...]
    depth: int = 0
    block: SyntaxNode | None = None
    parent: "Context | None" = None
    previous: SyntaxNode | None = None
    state: dict[str, object] = field(default_factory=dict)

    @classmethod
    def root(cls, tree: SyntaxNode) -> "Context":
        """Context for the top level of a stylesheet."""
        # Lines break on "\n" only, matching the positions the parser reports.
        return cls(lines=tuple(tree.source.split("\n")), block=tree)

    def enter(self, block: SyntaxNode) -> "Context":
        """Open the child Context for ``block`` one nesting level deeper."""
        return Context(
            lines=self.lines,
            depth=self.depth + 1,
            block=block,
            parent=self,
        )

    def line(self, number: int) -> str:
        """Source line by 1-based number; empty when out of range."""
        if 1 <= number <= len(self.lines):
            return self.lines[number - 1]
        return ""

    def blank_lines_before(self, number: int) -> int:
        """Count blank lines directly above line ``number``."""
        count = 0
        current = number - 1
        while current >= 1 and not self.line(current).strip():
            count += 1
            current -= 1
        return count

    def starts_scope(self, number: int) -> bool:
        """True when nothing but blank lines or an opening brace precede line ``number``."""
        current = number - 1
        while current >= 1:
            stripped = self.line(current).strip()
            if stripped:
                return stripped.endswith("{")
            current -= 1
        return True
