"""SCSS Gateway - turns CSS/SCSS source text into SyntaxNode trees."""

import bisect
import logging

from css_style_linter.domain.errors import StyleSyntaxError
from css_style_linter.domain.nodes import NodeKind, Position, SourceSpan, SyntaxNode
from css_style_linter.domain.protocols import StyleParserProtocol

logger = logging.getLogger(__name__)


class _ScssParser:
    """One-shot parser over a single source string."""

    def __init__(self, source: str, path: str) -> None:
        self.src = source
        self.path = path
        self.n = len(source)
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == "\n"]

    # -- positions -----------------------------------------------------------

    def position(self, offset: int) -> Position:
        index = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(index + 1, offset - self._line_starts[index] + 1)

    def span(self, start: int, text: str) -> SourceSpan:
        return SourceSpan(self.position(start), self.position(start + max(len(text), 1) - 1))

    def error(self, message: str, offset: int) -> StyleSyntaxError:
        pos = self.position(min(offset, max(self.n - 1, 0)))
        return StyleSyntaxError(message, pos.line, pos.column, self.path)

    def starts_line(self, offset: int) -> bool:
        line_start = self._line_starts[self.position(offset).line - 1]
        return not self.src[line_start:offset].strip()

    # -- scanning ------------------------------------------------------------

    def skip_string(self, i: int) -> int:
        quote = self.src[i]
        j = i + 1
        while j < self.n:
            ch = self.src[j]
            if ch == "\\":
                j += 2
                continue
            if ch == quote:
                return j + 1
            if ch == "\n":
                break
            j += 1
        raise self.error("Unterminated string", i)

    def skip_block_comment(self, i: int) -> int:
        end = self.src.find("*/", i + 2)
        if end < 0:
            raise self.error("Unterminated comment", i)
        return end + 2

    def skip_interpolation(self, i: int) -> int:
        depth = 0
        j = i + 1
        while j < self.n:
            ch = self.src[j]
            if ch in "\"'":
                j = self.skip_string(j)
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return j + 1
            j += 1
        raise self.error("Unterminated interpolation", i)

    def find_stop(self, i: int) -> int:
        """Offset of the first top-level ``{``, ``;`` or ``}`` from ``i`` (or n)."""
        depth = 0
        j = i
        while j < self.n:
            ch = self.src[j]
            if ch in "\"'":
                j = self.skip_string(j)
                continue
            if self.src.startswith("/*", j):
                j = self.skip_block_comment(j)
                continue
            if self.src.startswith("#{", j):
                j = self.skip_interpolation(j)
                continue
            if (
                not depth
                and self.src.startswith("//", j)
                and (j == i or self.src[j - 1] in " \t\n")
            ):
                newline = self.src.find("\n", j)
                j = self.n if newline < 0 else newline
                continue
            if ch in "([":
                depth += 1
            elif ch in ")]":
                depth = max(depth - 1, 0)
            elif not depth and ch in "{;}":
                return j
            j += 1
        return self.n

    def find_colon(self, start: int, stop: int) -> int:
        depth = 0
        j = start
        while j < stop:
            ch = self.src[j]
            if ch in "\"'":
                j = self.skip_string(j)
                continue
            if self.src.startswith("#{", j):
                j = self.skip_interpolation(j)
                continue
            if ch in "([":
                depth += 1
            elif ch in ")]":
                depth = max(depth - 1, 0)
            elif ch == ":" and not depth:
                return j
            j += 1
        return -1

    # -- grammar -------------------------------------------------------------

    def parse(self) -> SyntaxNode:
        children, end = self.parse_items(0, opener=-1)
        if end < self.n:
            raise self.error("Unexpected '}'", end)
        return SyntaxNode(
            kind=NodeKind.STYLESHEET,
            span=self.span(0, self.src),
            text=self.src,
            children=tuple(children),
            source=self.src,
        )

    def parse_items(self, i: int, opener: int) -> tuple[list[SyntaxNode], int]:
        """Parse statements until the ``}`` closing ``opener`` (or EOF at top level)."""
        children: list[SyntaxNode] = []
        while True:
            while i < self.n and self.src[i].isspace():
                i += 1
            if i >= self.n:
                if opener >= 0:
                    raise self.error("Unclosed block", opener)
                return children, i
            ch = self.src[i]
            if ch == "}":
                return children, i
            if ch == ";":
                i += 1
                continue
            if self.src.startswith("/*", i):
                end = self.skip_block_comment(i)
                children.append(self.comment(i, end))
                i = end
                continue
            if self.src.startswith("//", i):
                newline = self.src.find("\n", i)
                end = self.n if newline < 0 else newline
                children.append(self.comment(i, end))
                i = end
                continue
            node, i = self.statement(i)
            children.append(node)

    def comment(self, start: int, end: int) -> SyntaxNode:
        text = self.src[start:end].rstrip()
        return SyntaxNode(
            kind=NodeKind.COMMENT,
            span=self.span(start, text),
            text=text,
            inline=not self.starts_line(start),
        )

    def statement(self, i: int) -> tuple[SyntaxNode, int]:
        stop = self.find_stop(i)
        if stop < self.n and self.src[stop] == "{":
            return self.block_node(i, stop)
        if self.src[i] == "@":
            return self.at_statement(i, stop)
        return self.declaration(i, stop)

    def block_node(self, i: int, brace: int) -> tuple[SyntaxNode, int]:
        children, close = self.parse_items(brace + 1, opener=brace)
        text = self.src[i : close + 1]
        prelude = self.src[i:brace].strip()
        is_at_rule = prelude.startswith("@")
        name, value = self.split_at_rule(prelude) if is_at_rule else (prelude, "")
        node = SyntaxNode(
            kind=NodeKind.AT_RULE if is_at_rule else NodeKind.RULESET,
            span=self.span(i, text),
            text=text,
            children=tuple(children),
            name=name,
            value=value,
            brace_offset=brace - i,
            single_line=self.position(brace).line == self.position(close).line,
        )
        return node, close + 1

    def at_statement(self, i: int, stop: int) -> tuple[SyntaxNode, int]:
        terminated = stop < self.n and self.src[stop] == ";"
        text = self.src[i : stop + 1] if terminated else self.src[i:stop].rstrip()
        name, value = self.split_at_rule(text.rstrip(";").strip())
        node = SyntaxNode(
            kind=NodeKind.AT_RULE,
            span=self.span(i, text),
            text=text,
            name=name,
            value=value,
            terminated=terminated,
        )
        return node, stop + 1 if terminated else stop

    def declaration(self, i: int, stop: int) -> tuple[SyntaxNode, int]:
        colon = self.find_colon(i, stop)
        if colon < 0:
            raise self.error("Expected ':' in declaration", i)
        terminated = stop < self.n and self.src[stop] == ";"
        text = self.src[i : stop + 1] if terminated else self.src[i:stop].rstrip()
        value_start = colon + 1
        while value_start < stop and self.src[value_start].isspace():
            value_start += 1
        node = SyntaxNode(
            kind=NodeKind.DECLARATION,
            span=self.span(i, text),
            text=text,
            name=self.src[i:colon].strip(),
            value=self.src[value_start:stop].strip(),
            colon_offset=colon - i,
            value_offset=value_start - i,
            terminated=terminated,
        )
        return node, stop + 1 if terminated else stop

    @staticmethod
    def split_at_rule(prelude: str) -> tuple[str, str]:
        """'@media screen' -> ('media', 'screen')."""
        body = prelude[1:]
        end = 0
        while end < len(body) and (body[end].isalnum() or body[end] in "-_"):
            end += 1
        return body[:end], body[end:].strip()


class ScssParserGateway(StyleParserProtocol):
    """Infrastructure implementation of StyleParserProtocol for CSS and SCSS."""

    def parse(self, source: str, path: str = "") -> SyntaxNode:
        """Parse ``source``; raises StyleSyntaxError with line and column on bad input."""
        normalized = source.replace("\r\n", "\n")
        tree = _ScssParser(normalized, path).parse()
        logger.debug("Parsed %s: %d top-level nodes", path or "<string>", len(tree.children))
        return tree
