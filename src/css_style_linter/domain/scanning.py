"""Length-preserving masking of CSS text so rules can pattern-match safely."""

from typing import NamedTuple


class StringLiteral(NamedTuple):
    """A quoted string found in source text. ``end`` is exclusive."""

    start: int
    end: int
    quote: str

    def inner(self, text: str) -> str:
        return text[self.start + 1 : self.end - 1]


class SourceScanner:
    """
    Helpers that blank out parts of CSS text without changing offsets.

    Masked text keeps quotes, parentheses, brackets and newlines in place and
    replaces the masked contents with ``FILL`` (comments become spaces), so an
    offset found in the masked text is valid in the original.
    """

    FILL = "_"

    @staticmethod
    def _string_end(text: str, start: int) -> int:
        """Index just past the closing quote of the string opening at ``start``."""
        quote = text[start]
        i = start + 1
        while i < len(text):
            ch = text[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote or ch == "\n":
                return i + 1
            i += 1
        return len(text)

    @staticmethod
    def _closing(text: str, start: int, opener: str, closer: str) -> int:
        """Index of the ``closer`` balancing the ``opener`` at ``start`` (or len)."""
        depth = 0
        i = start
        while i < len(text):
            ch = text[i]
            if ch in "\"'":
                i = SourceScanner._string_end(text, i)
                continue
            if ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth == 0:
                    return i
            i += 1
        return len(text)

    @staticmethod
    def _blank(out: list[str], start: int, end: int, fill: str) -> None:
        for j in range(start, min(end, len(out))):
            if out[j] != "\n":
                out[j] = fill

    @staticmethod
    def strings(text: str) -> list[StringLiteral]:
        """Quoted strings outside comments, in order."""
        found: list[StringLiteral] = []
        i = 0
        while i < len(text):
            if text.startswith("/*", i):
                end = text.find("*/", i + 2)
                i = len(text) if end < 0 else end + 2
                continue
            ch = text[i]
            if ch in "\"'":
                end = SourceScanner._string_end(text, i)
                found.append(StringLiteral(i, end, ch))
                i = end
                continue
            i += 1
        return found

    @staticmethod
    def mask(text: str, *, parens: bool = False, brackets: bool = False) -> str:
        """
        Blank out comments, string contents, ``url()`` bodies and ``#{}`` interpolation.

        With ``parens`` every parenthesised body is blanked too; with
        ``brackets`` every ``[...]`` body (attribute selectors).
        """
        out = list(text)
        fill = SourceScanner.FILL
        i = 0
        while i < len(text):
            if text.startswith("/*", i):
                end = text.find("*/", i + 2)
                end = len(text) if end < 0 else end + 2
                SourceScanner._blank(out, i, end, " ")
                i = end
                continue
            ch = text[i]
            if ch in "\"'":
                end = SourceScanner._string_end(text, i)
                SourceScanner._blank(out, i + 1, end - 1, fill)
                i = end
                continue
            if text[i : i + 4].lower() == "url(" and (i == 0 or not text[i - 1].isalnum()):
                close = SourceScanner._closing(text, i + 3, "(", ")")
                SourceScanner._blank(out, i + 4, close, fill)
                i = close + 1
                continue
            if text.startswith("#{", i):
                close = SourceScanner._closing(text, i + 1, "{", "}")
                SourceScanner._blank(out, i + 2, close, fill)
                i = close + 1
                continue
            i += 1
        masked = "".join(out)
        if parens:
            masked = SourceScanner._mask_nested(masked, "(", ")")
        if brackets:
            masked = SourceScanner._mask_nested(masked, "[", "]")
        return masked

    @staticmethod
    def _mask_nested(masked: str, opener: str, closer: str) -> str:
        out = list(masked)
        depth = 0
        for i, ch in enumerate(masked):
            if ch == opener:
                if depth:
                    out[i] = SourceScanner.FILL
                depth += 1
            elif ch == closer and depth:
                depth -= 1
                if depth:
                    out[i] = SourceScanner.FILL
            elif depth and ch != "\n":
                out[i] = SourceScanner.FILL
        return "".join(out)

    @staticmethod
    def split_points(masked: str, separator: str = ",") -> list[int]:
        """Offsets of ``separator`` outside any ``()``/``[]`` nesting."""
        points: list[int] = []
        depth = 0
        for i, ch in enumerate(masked):
            if ch in "([":
                depth += 1
            elif ch in ")]" and depth:
                depth -= 1
            elif ch == separator and not depth:
                points.append(i)
        return points
