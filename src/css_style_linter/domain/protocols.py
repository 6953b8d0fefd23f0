"""Ports the use cases depend on. Implementations live in infrastructure/interface."""

from typing import Protocol

from css_style_linter.domain.nodes import SyntaxNode


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class StyleParserProtocol(Protocol):
    """Turns stylesheet source text into a SyntaxNode tree."""

    def parse(self, source: str, path: str = "") -> SyntaxNode:
        """Parse source; raises StyleSyntaxError on malformed input."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        ...

    def glob_stylesheets(self, path: str, extensions: tuple[str, ...]) -> list[str]:
        """Stylesheet files under path (recursive if directory), sorted."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read a file as text."""
        ...


class ConfigSourceProtocol(Protocol):
    """Reads the raw tool configuration table."""

    def load_file(self, path: str) -> dict[str, object]:
        """Load an explicit config file."""
        ...

    def load_config_from_fs(self) -> dict[str, object]:
        """Find and load the nearest project config; empty dict when none."""
        ...


class RuleGuideProtocol(Protocol):
    """Human guidance per rule id."""

    def get_display_name(self, rule_id: str) -> str: ...
    def get_summary(self, rule_id: str, fallback: str) -> str: ...
    def get_manual_instructions(self, rule_id: str) -> str: ...
    def get_examples(self, rule_id: str) -> list[tuple[str, str]]: ...
    def get_references(self, rule_id: str) -> list[str]: ...
