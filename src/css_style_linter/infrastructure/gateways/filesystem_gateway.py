"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from css_style_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def glob_stylesheets(self, path: str, extensions: tuple[str, ...]) -> list[str]:
        """Get all stylesheet files in path (recursive if directory)."""
        path_obj = Path(path)
        wanted = {ext.lower() for ext in extensions}
        if self.is_directory(path):
            return sorted(
                str(p) for p in path_obj.rglob("*")
                if p.is_file() and p.suffix.lower() in wanted
            )
        return [str(path_obj)] if path_obj.suffix.lower() in wanted else []

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read a file as text."""
        return Path(path).read_text(encoding=encoding)
