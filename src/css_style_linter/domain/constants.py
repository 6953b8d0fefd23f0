"""Tool-wide constants."""

TOOL_NAME: str = "css-style-linter"
CONFIG_SECTION: str = "css-style-linter"
LOGGER_NAME: str = "css_style_linter"

DEFAULT_EXTENSIONS: tuple[str, ...] = (".css", ".scss")
DEFAULT_JOBS: int = 4

# Exit codes used by the CLI.
EXIT_CLEAN: int = 0
EXIT_VIOLATIONS: int = 1
EXIT_USAGE: int = 2
