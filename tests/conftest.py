"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
and the project root on sys.path so tests import css_style_linter and the
shared helpers in tests.lint_test_utils.
"""

from unittest.mock import MagicMock


def lint_files_required_deps(**overrides: object) -> dict[str, object]:
    """Return required dependency mocks for LintFilesUseCase. Pass overrides to customize."""
    base = {
        "linter": MagicMock(),
        "parser": MagicMock(),
        "filesystem": MagicMock(),
        "telemetry": MagicMock(),
        "config_loader": MagicMock(),
    }
    base.update(overrides)
    return base
