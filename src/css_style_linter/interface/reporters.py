"""Protocol for lint reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from css_style_linter.domain.registry import RuleRegistry
    from css_style_linter.use_cases.lint_files import FileLintResult


class LintReporter(Protocol):
    """Protocol for rendering lint results and the rule catalogue."""

    def report_results(
        self, results: "list[FileLintResult]", format: str = "terminal"
    ) -> None:
        """Render violations per file. format: terminal or json."""
        ...

    def report_rules(self, registry: "RuleRegistry") -> None:
        """Render the table of registered rules."""
        ...

    def report_explanation(self, rule_id: str, registry: "RuleRegistry") -> None:
        """Render the guide text for one rule."""
        ...
