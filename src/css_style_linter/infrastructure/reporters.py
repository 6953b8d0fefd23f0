"""Terminal reporter implementation - rich tables and JSON output."""

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from css_style_linter.domain.protocols import RuleGuideProtocol
from css_style_linter.domain.rules import Severity

if TYPE_CHECKING:
    from css_style_linter.domain.registry import RuleRegistry
    from css_style_linter.use_cases.lint_files import FileLintResult


class TerminalLintReporter:
    """Renders lint results and rule documentation. Implements LintReporter."""

    _SEVERITY_STYLE: dict[Severity, str] = {
        Severity.ERROR: "bold red",
        Severity.WARNING: "yellow",
    }

    def __init__(self, guide: RuleGuideProtocol, console: Console | None = None) -> None:
        self._guide = guide
        self.console = console or Console()

    def report_results(
        self, results: "list[FileLintResult]", format: str = "terminal"
    ) -> None:
        if format == "json":
            self.console.print_json(json.dumps([r.to_dict() for r in results]))
            return

        errors = sum(r.error_count for r in results)
        warnings = sum(r.warning_count for r in results)
        for result in results:
            if not result.violations:
                continue
            table = Table(title=result.path, title_justify="left", show_edge=False)
            table.add_column("Line", justify="right")
            table.add_column("Col", justify="right")
            table.add_column("Severity")
            table.add_column("Rule")
            table.add_column("Message")
            for v in result.violations:
                style = self._SEVERITY_STYLE[v.severity]
                table.add_row(
                    str(v.line),
                    str(v.column),
                    f"[{style}]{v.severity.value}[/]",
                    v.rule_id,
                    v.message,
                )
            self.console.print(table)

        if errors or warnings:
            self.console.print(
                f"\n[bold]{errors + warnings} problem(s)[/] "
                f"([red]{errors} error(s)[/], [yellow]{warnings} warning(s)[/]) "
                f"in {len(results)} file(s)."
            )
        else:
            self.console.print(f"[green]No problems found in {len(results)} file(s).[/]")

    def report_rules(self, registry: "RuleRegistry") -> None:
        table = Table(title="Rules")
        table.add_column("Rule")
        table.add_column("Severity")
        table.add_column("Defaults")
        table.add_column("Description")
        for rule in registry:
            defaults = ", ".join(f"{k}={v!r}" for k, v in rule.defaults.items())
            table.add_row(rule.rule_id, rule.severity.value, defaults, rule.description)
        self.console.print(table)

    def report_explanation(self, rule_id: str, registry: "RuleRegistry") -> None:
        rule = registry.get(rule_id)
        if rule is None:
            self.console.print(f"[red]Unknown rule '{rule_id}'.[/]")
            return
        self.console.print(f"[bold]{self._guide.get_display_name(rule_id)}[/] ({rule_id})")
        self.console.print(f"Severity: {rule.severity.value}")
        self.console.print(self._guide.get_summary(rule_id, rule.description))
        instructions = self._guide.get_manual_instructions(rule_id)
        if instructions:
            self.console.print(f"\n{instructions}")
        for label, example in self._guide.get_examples(rule_id):
            self.console.print(f"\n[bold]{label}:[/]")
            self.console.print(example, markup=False, highlight=False)
        for reference in self._guide.get_references(rule_id):
            self.console.print(f"See: {reference}")
