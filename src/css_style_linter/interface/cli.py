"""CLI entry points - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path

import typer

from css_style_linter.domain.config import ConfigurationLoader
from css_style_linter.domain.constants import (
    EXIT_CLEAN,
    EXIT_USAGE,
    EXIT_VIOLATIONS,
    TOOL_NAME,
)
from css_style_linter.domain.errors import ConfigError, StyleSyntaxError
from css_style_linter.domain.protocols import (
    ConfigSourceProtocol,
    FileSystemProtocol,
    StyleParserProtocol,
    TelemetryPort,
)
from css_style_linter.domain.registry import RuleRegistry
from css_style_linter.interface.reporters import LintReporter
from css_style_linter.interface.telemetry import ProjectTelemetry
from css_style_linter.use_cases.lint import Linter
from css_style_linter.use_cases.lint_files import FileLintResult, LintFilesUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_source: ConfigSourceProtocol
    telemetry: TelemetryPort
    registry: RuleRegistry
    parser: StyleParserProtocol
    filesystem: FileSystemProtocol
    reporter: LintReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def exit_code(results: list[FileLintResult], strict: bool) -> int:
        """1 when any error (or, with strict, any warning) was reported; else 0."""
        if any(r.error_count for r in results):
            return EXIT_VIOLATIONS
        if strict and any(r.warning_count for r in results):
            return EXIT_VIOLATIONS
        return EXIT_CLEAN

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name=TOOL_NAME,
            help="Check CSS/SCSS files against the house style guide.",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(  # noqa: B008
                None, help="Files or directories to lint (default: current directory)"
            ),
            config: Path | None = typer.Option(  # noqa: B008
                None, "--config", "-c", help="TOML file holding the linter table"
            ),
            disable: list[str] | None = typer.Option(  # noqa: B008
                None, "--disable", "-d", help="Rule id to switch off (repeatable)"
            ),
            output_format: str = typer.Option(
                "terminal", "--format", "-f", help="Output format: terminal or json"
            ),
            jobs: int | None = typer.Option(None, "--jobs", "-j", help="Worker threads"),
            strict: bool = typer.Option(False, "--strict", help="Fail on warnings too"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
        ) -> None:
            """Lint stylesheets and report style violations."""
            ProjectTelemetry.configure_logging(verbose)
            if output_format not in ("terminal", "json"):
                deps.telemetry.error(f"Unknown format '{output_format}'.")
                raise typer.Exit(code=EXIT_USAGE)
            if output_format == "terminal":
                deps.telemetry.handshake()
            targets = [str(p) for p in paths] if paths else ["."]
            try:
                raw = (
                    deps.config_source.load_file(str(config))
                    if config is not None
                    else deps.config_source.load_config_from_fs()
                )
                config_loader = ConfigurationLoader(raw)
                use_case = LintFilesUseCase(
                    linter=Linter(deps.registry, deps.telemetry),
                    parser=deps.parser,
                    filesystem=deps.filesystem,
                    telemetry=deps.telemetry,
                    config_loader=config_loader,
                )
                lint_config = config_loader.lint_config.with_disabled(disable or [])
                results = use_case.execute(targets, config=lint_config, jobs=jobs)
            except (ConfigError, StyleSyntaxError, OSError, ValueError) as exc:
                deps.telemetry.error(str(exc))
                raise typer.Exit(code=EXIT_USAGE) from exc
            deps.reporter.report_results(results, format=output_format)
            raise typer.Exit(code=CLIAppFactory.exit_code(results, strict))

        @app.command()
        def rules() -> None:
            """List every rule with its severity and default options."""
            deps.reporter.report_rules(deps.registry)

        @app.command()
        def explain(
            rule_id: str = typer.Argument(..., help="Rule id, e.g. hex-case"),
        ) -> None:
            """Show guidance for one rule."""
            if rule_id not in deps.registry:
                deps.telemetry.error(f"Unknown rule '{rule_id}'.")
                raise typer.Exit(code=EXIT_USAGE)
            deps.reporter.report_explanation(rule_id, deps.registry)

        return app
