"""Use Case: Lint Files - discover, parse and lint stylesheets in parallel."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from css_style_linter.domain.protocols import (
    FileSystemProtocol,
    StyleParserProtocol,
    TelemetryPort,
)
from css_style_linter.domain.rules import Severity, Violation
from css_style_linter.use_cases.lint import Linter

if TYPE_CHECKING:
    from css_style_linter.domain.config import ConfigurationLoader, LintConfiguration


@dataclass(frozen=True)
class FileLintResult:
    """Violations found in one file."""

    path: str
    violations: list[Violation] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.WARNING)

    def to_dict(self) -> dict[str, object]:
        return {"path": self.path, "violations": [v.to_dict() for v in self.violations]}


class LintFilesUseCase:
    """
    Lint many stylesheets; each file is an independent pass on a worker thread.

    The registry and configuration are shared read-only, every pass builds its
    own Walker and Collector. Results come back sorted by path whatever order
    the workers finish in.
    """

    def __init__(
        self,
        linter: Linter,
        parser: StyleParserProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: "ConfigurationLoader",
    ) -> None:
        self.linter = linter
        self.parser = parser
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader

    def discover(self, targets: list[str]) -> list[str]:
        """Stylesheet files under ``targets`` minus configured exclusions."""
        extensions = tuple(self.config_loader.extensions)
        excluded = self.config_loader.exclude_paths
        found: set[str] = set()
        for target in targets:
            for path in self.filesystem.glob_stylesheets(target, extensions):
                if any(fragment in path for fragment in excluded):
                    self.telemetry.debug(f"Skipping excluded file {path}")
                    continue
                found.add(path)
        return sorted(found)

    def lint_file(self, path: str, config: "LintConfiguration") -> FileLintResult:
        """Parse and lint one file. Parser errors propagate unchanged."""
        source = self.filesystem.read_text(path)
        tree = self.parser.parse(source, path)
        return FileLintResult(path=path, violations=self.linter.lint(tree, config))

    def execute(
        self,
        targets: list[str],
        config: "LintConfiguration | None" = None,
        jobs: int | None = None,
    ) -> list[FileLintResult]:
        lint_config = config if config is not None else self.config_loader.lint_config
        # Fail fast on configuration errors before any file is read.
        self.linter.registry.resolve(lint_config)

        paths = self.discover(targets)
        if not paths:
            self.telemetry.warning("No stylesheets found.")
            return []
        workers = jobs or self.config_loader.jobs
        self.telemetry.step(f"Linting {len(paths)} file(s) with {workers} worker(s)...")

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda p: self.lint_file(p, lint_config), paths))
        return sorted(results, key=lambda r: r.path)
