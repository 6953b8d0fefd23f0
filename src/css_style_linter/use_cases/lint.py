"""Use Case: Lint - run every enabled rule over one syntax tree."""

from css_style_linter.domain.collector import ViolationCollector
from css_style_linter.domain.config import LintConfiguration
from css_style_linter.domain.nodes import SyntaxNode
from css_style_linter.domain.protocols import TelemetryPort
from css_style_linter.domain.registry import RuleRegistry
from css_style_linter.domain.rules import Violation
from css_style_linter.domain.walker import Walker


class Linter:
    """
    Wires the registry, one Walker and one Collector per pass.

    ``lint`` is a pure function of (tree, config) for a fixed registry. The
    registry is resolved before traversal, so a ConfigError aborts the pass
    without any partial result.
    """

    def __init__(
        self, registry: RuleRegistry, telemetry: TelemetryPort | None = None
    ) -> None:
        self.registry = registry
        self.telemetry = telemetry

    def lint(self, tree: SyntaxNode, config: LintConfiguration) -> list[Violation]:
        """Return the ordered violations of ``tree`` under ``config``."""
        active = self.registry.resolve(config)
        if self.telemetry is not None:
            self.telemetry.debug(
                f"Linting with {len(active)} of {len(self.registry)} rules enabled."
            )
        collector = ViolationCollector()
        Walker(active, collector).walk(tree)
        return collector.finalize()
