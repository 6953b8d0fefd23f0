"""Dependency Injection Container for the stylesheet linter."""

from typing import TYPE_CHECKING, Any, cast

from css_style_linter.domain.constants import TOOL_NAME
from css_style_linter.domain.registry import RuleRegistry
from css_style_linter.infrastructure.config_file_loader import ConfigFileLoader
from css_style_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from css_style_linter.infrastructure.gateways.scss_gateway import ScssParserGateway
from css_style_linter.infrastructure.reporters import TerminalLintReporter
from css_style_linter.infrastructure.services.rule_guide_service import RuleGuideService
from css_style_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from css_style_linter.domain.protocols import (
        ConfigSourceProtocol,
        FileSystemProtocol,
        StyleParserProtocol,
        TelemetryPort,
    )
    from css_style_linter.interface.reporters import LintReporter


class LinterContainer:
    """Wires default implementations for every port. Built once at the composition root."""

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        self.register_singleton("ConfigSource", ConfigFileLoader())
        self.register_singleton(
            "TelemetryPort", ProjectTelemetry(TOOL_NAME, "cyan", "Checking stylesheets")
        )
        self.register_singleton("RuleRegistry", RuleRegistry.default())
        self.register_singleton("StyleParser", ScssParserGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        guide = RuleGuideService()
        self.register_singleton("RuleGuideService", guide)
        self.register_singleton("LintReporter", TerminalLintReporter(guide))

    def register_singleton(self, key: str, instance: object) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        return self._singletons[key]

    def get_config_source(self) -> "ConfigSourceProtocol":
        return cast("ConfigSourceProtocol", self.get("ConfigSource"))

    def get_telemetry_port(self) -> "TelemetryPort":
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_rule_registry(self) -> RuleRegistry:
        return cast(RuleRegistry, self.get("RuleRegistry"))

    def get_parser(self) -> "StyleParserProtocol":
        return cast("StyleParserProtocol", self.get("StyleParser"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_reporter(self) -> "LintReporter":
        return cast("LintReporter", self.get("LintReporter"))
