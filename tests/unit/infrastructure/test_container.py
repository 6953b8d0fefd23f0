"""Unit tests for LinterContainer and the composition root."""

from unittest.mock import MagicMock, patch

from css_style_linter.infrastructure.config_file_loader import ConfigFileLoader
from css_style_linter.infrastructure.di.container import LinterContainer
from css_style_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from css_style_linter.infrastructure.gateways.scss_gateway import ScssParserGateway
from css_style_linter.infrastructure.reporters import TerminalLintReporter
from css_style_linter.interface.telemetry import ProjectTelemetry


def test_container_wires_default_implementations() -> None:
    container = LinterContainer()
    assert isinstance(container.get_config_source(), ConfigFileLoader)
    assert isinstance(container.get_telemetry_port(), ProjectTelemetry)
    assert isinstance(container.get_parser(), ScssParserGateway)
    assert isinstance(container.get_filesystem_gateway(), FileSystemGateway)
    assert isinstance(container.get_reporter(), TerminalLintReporter)
    assert len(container.get_rule_registry()) == 18


def test_container_returns_singletons() -> None:
    container = LinterContainer()
    assert container.get_rule_registry() is container.get_rule_registry()


def test_register_singleton_overrides() -> None:
    container = LinterContainer()
    parser = MagicMock()
    container.register_singleton("StyleParser", parser)
    assert container.get_parser() is parser


@patch("css_style_linter.__main__.CLIAppFactory")
def test_main_builds_app_from_container(mock_factory: MagicMock) -> None:
    from css_style_linter.__main__ import main

    main()

    deps = mock_factory.create_app.call_args[0][0]
    assert isinstance(deps.parser, ScssParserGateway)
    mock_factory.create_app.return_value.assert_called_once_with()
