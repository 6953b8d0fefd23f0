"""Unit tests for ProjectTelemetry."""
import logging
from unittest.mock import MagicMock

from css_style_linter.domain.constants import LOGGER_NAME
from css_style_linter.interface.telemetry import ProjectTelemetry


def test_handshake_prints_banner():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.handshake()
    tel.console.print.assert_called()
    tel.logger.info.assert_called()


def test_step_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.step("Done")
    tel.console.print.assert_called_once()
    tel.logger.info.assert_called_once_with("Done")


def test_error_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.error("Failed")
    tel.console.print.assert_called_once()
    tel.logger.error.assert_called_once_with("Failed")


def test_warning_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.warning("Careful")
    tel.logger.warning.assert_called_once_with("Careful")


def test_debug_only_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.console = MagicMock()
    tel.logger = MagicMock()
    tel.debug("Detail")
    tel.logger.debug.assert_called_once_with("Detail")
    tel.console.print.assert_not_called()


def test_configure_logging_sets_level_once():
    logger = logging.getLogger(LOGGER_NAME)
    ProjectTelemetry.configure_logging(verbose=True)
    handlers = list(logger.handlers)
    assert logger.level == logging.DEBUG
    ProjectTelemetry.configure_logging(verbose=False)
    assert logger.level == logging.WARNING
    assert logger.handlers == handlers
