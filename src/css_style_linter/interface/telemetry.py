"""Project telemetry: status lines on a rich console, mirrored to logging."""

import logging

from rich.console import Console

from css_style_linter.domain.constants import LOGGER_NAME
from css_style_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Console + logger pair implementing TelemetryPort."""

    def __init__(
        self,
        project_name: str,
        color: str,
        welcome: str,
        console: Console | None = None,
    ) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = console or Console(stderr=True)
        self.logger = logging.getLogger(LOGGER_NAME)

    @staticmethod
    def configure_logging(verbose: bool = False) -> None:
        """Set up the package logger once; ``verbose`` lowers the level to DEBUG."""
        logger = logging.getLogger(LOGGER_NAME)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            logger.addHandler(handler)
            logger.propagate = False
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    def handshake(self) -> None:
        self.console.print(
            f"[bold {self.color}][{self.project_name}][/] {self.welcome}"
        )
        self.logger.info("%s: %s", self.project_name, self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {message}")
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]error:[/] {message}")
        self.logger.error(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]warning:[/] {message}")
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
