"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from css_style_linter.infrastructure.di.container import LinterContainer
from css_style_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = LinterContainer()

    deps = CLIDependencies(
        config_source=container.get_config_source(),
        telemetry=container.get_telemetry_port(),
        registry=container.get_rule_registry(),
        parser=container.get_parser(),
        filesystem=container.get_filesystem_gateway(),
        reporter=container.get_reporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
