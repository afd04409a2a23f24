"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from checkstyle_exporter.infrastructure.di.container import ExporterContainer
from checkstyle_exporter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ExporterContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        profile_loader=container.get_profile_loader(),
        exporter=container.get_exporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
