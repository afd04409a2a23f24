"""CLI entry points for the Checkstyle exporter - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from checkstyle_exporter.domain.config import ConfigurationLoader
from checkstyle_exporter.domain.entities import ExportSettings
from checkstyle_exporter.domain.errors import CheckstyleExportError, ProfileLoadError
from checkstyle_exporter.domain.protocols import ProfileLoaderProtocol
from checkstyle_exporter.infrastructure.gateways.output_sinks import FileSink, ScopedSink, StreamSink
from checkstyle_exporter.use_cases.export_profile import CheckstyleProfileExporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    profile_loader: ProfileLoaderProtocol
    exporter: CheckstyleProfileExporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_filters(
        deps: CLIDependencies, document_settings: ExportSettings, filters_file: Optional[Path]
    ) -> ExportSettings:
        """--filters-file wins over the profile document, which wins over pyproject.toml."""
        if filters_file is not None:
            try:
                return ExportSettings.from_filters(filters_file.read_text(encoding="utf-8"))
            except UnicodeDecodeError as exc:
                raise ProfileLoadError(f"{filters_file}: not UTF-8 encoded: {exc}") from exc
        if document_settings.has_custom_filters:
            return document_settings
        return deps.config_loader.export_settings()

    @staticmethod
    def open_sink(output: Optional[Path]) -> ScopedSink:
        if output is None:
            return StreamSink(sys.stdout)
        return FileSink(str(output))

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="checkstyle-export",
            help="Export quality profiles as Checkstyle configuration files.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
        ) -> None:
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
                stream=sys.stderr,
            )

        @app.command()
        def export(
            profile_path: Path = typer.Argument(..., help="Profile document (YAML or JSON)", exists=True, dir_okay=False),
            output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout"),
            filters_file: Optional[Path] = typer.Option(
                None, "--filters-file", help="File holding custom filter modules to splice in", exists=True, dir_okay=False
            ),
        ) -> None:
            """Write the Checkstyle configuration of a profile."""
            try:
                profile, document_settings = deps.profile_loader.load(str(profile_path))
                settings = CLIAppFactory.resolve_filters(deps, document_settings, filters_file)
                exporter = deps.exporter
                if not exporter.supports_language(profile.language):
                    typer.echo(
                        f"Error: {exporter.name} does not support language '{profile.language}'", err=True
                    )
                    raise typer.Exit(code=1)
                with CLIAppFactory.open_sink(output) as sink:
                    exporter.export_profile(profile, sink, settings)
            except (CheckstyleExportError, OSError) as exc:
                logger.debug("Export failed", exc_info=True)
                detail = f"{exc}: {exc.__cause__}" if exc.__cause__ else str(exc)
                typer.echo(f"Error: {detail}", err=True)
                raise typer.Exit(code=1) from exc
            if output is not None:
                typer.echo(f"Wrote {output}", err=True)

        @app.command()
        def info() -> None:
            """Show exporter metadata."""
            typer.echo(f"key: {deps.exporter.key}")
            typer.echo(f"name: {deps.exporter.name}")
            typer.echo(f"languages: {', '.join(deps.exporter.supported_languages)}")
            typer.echo(f"mime type: {deps.exporter.mime_type}")
            settings = deps.config_loader.export_settings()
            typer.echo(f"custom filters: {'yes' if settings.has_custom_filters else 'no'}")
            typer.echo(f"suppress warnings holder: {'yes' if settings.suppress_warnings_enabled else 'no'}")

        return app
