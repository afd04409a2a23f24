from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from checkstyle_exporter.domain.entities import ExportSettings, RulesProfile


class OutputSinkProtocol(Protocol):
    """Append-only text sink the exporter writes into."""

    def append(self, text: str) -> None:
        """Append text. Raises OSError or ValueError when the underlying target fails."""
        ...

    def close(self) -> None:
        """Flush buffered text and release the target."""
        ...


class SettingsProtocol(Protocol):
    """Read-only access to the settings store."""

    def get_string(self, key: str) -> Optional[str]: ...


class ProfileExporterProtocol(Protocol):
    """Produces configuration text for a profile."""

    key: str
    name: str
    mime_type: str

    def supports_language(self, language: str) -> bool: ...

    def export_profile(
        self,
        profile: "RulesProfile",
        sink: OutputSinkProtocol,
        settings: Optional[SettingsProtocol] = None,
    ) -> None:
        """Write the configuration of ``profile`` into ``sink``."""
        ...


class ProfileLoaderProtocol(Protocol):
    """Loads a profile and its settings from a document on disk."""

    def load(self, path: str) -> tuple["RulesProfile", "ExportSettings"]: ...
