"""Exceptions raised by the exporter and its host integration."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from checkstyle_exporter.domain.entities import RulesProfile


class CheckstyleExportError(Exception):
    """Base class for all exporter errors."""


class ProfileExportError(CheckstyleExportError):
    """An export aborted. The partially written document must be discarded."""

    def __init__(self, profile: "RulesProfile", message: Optional[str] = None) -> None:
        super().__init__(message or f"Fail to export the profile {profile}")
        self.profile = profile


class UnmappedSeverityError(CheckstyleExportError, KeyError):
    """A rule severity has no Checkstyle equivalent."""

    def __init__(self, severity: object) -> None:
        super().__init__(f"No Checkstyle severity for {severity!r}")
        self.severity = severity

    def __str__(self) -> str:
        return str(self.args[0])


class ProfileLoadError(CheckstyleExportError):
    """A profile document could not be turned into a RulesProfile."""
