"""Mapping from profile priorities to Checkstyle severity levels."""

from types import MappingProxyType
from typing import Mapping

from checkstyle_exporter.domain.entities import RulePriority
from checkstyle_exporter.domain.errors import UnmappedSeverityError

SEVERITY_MAP: Mapping[RulePriority, str] = MappingProxyType(
    {
        RulePriority.INFO: "info",
        RulePriority.MINOR: "info",
        RulePriority.MAJOR: "warning",
        RulePriority.CRITICAL: "error",
        RulePriority.BLOCKER: "error",
    }
)


class CheckstyleSeverity:
    """Translates priorities into the severity vocabulary of Checkstyle."""

    @staticmethod
    def to_severity(priority: RulePriority) -> str:
        """Return the Checkstyle severity. Raises UnmappedSeverityError on a miss."""
        try:
            return SEVERITY_MAP[priority]
        except (KeyError, TypeError) as exc:
            raise UnmappedSeverityError(priority) from exc
