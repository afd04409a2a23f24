from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from checkstyle_exporter.domain.constants import FILTERS_KEY, SUPPRESS_WARNINGS_FILTER_MARKER


class RulePriority(Enum):
    """Severity of an active rule, as stored in a quality profile."""
    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"

    @classmethod
    def parse(cls, value: str) -> "RulePriority":
        """Resolve a priority from its name, case-insensitively."""
        return cls[value.strip().upper()]


@dataclass(frozen=True)
class RuleDefinition:
    """
    Static shape of a rule.

    ``params`` lists the parameter names the rule declares, in declaration order.
    That order drives property serialization; overrides for names that are not
    declared here are never written.
    """
    is_template: bool = False
    params: tuple[str, ...] = ()


@dataclass(frozen=True)
class ActiveRule:
    """A rule enabled within a profile, with its severity and parameter overrides."""
    config_key: str
    rule_key: str
    severity: RulePriority
    rule: RuleDefinition = field(default_factory=RuleDefinition)
    parameters: Mapping[str, str] = field(default_factory=dict)
    repository_key: str = "checkstyle"

    def __post_init__(self) -> None:
        if not self.config_key:
            raise ValueError(f"Active rule '{self.rule_key}' has no config key")
        # Read-only snapshot of the overrides
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def get_parameter(self, key: str) -> Optional[str]:
        """Return the overridden value of a parameter, or None."""
        return self.parameters.get(key)

    @property
    def module_name(self) -> str:
        """Last segment of the config key, i.e. the Checkstyle module name."""
        return self.config_key.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class RulesProfile:
    """An ordered set of active rules for one language."""
    name: str
    language: str = "java"
    active_rules: tuple[ActiveRule, ...] = ()

    def active_rules_by_repository(self, repository_key: str) -> list[ActiveRule]:
        """Active rules provided by one repository, in profile order."""
        return [r for r in self.active_rules if r.repository_key == repository_key]

    def __str__(self) -> str:
        return f"[name={self.name},language={self.language}]"


@dataclass(frozen=True)
class ExportSettings:
    """Settings consumed read-only by the exporter."""
    filters_xml: str = ""

    @property
    def has_custom_filters(self) -> bool:
        return bool(self.filters_xml and self.filters_xml.strip())

    @property
    def suppress_warnings_enabled(self) -> bool:
        """True only when the filters contain the exact SuppressWarningsFilter module text."""
        return SUPPRESS_WARNINGS_FILTER_MARKER in (self.filters_xml or "")

    @classmethod
    def from_filters(cls, filters_xml: Optional[str]) -> "ExportSettings":
        return cls(filters_xml=filters_xml or "")

    def get_string(self, key: str) -> Optional[str]:
        """Lets fixed settings stand in for the settings store."""
        return self.filters_xml if key == FILTERS_KEY else None


def profile_from_rules(name: str, rules: Iterable[ActiveRule], language: str = "java") -> RulesProfile:
    """Build a profile from any iterable of active rules."""
    return RulesProfile(name=name, language=language, active_rules=tuple(rules))
