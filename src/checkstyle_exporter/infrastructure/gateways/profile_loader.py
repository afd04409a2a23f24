"""ProfileLoader: reads a profile document (YAML or JSON) into a RulesProfile and its settings."""

from pathlib import Path
from typing import Any, cast

import yaml

from checkstyle_exporter.domain.constants import FILTERS_KEY, JAVA_KEY, REPOSITORY_KEY
from checkstyle_exporter.domain.entities import (
    ActiveRule,
    ExportSettings,
    RuleDefinition,
    RulePriority,
    RulesProfile,
)
from checkstyle_exporter.domain.errors import ProfileLoadError
from checkstyle_exporter.domain.protocols import ProfileLoaderProtocol


class ProfileLoader(ProfileLoaderProtocol):
    """
    Loads profile documents shaped like::

        name: Sonar way
        language: java
        settings:
          filters: '<module name="SuppressionCommentFilter"/>'
        rules:
          - key: com.puppycrawl.tools.checkstyle.checks.coding.MagicNumberCheck
            config_key: Checker/TreeWalker/MagicNumber
            severity: MINOR
            params: [ignoreNumbers, ignoreHashCodeMethod]
            parameters: {ignoreNumbers: "0,1,2"}

    ``repository`` defaults to checkstyle and ``template`` to false. JSON is
    accepted as well, being a subset of YAML.
    """

    def load(self, path: str) -> tuple[RulesProfile, ExportSettings]:
        file_path = Path(path)
        try:
            with open(file_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ProfileLoadError(f"{file_path}: not a valid profile document: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ProfileLoadError(f"{file_path}: not UTF-8 encoded: {exc}") from exc
        if not isinstance(data, dict):
            raise ProfileLoadError(f"{file_path}: expected a mapping at the top level")
        return self.parse(cast(dict[str, Any], data), default_name=file_path.stem)

    def parse(self, data: dict[str, Any], default_name: str = "profile") -> tuple[RulesProfile, ExportSettings]:
        """Build the profile and settings from an already decoded document."""
        raw_rules = data.get("rules") or []
        if not isinstance(raw_rules, list):
            raise ProfileLoadError("'rules' must be a list")
        rules = tuple(self._parse_rule(index, raw) for index, raw in enumerate(raw_rules))
        profile = RulesProfile(
            name=str(data.get("name") or default_name),
            language=str(data.get("language") or JAVA_KEY),
            active_rules=rules,
        )
        return profile, ExportSettings.from_filters(self._filters(data.get("settings")))

    @staticmethod
    def _filters(settings: object) -> str:
        if not isinstance(settings, dict):
            return ""
        filters = settings.get("filters", settings.get(FILTERS_KEY, ""))
        return filters if isinstance(filters, str) else ""

    @staticmethod
    def _param_value(value: object) -> str:
        """Checkstyle spells booleans in lower case; YAML hands them over as bool."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @staticmethod
    def _flag(index: int, name: str, value: object) -> bool:
        """Accept YAML booleans and their quoted spellings, nothing else. An empty value is false."""
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise ProfileLoadError(f"rule #{index}: '{name}' must be true or false, got {value!r}")

    @staticmethod
    def _parse_rule(index: int, raw: object) -> ActiveRule:
        if not isinstance(raw, dict):
            raise ProfileLoadError(f"rule #{index}: expected a mapping")
        config_key = raw.get("config_key")
        rule_key = raw.get("key")
        if not config_key or not isinstance(config_key, str):
            raise ProfileLoadError(f"rule #{index}: missing 'config_key'")
        if not rule_key or not isinstance(rule_key, str):
            raise ProfileLoadError(f"rule #{index}: missing 'key'")
        try:
            severity = RulePriority.parse(str(raw.get("severity", "MAJOR")))
        except KeyError as exc:
            raise ProfileLoadError(f"rule #{index}: unknown severity {raw.get('severity')!r}") from exc

        parameters = raw.get("parameters") or {}
        if not isinstance(parameters, dict):
            raise ProfileLoadError(f"rule #{index}: 'parameters' must be a mapping")
        # Declared params default to the overridden names, in document order
        params = raw.get("params")
        if params is None:
            params = list(parameters)
        if not isinstance(params, list):
            raise ProfileLoadError(f"rule #{index}: 'params' must be a list")

        return ActiveRule(
            config_key=config_key,
            rule_key=rule_key,
            severity=severity,
            rule=RuleDefinition(
                is_template=ProfileLoader._flag(index, "template", raw.get("template", False)),
                params=tuple(str(p) for p in params),
            ),
            parameters={str(k): ProfileLoader._param_value(v) for k, v in parameters.items()},
            repository_key=str(raw.get("repository") or REPOSITORY_KEY),
        )
