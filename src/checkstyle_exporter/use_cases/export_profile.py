"""Use Case: Export Profile - compile an active rule profile into a Checkstyle configuration."""

import logging
from typing import Iterable, Optional
from xml.sax.saxutils import escape

from checkstyle_exporter.domain.constants import (
    CHECKER_MODULE,
    DOCTYPE_DECLARATION,
    FILE_CONTENTS_HOLDER,
    FILTERS_KEY,
    GENERATED_COMMENT,
    JAVA_KEY,
    MIME_TYPE,
    PLUGIN_NAME,
    REPOSITORY_KEY,
    SUPPRESS_WARNINGS_HOLDER,
    TREE_WALKER_MODULE,
    TREE_WALKER_PREFIX,
    XML_DECLARATION,
)
from checkstyle_exporter.domain.entities import ActiveRule, ExportSettings, RulesProfile
from checkstyle_exporter.domain.errors import ProfileExportError, UnmappedSeverityError
from checkstyle_exporter.domain.protocols import (
    OutputSinkProtocol,
    ProfileExporterProtocol,
    SettingsProtocol,
)
from checkstyle_exporter.domain.severity import CheckstyleSeverity
from checkstyle_exporter.infrastructure.gateways.output_sinks import StringSink

logger = logging.getLogger(__name__)

_ATTRIBUTE_ENTITIES: dict[str, str] = {'"': "&quot;", "'": "&apos;"}


def escape_attribute(value: str) -> str:
    """Escape &, <, >, double and single quotes for use inside an attribute value."""
    return escape(value, _ATTRIBUTE_ENTITIES)


def is_in_tree_walker(config_key: str) -> bool:
    """True when the config key places the check under the TreeWalker module."""
    return config_key.lower().startswith(TREE_WALKER_PREFIX)


def arrange_by_config_key(active_rules: Optional[Iterable[ActiveRule]]) -> dict[str, list[ActiveRule]]:
    """Group rules by config key. Keys keep first-seen order, rules keep input order."""
    result: dict[str, list[ActiveRule]] = {}
    for active_rule in active_rules or ():
        result.setdefault(active_rule.config_key, []).append(active_rule)
    return result


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class CheckstyleProfileExporter(ProfileExporterProtocol):
    """Writes the active Checkstyle rules of a profile as a Checkstyle XML configuration."""

    key: str = REPOSITORY_KEY
    name: str = PLUGIN_NAME
    mime_type: str = MIME_TYPE
    supported_languages: tuple[str, ...] = (JAVA_KEY,)

    def __init__(self, settings: SettingsProtocol) -> None:
        self._settings = settings

    def supports_language(self, language: str) -> bool:
        return language in self.supported_languages

    def export_profile(
        self,
        profile: RulesProfile,
        sink: OutputSinkProtocol,
        settings: Optional[SettingsProtocol] = None,
    ) -> None:
        """
        Write the configuration of ``profile`` into ``sink``.

        Only rules of the Checkstyle repository are exported. ``settings`` replaces
        the settings store given at construction for this call only. Any failure of
        the sink, encoding errors included, and any severity without a Checkstyle
        equivalent abort the export with a ProfileExportError naming the profile.
        """
        store = settings if settings is not None else self._settings
        try:
            active_rules = profile.active_rules_by_repository(self.key)
            rules_by_config_key = arrange_by_config_key(active_rules)
            logger.debug(
                "Exporting profile %s: %d rules in %d modules",
                profile, len(active_rules), len(rules_by_config_key),
            )
            self._generate_xml(sink, rules_by_config_key, self._export_settings(store))
        except (OSError, ValueError, UnmappedSeverityError) as exc:
            raise ProfileExportError(profile) from exc

    def export_to_string(self, profile: RulesProfile) -> str:
        """Export into memory and return the document."""
        with StringSink() as sink:
            self.export_profile(profile, sink)
            return sink.getvalue()

    def _export_settings(self, store: SettingsProtocol) -> ExportSettings:
        settings = ExportSettings.from_filters(store.get_string(FILTERS_KEY))
        if (
            not settings.suppress_warnings_enabled
            and "SuppressWarningsFilter" in settings.filters_xml
        ):
            logger.warning(
                "Custom filters mention SuppressWarningsFilter but not as '<module name=\"SuppressWarningsFilter\" />'; "
                "SuppressWarningsHolder will not be added."
            )
        return settings

    def _generate_xml(
        self,
        sink: OutputSinkProtocol,
        rules_by_config_key: dict[str, list[ActiveRule]],
        settings: ExportSettings,
    ) -> None:
        self._append_xml_header(sink)
        self._append_custom_filters(sink, settings)
        self._append_checker_modules(sink, rules_by_config_key)
        self._append_tree_walker(sink, rules_by_config_key, settings)
        self._append_xml_footer(sink)

    def _append_xml_header(self, sink: OutputSinkProtocol) -> None:
        sink.append(
            XML_DECLARATION
            + DOCTYPE_DECLARATION
            + GENERATED_COMMENT
            + f'<module name="{CHECKER_MODULE}">'
        )

    def _append_custom_filters(self, sink: OutputSinkProtocol, settings: ExportSettings) -> None:
        if settings.has_custom_filters:
            sink.append(settings.filters_xml)

    def _append_checker_modules(
        self, sink: OutputSinkProtocol, rules_by_config_key: dict[str, list[ActiveRule]]
    ) -> None:
        for config_key, active_rules in rules_by_config_key.items():
            if not is_in_tree_walker(config_key):
                for active_rule in active_rules:
                    self._append_module(sink, active_rule)

    def _append_tree_walker(
        self,
        sink: OutputSinkProtocol,
        rules_by_config_key: dict[str, list[ActiveRule]],
        settings: ExportSettings,
    ) -> None:
        sink.append(f'<module name="{TREE_WALKER_MODULE}">')
        sink.append(FILE_CONTENTS_HOLDER)
        if settings.suppress_warnings_enabled:
            sink.append(SUPPRESS_WARNINGS_HOLDER)
        for config_key, active_rules in rules_by_config_key.items():
            if is_in_tree_walker(config_key):
                for active_rule in active_rules:
                    self._append_module(sink, active_rule)
        sink.append("</module>")

    def _append_xml_footer(self, sink: OutputSinkProtocol) -> None:
        sink.append("</module>")

    def _append_module(self, sink: OutputSinkProtocol, active_rule: ActiveRule) -> None:
        sink.append(f'<module name="{escape_attribute(active_rule.module_name)}">')
        if active_rule.rule.is_template:
            self._append_module_property(sink, "id", active_rule.rule_key)
        self._append_module_property(sink, "severity", CheckstyleSeverity.to_severity(active_rule.severity))
        self._append_rule_parameters(sink, active_rule)
        sink.append("</module>")

    def _append_rule_parameters(self, sink: OutputSinkProtocol, active_rule: ActiveRule) -> None:
        for param_key in active_rule.rule.params:
            value = active_rule.get_parameter(param_key)
            if not _is_blank(value):
                self._append_module_property(sink, param_key, value)

    def _append_module_property(
        self, sink: OutputSinkProtocol, property_key: str, property_value: Optional[str]
    ) -> None:
        if _is_blank(property_value):
            return
        sink.append(
            f'<property name="{escape_attribute(property_key)}" '
            f'value="{escape_attribute(property_value)}"/>'
        )
