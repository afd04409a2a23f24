"""Exporter configuration. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
from typing import Optional

from checkstyle_exporter.domain.constants import FILTERS_KEY
from checkstyle_exporter.domain.entities import ExportSettings

logger = logging.getLogger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset({"filters", "filters_file"})


class ConfigurationLoader:
    """
    Configuration from the [tool.checkstyle-export] table.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; ConfigFileLoader.load_config_from_fs() resolves
    ``filters_file`` into ``filters`` before this object is built.
    """

    def __init__(
        self,
        config_dict: dict[str, object],
        tool_section: Optional[dict[str, object]] = None,
    ) -> None:
        self._config = config_dict
        self._tool_section = tool_section or {}
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys the exporter does not understand."""
        for key in sorted(set(config) - KNOWN_KEYS):
            logger.warning("Configuration Warning: unknown key '%s' in [tool.checkstyle-export].", key)
        filters = config.get("filters")
        if filters is not None and not isinstance(filters, str):
            logger.warning("Configuration Warning: 'filters' must be a string, ignoring it.")

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def filters_xml(self) -> str:
        """Raw custom filter fragment, empty when unset."""
        raw = self._config.get("filters", "")
        return raw if isinstance(raw, str) else ""

    def get_string(self, key: str) -> Optional[str]:
        """Settings-store lookup. Only the filters key is backed by configuration."""
        if key == FILTERS_KEY:
            return self.filters_xml
        return None

    def export_settings(self, filters_override: Optional[str] = None) -> ExportSettings:
        """Settings for one export. An override replaces the configured filters."""
        if filters_override is not None:
            return ExportSettings.from_filters(filters_override)
        return ExportSettings.from_filters(self.filters_xml)
