from pathlib import Path
from typing import Any, Optional

from checkstyle_exporter.domain.config import ConfigurationLoader
from checkstyle_exporter.infrastructure.config_file_loader import ConfigFileLoader
from checkstyle_exporter.infrastructure.gateways.profile_loader import ProfileLoader
from checkstyle_exporter.use_cases.export_profile import CheckstyleProfileExporter


class ExporterContainer:
    """Dependency Injection Container for the Checkstyle exporter."""

    _instance: Optional["ExporterContainer"] = None

    def __init__(self, config_start: Optional[Path] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._config_start = config_start
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, tool_section = ConfigFileLoader.load_config_from_fs(self._config_start)
        config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("ProfileLoader", ProfileLoader())
        self.register_singleton("CheckstyleProfileExporter", CheckstyleProfileExporter(config_loader))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return self.get("ConfigurationLoader")

    def get_profile_loader(self) -> ProfileLoader:
        return self.get("ProfileLoader")

    def get_exporter(self) -> CheckstyleProfileExporter:
        return self.get("CheckstyleProfileExporter")

    @classmethod
    def get_instance(cls) -> "ExporterContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = ExporterContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
