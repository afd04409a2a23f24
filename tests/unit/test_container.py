from pathlib import Path

import pytest

from checkstyle_exporter.domain.config import ConfigurationLoader
from checkstyle_exporter.infrastructure.di.container import ExporterContainer
from checkstyle_exporter.infrastructure.gateways.profile_loader import ProfileLoader
from checkstyle_exporter.use_cases.export_profile import CheckstyleProfileExporter


class TestExporterContainer:
    def test_registers_defaults(self, tmp_path: Path) -> None:
        container = ExporterContainer(config_start=tmp_path)
        assert isinstance(container.get_config_loader(), ConfigurationLoader)
        assert isinstance(container.get_profile_loader(), ProfileLoader)
        assert isinstance(container.get_exporter(), CheckstyleProfileExporter)

    def test_exporter_reads_configured_filters(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[tool.checkstyle-export]\nfilters = '<module name=\"SuppressWarningsFilter\" />'\n",
            encoding="utf-8",
        )
        container = ExporterContainer(config_start=tmp_path)
        assert container.get_config_loader().export_settings().suppress_warnings_enabled

    def test_register_and_get_singleton(self, tmp_path: Path) -> None:
        container = ExporterContainer(config_start=tmp_path)
        mock_dep = {"foo": "bar"}
        container.register_singleton("MockDep", mock_dep)
        assert container.get("MockDep") is mock_dep

    def test_get_missing_dependency_raises_error(self, tmp_path: Path) -> None:
        container = ExporterContainer(config_start=tmp_path)
        with pytest.raises(ValueError, match=r"Dependency 'Missing' not registered\."):
            container.get("Missing")

    def test_get_instance_is_shared_until_reset(self) -> None:
        first = ExporterContainer.get_instance()
        assert ExporterContainer.get_instance() is first
        ExporterContainer.reset()
        assert ExporterContainer.get_instance() is not first
