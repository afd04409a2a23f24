"""Unit tests for ConfigFileLoader."""

from pathlib import Path

from checkstyle_exporter.infrastructure.config_file_loader import ConfigFileLoader


class TestConfigFileLoader:
    def test_reads_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.checkstyle-export]\nfilters = \'<module name="SuppressWarningsFilter" />\'\n'
            "[tool.other]\nx = 1\n",
            encoding="utf-8",
        )
        config, tool = ConfigFileLoader.load_config_from_fs(tmp_path)
        assert config == {"filters": '<module name="SuppressWarningsFilter" />'}
        assert tool["other"] == {"x": 1}

    def test_walks_up_to_parent(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.checkstyle-export]\nfilters = "<a/>"\n', encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        config, _ = ConfigFileLoader.load_config_from_fs(nested)
        assert config["filters"] == "<a/>"

    def test_skips_pyproject_without_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.checkstyle-export]\nfilters = "<outer/>"\n', encoding="utf-8")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        config, _ = ConfigFileLoader.load_config_from_fs(inner)
        assert config["filters"] == "<outer/>"

    def test_invalid_toml_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.checkstyle-export\n", encoding="utf-8")
        config, tool = ConfigFileLoader.load_config_from_fs(tmp_path)
        assert "filters" not in config

    def test_filters_file_is_inlined(self, tmp_path: Path) -> None:
        (tmp_path / "filters.xml").write_text('<module name="SuppressionFilter"/>', encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text(
            '[tool.checkstyle-export]\nfilters_file = "filters.xml"\n', encoding="utf-8"
        )
        config, _ = ConfigFileLoader.load_config_from_fs(tmp_path)
        assert config["filters"] == '<module name="SuppressionFilter"/>'

    def test_explicit_filters_win_over_file(self) -> None:
        config: dict[str, object] = {"filters": "<a/>", "filters_file": "missing.xml"}
        ConfigFileLoader.resolve_filters_file(config, Path("/nonexistent"))
        assert config["filters"] == "<a/>"
