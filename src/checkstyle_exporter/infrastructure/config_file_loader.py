"""Load [tool.checkstyle-export] and [tool] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

TOOL_TABLE: str = "checkstyle-export"


class ConfigFileLoader:
    """
    Loads config from pyproject.toml.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> tuple[dict[str, object], dict[str, object]]:
        """Load [tool.checkstyle-export] and [tool] from the nearest pyproject.toml. Returns (config_dict, tool_section)."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = tomllib.load(f)
                except (OSError, tomllib.TOMLDecodeError) as exc:
                    logger.warning("Skipping unreadable %s: %s", config_file, exc)
                else:
                    tool_section = data.get("tool", {}) or {}
                    config_dict = dict(tool_section.get(TOOL_TABLE, {}) or {})
                    if config_dict:
                        ConfigFileLoader.resolve_filters_file(config_dict, current_path)
                        return (config_dict, tool_section)
            if current_path.parent == current_path:
                return (empty, empty)
            current_path = current_path.parent

    @staticmethod
    def resolve_filters_file(config_dict: dict[str, object], base_dir: Path) -> None:
        """Inline ``filters_file`` as ``filters`` unless ``filters`` is already set."""
        filters_file = config_dict.get("filters_file")
        if not isinstance(filters_file, str) or "filters" in config_dict:
            return
        path = Path(filters_file)
        if not path.is_absolute():
            path = base_dir / path
        config_dict["filters"] = path.read_text(encoding="utf-8")
