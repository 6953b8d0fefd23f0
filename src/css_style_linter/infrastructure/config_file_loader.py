"""Load [tool.css-style-linter] from pyproject.toml or an explicit TOML file. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from css_style_linter.domain.constants import CONFIG_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads the tool table from TOML files."""

    @staticmethod
    def section_from(data: dict[str, object]) -> dict[str, object]:
        """Pick the tool table out of parsed TOML; a dedicated file may hold it at top level."""
        tool = data.get("tool")
        if isinstance(tool, dict):
            section = tool.get(CONFIG_SECTION)
            return section if isinstance(section, dict) else {}
        return data

    @staticmethod
    def load_file(path: str) -> dict[str, object]:
        """Load an explicit config file. Missing or invalid files raise."""
        with Path(path).open("rb") as f:
            data = tomllib.load(f)
        logger.debug("Loaded configuration from %s", path)
        return ConfigFileLoader.section_from(data)

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Walk up from ``start`` (default: cwd) to the nearest pyproject.toml with our table."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Ignoring unreadable %s: %s", config_file, exc)
                continue
            tool = data.get("tool", {}) or {}
            section = tool.get(CONFIG_SECTION) if isinstance(tool, dict) else None
            if isinstance(section, dict):
                logger.debug("Loaded configuration from %s", config_file)
                return section
        return {}
