"""Load [tool.aasm-rbi] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

from aasm_rbi.domain.constants import CONFIG_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """
    Loads config from pyproject.toml.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """
        Walk up from start (default: cwd) to the first pyproject.toml.

        Returns its [tool.aasm-rbi] table; empty when no file is found.
        """
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as e:
                logging.warning("Could not read %s: %s", config_file, e)
                continue
            tool_section = data.get("tool", {}) or {}
            logging.debug("Loaded configuration from %s", config_file)
            return tool_section.get(CONFIG_SECTION, {}) or {}
        return {}
