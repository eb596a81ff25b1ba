"""Load rule toggles from a JSON file or [tool.log-message-linter] in pyproject.toml. Infrastructure I/O only."""

import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

TOOL_SECTION = "log-message-linter"


class ConfigFileLoader:
    """Reads raw config mappings. Parsing into RuleConfig is the domain's job."""

    @staticmethod
    def load_json(path: str) -> dict[str, object]:
        """
        Read a JSON config document.

        Raises OSError when the file cannot be read and ValueError when it is
        not a JSON object.
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"config root must be an object, got {type(data).__name__}")
        return data

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return [tool.log-message-linter] of the nearest pyproject.toml walking up from start (default CWD)."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError):
                return empty
            tool = data.get("tool", {})
            section = tool.get(TOOL_SECTION, {}) if isinstance(tool, dict) else empty
            return section if isinstance(section, dict) else empty
        return empty
