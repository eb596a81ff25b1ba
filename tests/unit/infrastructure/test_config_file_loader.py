"""Unit tests for ConfigFileLoader."""

from pathlib import Path

import pytest

from log_message_linter.infrastructure.config_file_loader import ConfigFileLoader


class TestLoadJson:
    def test_reads_object(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text('{"enable_english_only": false}')
        assert ConfigFileLoader.load_json(str(path)) == {"enable_english_only": False}

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            ConfigFileLoader.load_json(str(tmp_path / "missing.json"))

    def test_invalid_json_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text("{")
        with pytest.raises(ValueError):
            ConfigFileLoader.load_json(str(path))

    def test_non_object_root_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.json"
        path.write_text("[]")
        with pytest.raises(ValueError, match="object"):
            ConfigFileLoader.load_json(str(path))


class TestLoadConfigFromFs:
    def test_reads_tool_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[tool.log-message-linter]\nenable_english_only = false\n"
        )
        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {"enable_english_only": False}

    def test_walks_up_to_nearest_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[tool.log-message-linter]\nenable_lowercase_start = false\n"
        )
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)
        assert ConfigFileLoader.load_config_from_fs(nested) == {"enable_lowercase_start": False}

    def test_nearest_pyproject_without_section_is_empty(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.log-message-linter]\nenable_english_only = false\n")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "pyproject.toml").write_text('[project]\nname = "inner"\n')
        assert ConfigFileLoader.load_config_from_fs(inner) == {}

    def test_malformed_toml_is_empty(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.log-message-linter\n")
        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}

    def test_non_table_section_is_empty(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('tool = "nope"\n')
        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}
