"""Unit tests for FileSystemGateway."""

from pathlib import Path

from log_message_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


class TestFileSystemGateway:
    def test_directory_is_searched_recursively(self, tmp_path: Path) -> None:
        (tmp_path / "pkg").mkdir()
        (tmp_path / "b.py").write_text("")
        (tmp_path / "pkg" / "a.py").write_text("")
        (tmp_path / "notes.txt").write_text("")
        files = FileSystemGateway().glob_python_files(str(tmp_path))
        assert files == sorted([str((tmp_path / "b.py").resolve()), str((tmp_path / "pkg" / "a.py").resolve())])

    def test_single_python_file(self, tmp_path: Path) -> None:
        target = tmp_path / "app.py"
        target.write_text("")
        assert FileSystemGateway().glob_python_files(str(target)) == [str(target.resolve())]

    def test_non_python_or_missing_file(self, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("")
        gateway = FileSystemGateway()
        assert gateway.glob_python_files(str(tmp_path / "notes.txt")) == []
        assert gateway.glob_python_files(str(tmp_path / "missing.py")) == []

    def test_exists(self, tmp_path: Path) -> None:
        gateway = FileSystemGateway()
        assert gateway.exists(str(tmp_path)) is True
        assert gateway.exists(str(tmp_path / "missing.py")) is False
