"""Unit tests for ApplyFixesUseCase."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from log_message_linter.domain.classifier import LoggerClassifier
from log_message_linter.domain.config import RuleConfig
from log_message_linter.domain.entities import ExtractedMessage, SourcePosition
from log_message_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from log_message_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from log_message_linter.infrastructure.gateways.libcst_fixer_gateway import LibCSTFixerGateway
from log_message_linter.use_cases.analyze_messages import LogMessageAnalyzer
from log_message_linter.use_cases.apply_fixes import ApplyFixesUseCase


def _use_case(fixer_gateway=None, config: RuleConfig | None = None) -> ApplyFixesUseCase:
    gateway = AstroidGateway()
    return ApplyFixesUseCase(
        analyzer=LogMessageAnalyzer(LoggerClassifier(gateway), config),
        astroid_gateway=gateway,
        filesystem=FileSystemGateway(),
        fixer_gateway=fixer_gateway or LibCSTFixerGateway(),
    )


def _message(text: str) -> ExtractedMessage:
    return ExtractedMessage(text, SourcePosition("app.py", 7, 12, 7, 12 + len(text) + 2))


class TestPlanMessage:
    def test_combines_fixable_rules_into_one_replacement(self) -> None:
        fix = _use_case().plan_message(_message("Server запущен!"))
        assert fix is not None
        assert fix.replacement_text == "server"
        assert fix.original_text == "Server запущен!"
        assert fix.range.line == 7
        assert fix.description == (
            "Change first letter to lowercase; "
            "Remove special characters and emoji from log message; "
            "Remove non-English characters from log message"
        )

    def test_sensitive_only_message_has_no_fix(self) -> None:
        assert _use_case().plan_message(_message("password is incorrect")) is None

    def test_clean_message_has_no_fix(self) -> None:
        assert _use_case().plan_message(_message("all good there")) is None

    def test_disabled_rules_are_not_applied(self) -> None:
        fix = _use_case(config=RuleConfig(enable_no_special_chars=False)).plan_message(_message("Done!"))
        assert fix is not None
        assert fix.replacement_text == "done!"


    def test_format_string_has_no_fix(self) -> None:
        position = SourcePosition("app.py", 7, 12, 7, 32)
        message = ExtractedMessage("User %s logged in!", position, formatted=True)
        assert _use_case().plan_message(message) is None


class TestApplyFixesUseCase:
    def test_rewrites_files_and_reports_modified(self, tmp_path: Path) -> None:
        target = tmp_path / "app.py"
        target.write_text(
            "import logging\n"
            'logger = logging.Logger("app")\n'
            'logger.info("Hello!")\n'
            'logger.error("password is incorrect")\n'
        )
        (tmp_path / "clean.py").write_text('import logging\nlogging.info("fine")\n')

        modified = _use_case().execute(str(tmp_path))

        assert modified == [str(target.resolve())]
        assert target.read_text().splitlines()[2:] == [
            'logger.info("hello")',
            'logger.error("password is incorrect")',
        ]

    def test_fixed_file_is_clean_on_recheck(self, tmp_path: Path) -> None:
        target = tmp_path / "app.py"
        target.write_text("import logging\nlogging.warning('Über Fehler!')\n")
        use_case = _use_case()
        use_case.execute(str(target))
        module = AstroidGateway().parse_file(str(target))
        assert use_case.analyzer.analyze_module(module) == []

    def test_cache_cleared_only_when_files_change(self, tmp_path: Path) -> None:
        (tmp_path / "app.py").write_text('import logging\nlogging.info("Hi")\n')
        fixer = MagicMock()
        fixer.apply_fixes.return_value = False
        use_case = _use_case(fixer_gateway=fixer)
        use_case.astroid_gateway = MagicMock(wraps=use_case.astroid_gateway)

        assert use_case.execute(str(tmp_path)) == []
        fixer.apply_fixes.assert_called_once()
        use_case.astroid_gateway.clear_inference_cache.assert_not_called()

        fixer.apply_fixes.return_value = True
        use_case.execute(str(tmp_path))
        use_case.astroid_gateway.clear_inference_cache.assert_called_once()

    @pytest.mark.parametrize("source", ['import logging\nlogging.info("fine")\n', "def broken(:\n"])
    def test_no_fixes_means_fixer_not_called(self, tmp_path: Path, source: str) -> None:
        (tmp_path / "app.py").write_text(source)
        fixer = MagicMock()
        assert _use_case(fixer_gateway=fixer).execute(str(tmp_path)) == []
        fixer.apply_fixes.assert_not_called()

    def test_format_arguments_survive_fix(self, tmp_path: Path) -> None:
        target = tmp_path / "app.py"
        target.write_text(
            "import logging\n"
            'logging.info("user %s logged in", "bob")\n'
            'logging.info("progress 50%%")\n'
            'logging.info("Done!")\n'
        )
        use_case = _use_case()
        use_case.execute(str(target))

        assert target.read_text().splitlines()[1:] == [
            'logging.info("user %s logged in", "bob")',
            'logging.info("progress 50%%")',
            'logging.info("done")',
        ]
        module = AstroidGateway().parse_file(str(target))
        remaining = [(d.position.line, d.code) for d in use_case.analyzer.analyze_module(module)]
        assert remaining == [(2, "W9402"), (3, "W9402")]
