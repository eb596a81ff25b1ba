"""Check use case: analyze every Python file under a path."""

from log_message_linter.domain.entities import Diagnostic
from log_message_linter.domain.protocols import AstroidProtocol, FileSystemProtocol
from log_message_linter.use_cases.analyze_messages import LogMessageAnalyzer


class CheckMessagesUseCase:
    """Collects diagnostics for all files under a target path, sorted by location."""

    def __init__(
        self,
        analyzer: LogMessageAnalyzer,
        astroid_gateway: AstroidProtocol,
        filesystem: FileSystemProtocol,
    ) -> None:
        self.analyzer = analyzer
        self.astroid_gateway = astroid_gateway
        self.filesystem = filesystem

    def execute(self, target_path: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for file_path in sorted(self.filesystem.glob_python_files(target_path)):
            diagnostics.extend(self.check_file(file_path))
        return diagnostics

    def check_file(self, file_path: str) -> list[Diagnostic]:
        module = self.astroid_gateway.parse_file(file_path)
        if module is None:
            return []
        found = self.analyzer.analyze_module(module)
        order = {code: i for i, code in enumerate(r.code for r in self.analyzer.rule_set.enabled_rules)}
        return sorted(
            found,
            key=lambda d: (d.position.line, d.position.column, order.get(d.code, len(order))),
        )
