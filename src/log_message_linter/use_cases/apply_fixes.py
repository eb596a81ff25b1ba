"""Use Case: rewrite log message literals with their suggested corrections."""

from log_message_linter.domain.entities import ExtractedMessage, SuggestedFix
from log_message_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    FixerGatewayProtocol,
)
from log_message_linter.use_cases.analyze_messages import LogMessageAnalyzer


class ApplyFixesUseCase:
    """
    Orchestrates fix application.

    Each literal gets a single replacement: the corrections of all enabled
    rules chained in rule order, so two fixable rules on one message never
    produce conflicting edits.
    """

    def __init__(
        self,
        analyzer: LogMessageAnalyzer,
        astroid_gateway: AstroidProtocol,
        filesystem: FileSystemProtocol,
        fixer_gateway: FixerGatewayProtocol,
    ) -> None:
        self.analyzer = analyzer
        self.astroid_gateway = astroid_gateway
        self.filesystem = filesystem
        self.fixer_gateway = fixer_gateway

    def execute(self, target_path: str) -> list[str]:
        """Apply fixes under target_path. Returns the files that were modified."""
        modified: list[str] = []
        for file_path in sorted(self.filesystem.glob_python_files(target_path)):
            fixes = self.plan_file(file_path)
            if not fixes:
                continue
            if self.fixer_gateway.apply_fixes(file_path, fixes):
                modified.append(file_path)
        if modified:
            self.astroid_gateway.clear_inference_cache()
        return modified

    def plan_file(self, file_path: str) -> list[SuggestedFix]:
        module = self.astroid_gateway.parse_file(file_path)
        if module is None:
            return []
        fixes: list[SuggestedFix] = []
        for message in self.analyzer.iter_messages(module):
            fix = self.plan_message(message)
            if fix is not None:
                fixes.append(fix)
        return fixes

    def plan_message(self, message: ExtractedMessage) -> SuggestedFix | None:
        """
        Combine the fixable diagnostics of one message into one replacement.

        Format strings get no replacement.
        """
        if message.formatted:
            return None
        diagnostics = self.analyzer.check_message(message)
        fixable = [d.suggested_fix for d in diagnostics if d.suggested_fix is not None]
        if not fixable:
            return None
        corrected = self.analyzer.correct_text(message.text)
        if corrected == message.text:
            return None
        return SuggestedFix(
            description="; ".join(f.description for f in fixable),
            replacement_text=corrected,
            range=message.position,
            original_text=message.text,
        )
