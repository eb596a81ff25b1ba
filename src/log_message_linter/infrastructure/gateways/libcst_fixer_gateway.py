"""LibCST based Fixer Gateway."""

import logging

import libcst as cst

from log_message_linter.domain.entities import SuggestedFix
from log_message_linter.domain.protocols import FixerGatewayProtocol
from log_message_linter.infrastructure.gateways.transformers import ReplaceLogMessageTransformer

logger = logging.getLogger(__name__)


class LibCSTFixerGateway(FixerGatewayProtocol):
    """Gateway for applying safe literal replacements using LibCST."""

    def apply_fixes(self, file_path: str, fixes: list[SuggestedFix]) -> bool:
        """
        Apply suggested fixes to a file.

        Args:
            file_path: Path to the file to modify
            fixes: Suggested fixes; each names the literal by start position and original text

        Returns:
            True if the file was modified, False otherwise
        """
        if not fixes:
            return False
        try:
            with open(file_path, encoding="utf-8", newline="") as f:
                source = f.read()
            module = cst.parse_module(source)
        except (OSError, UnicodeDecodeError, cst.ParserSyntaxError) as exc:
            logger.warning("cannot apply fixes to %s: %s", file_path, exc)
            return False

        lines = source.splitlines()
        transformer = ReplaceLogMessageTransformer({
            "replacements": {
                (
                    fix.range.line,
                    self.char_column(lines, fix.range.line, fix.range.column),
                    fix.original_text,
                ): fix.replacement_text
                for fix in fixes
            }
        })
        updated = cst.MetadataWrapper(module).visit(transformer)

        # Only write if code changed
        if updated.code == module.code:
            return False
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(updated.code)
        except OSError as exc:
            logger.warning("cannot write fixes to %s: %s", file_path, exc)
            return False
        return True

    @staticmethod
    def char_column(lines: list[str], line: int, byte_column: int) -> int:
        """Convert astroid's UTF-8 byte offset into the character offset LibCST reports."""
        if not 1 <= line <= len(lines):
            return byte_column
        prefix = lines[line - 1].encode("utf-8")[:byte_column]
        return len(prefix.decode("utf-8", errors="ignore"))
