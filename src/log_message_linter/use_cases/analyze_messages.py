"""Analyzer driver: classify calls, extract messages, run the enabled rules."""

from collections.abc import Iterator
from dataclasses import replace

import astroid  # type: ignore[import-untyped]

from log_message_linter.domain.classifier import LoggerClassifier
from log_message_linter.domain.config import RuleConfig
from log_message_linter.domain.entities import Diagnostic, ExtractedMessage
from log_message_linter.domain.extractor import MessageExtractor
from log_message_linter.domain.rules.rule_set import RuleSet


class LogMessageAnalyzer:
    """
    Walks call expressions and validates the literal message of every log call.

    Pure and synchronous: no I/O, and nothing raised for calls it cannot
    understand. Those are skipped.
    """

    def __init__(
        self,
        classifier: LoggerClassifier,
        config: RuleConfig | None = None,
        extractor: MessageExtractor | None = None,
        rule_set: RuleSet | None = None,
    ) -> None:
        self._classifier = classifier
        self._extractor = extractor or MessageExtractor()
        self._rule_set = rule_set or RuleSet(config or RuleConfig.default())

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def extract_log_message(self, call: astroid.nodes.Call) -> ExtractedMessage | None:
        if not self._classifier.is_log_call(call):
            return None
        return self._extractor.extract(call)

    def analyze_call(self, call: astroid.nodes.Call) -> list[Diagnostic]:
        message = self.extract_log_message(call)
        if message is None:
            return []
        return self.check_message(message)

    def check_message(self, message: ExtractedMessage) -> list[Diagnostic]:
        """Run the enabled rules; format strings keep their diagnostics but get no fix."""
        diagnostics = self._rule_set.check(message)
        if not message.formatted:
            return diagnostics
        return [replace(d, suggested_fix=None) if d.fixable else d for d in diagnostics]

    def iter_messages(self, module: astroid.nodes.Module) -> Iterator[ExtractedMessage]:
        for call in module.nodes_of_class(astroid.nodes.Call):
            message = self.extract_log_message(call)
            if message is not None:
                yield message

    def analyze_module(self, module: astroid.nodes.Module) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for message in self.iter_messages(module):
            diagnostics.extend(self.check_message(message))
        return diagnostics

    def correct_text(self, text: str) -> str:
        return self._rule_set.correct(text)
