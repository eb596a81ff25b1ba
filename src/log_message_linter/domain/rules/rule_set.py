"""The ordered set of message rules and their config gating."""

from log_message_linter.domain.config import RuleConfig
from log_message_linter.domain.entities import Diagnostic, ExtractedMessage
from log_message_linter.domain.rules import MessageRule
from log_message_linter.domain.rules.capitalization import LowercaseStartRule
from log_message_linter.domain.rules.character_set import NoSpecialCharsRule
from log_message_linter.domain.rules.english_only import EnglishOnlyRule
from log_message_linter.domain.rules.sensitive_content import SensitiveDataRule


class RuleSet:
    """
    Runs every enabled rule on a message, in a fixed order.

    Rules are independent: each reports at most once per message and a
    message may trigger any subset of them.
    """

    def __init__(self, config: RuleConfig, rules: tuple[MessageRule, ...] | None = None) -> None:
        self._config = config
        self._rules = rules if rules is not None else RuleSet.default_rules()

    @staticmethod
    def default_rules() -> tuple[MessageRule, ...]:
        return (
            LowercaseStartRule(),
            NoSpecialCharsRule(),
            SensitiveDataRule(),
            EnglishOnlyRule(),
        )

    @property
    def config(self) -> RuleConfig:
        return self._config

    @property
    def enabled_rules(self) -> tuple[MessageRule, ...]:
        return tuple(r for r in self._rules if self._config.is_enabled(r.config_flag))

    def check(self, message: ExtractedMessage) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for rule in self.enabled_rules:
            diagnostic = rule.check(message)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    def correct(self, text: str) -> str:
        """Chain every enabled rule's accepted correction over text."""
        for rule in self.enabled_rules:
            text = rule.correct(text)
        return text
