"""Character-set rule (W9402): no special characters or emoji in log messages."""

from log_message_linter.domain.constants import ALLOWED_PUNCTUATION, CORRECTION_EXTRA_CHARS
from log_message_linter.domain.rules import MessageRule, Verdict


class NoSpecialCharsRule(MessageRule):
    """
    Rule for W9402.

    Letters, decimal digits, whitespace and a short punctuation allow-list
    pass. Anything else (``!``, ``?``, ``@``, ellipsis, emoji, any other
    non-letter above ASCII) is a violation, reported once.
    """

    code = "W9402"
    symbol = "log-message-special-characters"
    config_flag = "enable_no_special_chars"
    message_template = "log message should not contain special characters or emoji"
    fix_description = "Remove special characters and emoji from log message"

    @staticmethod
    def is_allowed(char: str) -> bool:
        if char.isalpha() or char.isdecimal() or char.isspace():
            return True
        return char in ALLOWED_PUNCTUATION

    def validate(self, text: str) -> Verdict:
        for char in text:
            if not self.is_allowed(char):
                return Verdict.violation(corrected_text=self.strip_special(text))
        return Verdict.ok()

    def strip_special(self, text: str) -> str:
        return "".join(c for c in text if self.is_allowed(c) or c in CORRECTION_EXTRA_CHARS)
