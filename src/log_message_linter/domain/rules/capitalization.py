"""Capitalization rule (W9401): log messages start with a lowercase letter."""

from log_message_linter.domain.rules import MessageRule, Verdict


class LowercaseStartRule(MessageRule):
    """Rule for W9401: the first non-blank character must not be an uppercase letter."""

    code = "W9401"
    symbol = "log-message-uppercase-start"
    config_flag = "enable_lowercase_start"
    message_template = "log message should start with a lowercase letter"
    fix_description = "Change first letter to lowercase"

    def validate(self, text: str) -> Verdict:
        stripped = text.strip()
        # Empty, whitespace-only and digit-led messages are exempt.
        if not stripped or not stripped[0].isalpha():
            return Verdict.ok()
        if not stripped[0].isupper():
            return Verdict.ok()
        index = len(text) - len(text.lstrip())
        corrected = text[:index] + text[index].lower() + text[index + 1:]
        return Verdict.violation(corrected_text=corrected)
