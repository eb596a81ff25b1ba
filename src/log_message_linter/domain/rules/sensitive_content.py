"""Sensitive-content rule (W9403): keywords and secret shapes must not reach the logs."""

from log_message_linter.domain.constants import SECRET_PATTERNS, SENSITIVE_KEYWORDS
from log_message_linter.domain.rules import MessageRule, Verdict


class SensitiveDataRule(MessageRule):
    """
    Rule for W9403.

    Keywords are matched case-insensitively first; if none hits, the
    original-case text is matched against the secret patterns in table
    order. Only flags; redaction is never suggested.
    """

    code = "W9403"
    symbol = "log-message-sensitive-data"
    config_flag = "enable_sensitive_patterns"
    message_template = "log message should not contain sensitive data (%s)"

    def validate(self, text: str) -> Verdict:
        lowered = text.lower()
        for keyword in SENSITIVE_KEYWORDS:
            if keyword in lowered:
                return Verdict.violation(message_args=(keyword,))
        for pattern in SECRET_PATTERNS:
            if pattern.regex.search(text):
                return Verdict.violation(message_args=(pattern.label,))
        return Verdict.ok()
