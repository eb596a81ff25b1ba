"""English-only rule (W9404): letters must come from the basic Latin alphabet."""

from log_message_linter.domain.rules import MessageRule, Verdict


class EnglishOnlyRule(MessageRule):
    """Rule for W9404: any letter outside A-Z/a-z is a violation. Non-letters never violate."""

    code = "W9404"
    symbol = "log-message-non-english"
    config_flag = "enable_english_only"
    message_template = "log message should be in English only"
    fix_description = "Remove non-English characters from log message"

    @staticmethod
    def is_latin_letter(char: str) -> bool:
        return ("A" <= char <= "Z") or ("a" <= char <= "z")

    def validate(self, text: str) -> Verdict:
        for char in text:
            if char.isalpha() and not self.is_latin_letter(char):
                return Verdict.violation(corrected_text=self.strip_non_latin(text))
        return Verdict.ok()

    def strip_non_latin(self, text: str) -> str:
        kept = "".join(c for c in text if not c.isalpha() or self.is_latin_letter(c))
        return " ".join(kept.split())
