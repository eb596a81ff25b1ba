"""Domain models for message rules and their verdicts."""

from dataclasses import dataclass

__all__ = [
    "MessageRule",
    "MessageValidator",
    "Verdict",
]

from typing import ClassVar, Protocol

from log_message_linter.domain.entities import Diagnostic, ExtractedMessage, SuggestedFix


@dataclass(frozen=True)
class Verdict:
    """Outcome of validating one message: ok, or a violation with an optional correction."""

    violated: bool = False
    message_args: tuple[str, ...] = ()
    corrected_text: str | None = None

    @classmethod
    def ok(cls) -> "Verdict":
        return cls()

    @classmethod
    def violation(
        cls,
        *,
        message_args: tuple[str, ...] = (),
        corrected_text: str | None = None,
    ) -> "Verdict":
        return cls(violated=True, message_args=message_args, corrected_text=corrected_text)


class MessageValidator(Protocol):
    """A pure text check. Never mutates its input."""

    code: str
    symbol: str
    config_flag: str

    def validate(self, text: str) -> Verdict:
        """Inspect message text and return a verdict."""
        ...

    def check(self, message: ExtractedMessage) -> Diagnostic | None:
        """Validate an extracted message and build its diagnostic, if any."""
        ...


class MessageRule:
    """
    Shared diagnostic building for the message rules.

    Subclasses implement validate() and set the class metadata. A correction
    is attached as a suggested fix only when it clears the rule; otherwise
    the diagnostic is reported without one.
    """

    code: ClassVar[str]
    symbol: ClassVar[str]
    config_flag: ClassVar[str]
    message_template: ClassVar[str]
    fix_description: ClassVar[str] = ""

    def validate(self, text: str) -> Verdict:
        raise NotImplementedError

    def format_message(self, verdict: Verdict) -> str:
        if verdict.message_args:
            return self.message_template % verdict.message_args
        return self.message_template

    def accepts_correction(self, text: str, corrected: str | None) -> bool:
        """True if corrected is a real change that passes this rule."""
        if corrected is None or corrected == text:
            return False
        return not self.validate(corrected).violated

    def check(self, message: ExtractedMessage) -> Diagnostic | None:
        verdict = self.validate(message.text)
        if not verdict.violated:
            return None
        fix = None
        if self.accepts_correction(message.text, verdict.corrected_text):
            fix = SuggestedFix(
                description=self.fix_description,
                replacement_text=verdict.corrected_text or "",
                range=message.position,
                original_text=message.text,
            )
        return Diagnostic(
            code=self.code,
            symbol=self.symbol,
            message=self.format_message(verdict),
            position=message.position,
            message_args=verdict.message_args,
            suggested_fix=fix,
            node=message.node,
        )

    def correct(self, text: str) -> str:
        """Return the accepted correction for text, or text unchanged."""
        verdict = self.validate(text)
        if verdict.violated and self.accepts_correction(text, verdict.corrected_text):
            return verdict.corrected_text or ""
        return text
