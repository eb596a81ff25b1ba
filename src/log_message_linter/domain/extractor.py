"""Message extraction from recognized log calls."""

import astroid

from log_message_linter.domain.constants import PRINTF_PLACEHOLDER
from log_message_linter.domain.entities import ExtractedMessage, SourcePosition


class MessageExtractor:
    """Pulls the literal message text out of a log call's first argument."""

    def extract(self, call: astroid.nodes.Call) -> ExtractedMessage | None:
        """
        Return the first argument's text and position, or None.

        None means the call is not inspected: no arguments, a starred or
        non-literal first argument (names, f-strings, concatenation,
        formatting), bytes, or a malformed literal. astroid has already
        unescaped the literal and joined implicit concatenation.
        """
        args = getattr(call, "args", None) or []
        if not args:
            return None
        literal = args[0]
        if not isinstance(literal, astroid.nodes.Const) or not isinstance(literal.value, str):
            return None
        text = literal.value
        if not self.is_well_formed(text):
            return None
        return ExtractedMessage(
            text=text,
            position=SourcePosition.from_node(literal),
            formatted=len(args) > 1 or PRINTF_PLACEHOLDER.search(text) is not None,
            node=literal,
        )

    @staticmethod
    def is_well_formed(text: str) -> bool:
        """False for text that is not valid Unicode (e.g. lone surrogates from escapes)."""
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True
