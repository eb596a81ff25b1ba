"""Domain entities: extracted messages, diagnostics and suggested fixes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import astroid


class LoggerKind(Enum):
    """Recognized logger capabilities."""

    STDLIB_MODULE = "stdlib_module"
    STDLIB_LOGGER = "stdlib_logger"
    STDLIB_ADAPTER = "stdlib_adapter"
    LOGURU = "loguru"
    STRUCTLOG = "structlog"


@dataclass(frozen=True)
class SourcePosition:
    """Span of a source token. Lines are 1-based, columns 0-based (astroid coordinates)."""

    path: str
    line: int
    column: int
    end_line: int
    end_column: int

    @classmethod
    def from_node(cls, node: astroid.nodes.NodeNG) -> "SourcePosition":
        """Build the span of an astroid node; missing end coordinates collapse to the start."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        line = getattr(node, "lineno", 0) or 0
        column = getattr(node, "col_offset", 0) or 0
        end_line = getattr(node, "end_lineno", None) or line
        end_column = getattr(node, "end_col_offset", None)
        if end_column is None:
            end_column = column
        return cls(path=path, line=line, column=column, end_line=end_line, end_column=end_column)

    @property
    def location(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class ExtractedMessage:
    """
    Literal text of a log call's message argument and where it sits.

    formatted is set when the call passes format arguments or the text holds
    %-placeholders; such a literal is a format string and is never rewritten.
    """

    text: str
    position: SourcePosition
    formatted: bool = False
    node: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SuggestedFix:
    """
    Replacement for the full literal span (prefix and quotes included).

    replacement_text is the corrected message; replacement_literal renders it
    as source text.
    """

    description: str
    replacement_text: str
    range: SourcePosition
    original_text: str

    @property
    def replacement_literal(self) -> str:
        return StringLiteralRenderer.render(self.replacement_text)


@dataclass(frozen=True)
class Diagnostic:
    """One rule violation on one log message."""

    code: str
    symbol: str
    message: str
    position: SourcePosition
    message_args: tuple[str, ...] = ()
    suggested_fix: SuggestedFix | None = None
    node: Any = field(default=None, compare=False, repr=False)

    @property
    def fixable(self) -> bool:
        return self.suggested_fix is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "symbol": self.symbol,
            "message": self.message,
            "location": self.position.location,
            "fixable": self.fixable,
            "replacement": self.suggested_fix.replacement_text if self.suggested_fix else None,
        }


class StringLiteralRenderer:
    """Renders message text back into Python string literal source."""

    _ESCAPES: dict[str, str] = {
        "\\": "\\\\",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }

    @staticmethod
    def render(text: str, quote: str = '"', prefix: str = "") -> str:
        """Render text with the given quote; keeps a raw prefix only when the text allows it."""
        if "r" in prefix.lower():
            if StringLiteralRenderer.can_render_raw(text, quote):
                return f"{prefix}{quote}{text}{quote}"
            prefix = "".join(c for c in prefix if c.lower() != "r")
        escaped = "".join(StringLiteralRenderer._ESCAPES.get(c, c) for c in text)
        quote_char = quote[0]
        escaped = escaped.replace(quote_char, "\\" + quote_char)
        return f"{prefix}{quote}{escaped}{quote}"

    @staticmethod
    def can_render_raw(text: str, quote: str) -> bool:
        if quote[0] in text or text.endswith("\\"):
            return False
        return len(quote) == 3 or not any(c in text for c in "\r\n")
