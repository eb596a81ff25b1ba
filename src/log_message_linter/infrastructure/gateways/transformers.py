"""LibCST Transformers for log message fixes."""

import libcst as cst
from libcst.metadata import PositionProvider

from log_message_linter.domain.entities import StringLiteralRenderer


class ReplaceLogMessageTransformer(cst.CSTTransformer):
    """
    Replaces the message literal of a call when its position and value match a planned fix.

    Only the first positional argument of a call is a candidate; keyword
    values and later arguments are never touched. The new literal keeps the
    original quote style and parentheses. A matched implicit concatenation
    collapses into a single literal.
    """

    METADATA_DEPENDENCIES = (PositionProvider,)

    def __init__(self, context: dict) -> None:
        super().__init__()
        # (line, character column, original text) -> replacement text
        self.replacements: dict[tuple[int, int, str], str] = context.get("replacements", {})
        self.applied: int = 0

    def _lookup(self, node: cst.BaseExpression) -> str | None:
        if not isinstance(node, (cst.SimpleString, cst.ConcatenatedString)):
            return None
        value = node.evaluated_value
        if not isinstance(value, str):
            return None
        start = self.get_metadata(PositionProvider, node).start
        return self.replacements.get((start.line, start.column, value))

    @staticmethod
    def _message_arg(call: cst.Call) -> cst.Arg | None:
        if not call.args:
            return None
        first = call.args[0]
        if first.keyword is not None or first.star:
            return None
        return first

    def leave_Call(self, original_node: cst.Call, updated_node: cst.Call) -> cst.Call:
        original_arg = self._message_arg(original_node)
        if original_arg is None:
            return updated_node
        new_text = self._lookup(original_arg.value)
        if new_text is None:
            return updated_node
        self.applied += 1
        new_value = self._render(original_arg.value, new_text)
        args = list(updated_node.args)
        args[0] = args[0].with_changes(value=new_value)
        return updated_node.with_changes(args=args)

    @staticmethod
    def _render(
        node: cst.SimpleString | cst.ConcatenatedString, new_text: str
    ) -> cst.SimpleString:
        first = node.left if isinstance(node, cst.ConcatenatedString) else node
        quote = first.quote if isinstance(first, cst.SimpleString) else '"'
        prefix = first.prefix if isinstance(first, cst.SimpleString) else ""
        return cst.SimpleString(
            value=StringLiteralRenderer.render(new_text, quote=quote, prefix=prefix),
            lpar=node.lpar,
            rpar=node.rpar,
        )
