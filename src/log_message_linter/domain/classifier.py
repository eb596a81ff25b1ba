"""Log call classification: is this call a logging call at all?"""

import astroid

from log_message_linter.domain.constants import LOG_LEVEL_METHODS
from log_message_linter.domain.entities import LoggerKind
from log_message_linter.domain.protocols import LoggerResolverProtocol


class LoggerClassifier:
    """
    Decides whether a call expression invokes a logging API.

    Only ``receiver.method(...)`` calls qualify, and only when the method
    name is a severity level. The receiver must then be a standard logging
    module or a value whose type is a recognized logger class. Type lookups
    go through the injected resolver. Anything it cannot identify is
    treated as not a log call.
    """

    def __init__(self, resolver: LoggerResolverProtocol) -> None:
        self._resolver = resolver

    def classify(self, call: astroid.nodes.Call) -> LoggerKind | None:
        """Return the logger capability behind a log call, or None for any other call."""
        func = getattr(call, "func", None)
        if not isinstance(func, astroid.nodes.Attribute):
            return None
        if not self.is_log_level(func.attrname):
            return None
        if self._resolver.is_logging_module(func.expr):
            return LoggerKind.STDLIB_MODULE
        return self._resolver.resolve_receiver_capability(func.expr)

    def is_log_call(self, call: astroid.nodes.Call) -> bool:
        return self.classify(call) is not None

    @staticmethod
    def is_log_level(method_name: str) -> bool:
        return method_name in LOG_LEVEL_METHODS
