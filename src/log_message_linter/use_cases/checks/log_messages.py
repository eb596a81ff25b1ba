"""Log message checks (W9401-W9404)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from log_message_linter.domain.classifier import LoggerClassifier
from log_message_linter.domain.protocols import ConfigResolverProtocol
from log_message_linter.domain.registry_types import RuleRegistryEntry
from log_message_linter.domain.rule_msgs import RuleMsgBuilder
from log_message_linter.use_cases.analyze_messages import LogMessageAnalyzer


class LogMessageChecker(BaseChecker):
    """W9401-W9404: log message formatting and safety. Thin: delegates to LogMessageAnalyzer."""

    name: str = "log-messages"
    CODES = ["W9401", "W9402", "W9403", "W9404"]
    options = (
        (
            "log-message-config",
            {
                "default": "",
                "type": "string",
                "metavar": "<file>",
                "help": "Path to a JSON file toggling the log message rules.",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        classifier: LoggerClassifier,
        config_resolver: ConfigResolverProtocol,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(registry, self.CODES)
        super().__init__(linter)
        self._classifier = classifier
        self._config_resolver = config_resolver
        self._analyzer: LogMessageAnalyzer | None = None

    def open(self) -> None:
        """Resolve rule toggles once per run."""
        self._analyzer = self._build_analyzer()

    def _build_analyzer(self) -> LogMessageAnalyzer:
        config_path = getattr(self.linter.config, "log_message_config", "")
        if not isinstance(config_path, str) or not config_path:
            config_path = None
        config = self._config_resolver.resolve(config_path)
        return LogMessageAnalyzer(self._classifier, config)

    def _get_analyzer(self) -> LogMessageAnalyzer:
        if self._analyzer is None:
            self._analyzer = self._build_analyzer()
        return self._analyzer

    def visit_call(self, node: astroid.nodes.Call) -> None:
        """Delegate to the analyzer; report each diagnostic on the message literal."""
        for d in self._get_analyzer().analyze_call(node):
            self.add_message(
                d.code,
                node=d.node,
                args=d.message_args or None,
            )
