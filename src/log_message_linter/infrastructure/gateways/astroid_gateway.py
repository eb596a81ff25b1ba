import logging
from typing import Optional

import astroid  # type: ignore[import-untyped]

from log_message_linter.domain.constants import LOGGER_CAPABILITIES, STD_LOGGING_MODULES
from log_message_linter.domain.entities import LoggerKind
from log_message_linter.domain.protocols import AstroidProtocol

logger = logging.getLogger(__name__)


class AstroidGateway(AstroidProtocol):
    """AST Intelligence Gateway: answers logger capability questions through astroid inference."""

    def clear_inference_cache(self) -> None:
        """Clear the astroid inference cache to force fresh inference after code changes."""
        astroid.MANAGER.clear_cache()

    def parse_file(self, file_path: str) -> Optional[astroid.nodes.Module]:
        """Parse a file and return the astroid Module node, or None if it cannot be read or parsed."""
        try:
            with open(file_path, encoding="utf-8") as f:
                source = f.read()
            return astroid.parse(source, module_name=self._module_name(file_path), path=file_path)
        except (OSError, UnicodeDecodeError, astroid.AstroidSyntaxError) as exc:
            logger.warning("skipping unparsable file %s: %s", file_path, exc)
            return None

    def is_logging_module(self, expr: astroid.nodes.NodeNG) -> bool:
        """True if expr is a name bound to a standard logging module (import logging / import logging as log)."""
        if not isinstance(expr, astroid.nodes.Name):
            return False
        for inferred in self._safe_infer_all(expr):
            if isinstance(inferred, astroid.nodes.Module):
                return inferred.name in STD_LOGGING_MODULES
        return False

    def resolve_receiver_capability(self, expr: astroid.nodes.NodeNG) -> Optional[LoggerKind]:
        """
        Infer the receiver and map its class to a logger capability.

        Instances are unwrapped to their defining class once; the class's
        qualified name must be in the allow-list. Modules, classes and
        uninferable values resolve to None.
        """
        for inferred in self._safe_infer_all(expr):
            if not isinstance(inferred, astroid.Instance):
                continue
            qname = self._class_qname(inferred)
            if qname in LOGGER_CAPABILITIES:
                return LOGGER_CAPABILITIES[qname]
        return None

    def _safe_infer_all(self, node: astroid.nodes.NodeNG) -> list[astroid.nodes.NodeNG]:
        """All inferred values except Uninferable; empty when inference fails."""
        try:
            return [inf for inf in node.infer() if inf is not astroid.Uninferable]
        except (astroid.InferenceError, AttributeError):
            return []

    def _class_qname(self, instance: astroid.Instance) -> Optional[str]:
        proxied = getattr(instance, "_proxied", None)
        if not isinstance(proxied, astroid.nodes.ClassDef):
            return None
        return str(proxied.qname())

    def _module_name(self, file_path: str) -> str:
        name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
        return name[:-3] if name.endswith(".py") else name
