from typing import TYPE_CHECKING, Optional, Protocol

from log_message_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    import astroid

    from log_message_linter.domain.config import RuleConfig
    from log_message_linter.domain.entities import LoggerKind, SuggestedFix


class LoggerResolverProtocol(Protocol):
    """Type-query port used by the classifier. Implementations must never raise."""

    def is_logging_module(self, expr: "astroid.nodes.NodeNG") -> bool:
        """True if expr refers to a standard logging module, not a value."""
        ...

    def resolve_receiver_capability(self, expr: "astroid.nodes.NodeNG") -> Optional["LoggerKind"]:
        """Return the logger capability of expr's static type, or None if unknown."""
        ...


class AstroidProtocol(LoggerResolverProtocol, Protocol):
    def parse_file(self, file_path: str) -> Optional["astroid.nodes.Module"]:
        """Parse a file and return the astroid Module node."""
        ...

    def clear_inference_cache(self) -> None:
        """Clear the astroid inference cache to force fresh inference after code changes."""
        ...


class ConfigResolverProtocol(Protocol):
    """Supplies the rule toggles for a run."""

    def resolve(self, path: Optional[str] = None) -> "RuleConfig":
        """Return the config for path (or the project default). Never raises."""
        ...


class FixerGatewayProtocol(Protocol):
    """Protocol for applying literal replacements to a source file."""

    def apply_fixes(self, file_path: str, fixes: list["SuggestedFix"]) -> bool:
        """Apply suggested fixes to a file. Returns True if modified."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def glob_python_files(self, path: str) -> list[str]:
        """Get all Python files in path (recursive if directory)."""
        ...

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for the rule registry. Implemented by GuidanceService in infrastructure."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return the loaded registry keyed by rule id (e.g. logmsg.W9401)."""
        ...

    def get_entry(self, rule_code: str) -> Optional[RuleRegistryEntry]:
        """Return the registry entry for a rule by code or symbol, or None."""
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        """Return manual fix instructions for the given rule code."""
        ...

    def iter_entries(self) -> list[tuple[str, RuleRegistryEntry]]:
        """Return (code, entry) pairs sorted by code."""
        ...
