import threading
from typing import Any, Optional, cast

from log_message_linter.domain.classifier import LoggerClassifier
from log_message_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from log_message_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from log_message_linter.infrastructure.gateways.libcst_fixer_gateway import LibCSTFixerGateway
from log_message_linter.infrastructure.reporters import TerminalDiagnosticReporter
from log_message_linter.infrastructure.services.config_resolver import ConfigResolver
from log_message_linter.infrastructure.services.guidance_service import GuidanceService


class LogLintContainer:
    """
    Dependency Injection Container for the log message linter.

    get_instance() / reset() are the init and teardown of the process-wide
    state (the config cache lives in the ConfigResolver singleton).
    """

    _instance: Optional["LogLintContainer"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        astroid_gateway = AstroidGateway()
        self.register_singleton("AstroidGateway", astroid_gateway)
        self.register_singleton("LoggerClassifier", LoggerClassifier(astroid_gateway))
        self.register_singleton("ConfigResolver", ConfigResolver())
        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("LibCSTFixerGateway", LibCSTFixerGateway())
        self.register_singleton(
            "TerminalDiagnosticReporter", TerminalDiagnosticReporter(guidance_service)
        )

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_astroid_gateway(self) -> AstroidGateway:
        return cast(AstroidGateway, self.get("AstroidGateway"))

    def get_classifier(self) -> LoggerClassifier:
        return cast(LoggerClassifier, self.get("LoggerClassifier"))

    def get_config_resolver(self) -> ConfigResolver:
        return cast(ConfigResolver, self.get("ConfigResolver"))

    def get_guidance_service(self) -> GuidanceService:
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_filesystem_gateway(self) -> FileSystemGateway:
        return cast(FileSystemGateway, self.get("FileSystemGateway"))

    def get_fixer_gateway(self) -> LibCSTFixerGateway:
        return cast(LibCSTFixerGateway, self.get("LibCSTFixerGateway"))

    def get_reporter(self) -> TerminalDiagnosticReporter:
        return cast(TerminalDiagnosticReporter, self.get("TerminalDiagnosticReporter"))

    @classmethod
    def get_instance(cls) -> "LogLintContainer":
        """Get or create global container instance."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = LogLintContainer()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Tear down the singleton instance and its config cache."""
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.get_config_resolver().teardown()
            cls._instance = None
