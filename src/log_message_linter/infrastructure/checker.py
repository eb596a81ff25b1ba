"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

Enable with: pylint --load-plugins=log_message_linter.infrastructure.checker
"""

from pylint.lint import PyLinter

from log_message_linter.infrastructure.di.container import LogLintContainer
from log_message_linter.use_cases.checks.log_messages import LogMessageChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = LogLintContainer.get_instance()
    linter.register_checker(
        LogMessageChecker(
            linter,
            classifier=container.get_classifier(),
            config_resolver=container.get_config_resolver(),
            registry=container.get_guidance_service().get_registry(),
        )
    )
