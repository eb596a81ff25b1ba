"""CLI entry points for the log message linter - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path

import typer

from log_message_linter.domain.classifier import LoggerClassifier
from log_message_linter.domain.protocols import (
    AstroidProtocol,
    ConfigResolverProtocol,
    FileSystemProtocol,
    FixerGatewayProtocol,
)
from log_message_linter.infrastructure.reporters import TerminalDiagnosticReporter
from log_message_linter.use_cases.analyze_messages import LogMessageAnalyzer
from log_message_linter.use_cases.apply_fixes import ApplyFixesUseCase
from log_message_linter.use_cases.check_messages import CheckMessagesUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    classifier: LoggerClassifier
    config_resolver: ConfigResolverProtocol
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol
    fixer_gateway: FixerGatewayProtocol
    reporter: TerminalDiagnosticReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Path | None) -> str:
        """Resolve target path: explicit path, else '.'."""
        if path is None:
            return "."
        return str(path)

    @staticmethod
    def build_analyzer(deps: CLIDependencies, config: Path | None) -> LogMessageAnalyzer:
        rule_config = deps.config_resolver.resolve(str(config) if config else None)
        return LogMessageAnalyzer(deps.classifier, rule_config)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="log-message-linter",
            help="Checks log call messages for casing, special characters, secrets and non-English text.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path | None = typer.Argument(None, help="File or directory to check (default: .)"),  # noqa: B008
            config: Path | None = typer.Option(None, "--config", help="JSON file toggling the rules"),  # noqa: B008
        ) -> None:
            """Report every log message that breaks an enabled rule."""
            target_path = CLIAppFactory.resolve_target_path(path)
            use_case = CheckMessagesUseCase(
                analyzer=CLIAppFactory.build_analyzer(deps, config),
                astroid_gateway=deps.astroid_gateway,
                filesystem=deps.filesystem,
            )
            diagnostics = use_case.execute(target_path)
            deps.reporter.report_diagnostics(diagnostics)
            if diagnostics:
                raise typer.Exit(code=1)

        @app.command()
        def fix(
            path: Path | None = typer.Argument(None, help="File or directory to fix (default: .)"),  # noqa: B008
            config: Path | None = typer.Option(None, "--config", help="JSON file toggling the rules"),  # noqa: B008
        ) -> None:
            """Rewrite offending log message literals with their suggested corrections."""
            target_path = CLIAppFactory.resolve_target_path(path)
            use_case = ApplyFixesUseCase(
                analyzer=CLIAppFactory.build_analyzer(deps, config),
                astroid_gateway=deps.astroid_gateway,
                filesystem=deps.filesystem,
                fixer_gateway=deps.fixer_gateway,
            )
            modified = use_case.execute(target_path)
            deps.reporter.report_fixes(modified)

        @app.command()
        def rules() -> None:
            """List the rules with their codes and manual fix instructions."""
            deps.reporter.report_rules()

        return app
