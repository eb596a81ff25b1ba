"""Terminal reporter implementation - lives in infrastructure."""

from collections import Counter

import typer

from log_message_linter.domain.entities import Diagnostic
from log_message_linter.domain.protocols import GuidanceServiceProtocol


class TerminalDiagnosticReporter:
    """Prints diagnostics as path:line:col lines with a per-code summary."""

    def __init__(self, guidance_service: GuidanceServiceProtocol) -> None:
        self._guidance = guidance_service

    def report_diagnostics(self, diagnostics: list[Diagnostic]) -> None:
        if not diagnostics:
            typer.secho("no log message issues found", fg=typer.colors.GREEN)
            return
        for d in diagnostics:
            typer.echo(f"{d.position.location}: {d.code} {d.message} ({d.symbol})")
            if d.suggested_fix is not None:
                typer.secho(
                    f"    fix: {d.suggested_fix.description} -> {d.suggested_fix.replacement_literal}",
                    fg=typer.colors.CYAN,
                )
        counts = Counter(d.code for d in diagnostics)
        fixable = sum(1 for d in diagnostics if d.fixable)
        summary = ", ".join(f"{code}: {n}" for code, n in sorted(counts.items()))
        typer.secho(
            f"{len(diagnostics)} issue(s) ({summary}); {fixable} fixable",
            fg=typer.colors.YELLOW,
        )

    def report_fixes(self, modified_files: list[str]) -> None:
        for path in modified_files:
            typer.echo(f"fixed {path}")
        typer.secho(f"{len(modified_files)} file(s) modified", fg=typer.colors.GREEN)

    def report_rules(self) -> None:
        for code, entry in self._guidance.iter_entries():
            fixable = "fixable" if entry.get("fixable") else "manual"
            typer.secho(
                f"{code} {entry.get('symbol', '')} [{fixable}]", bold=True
            )
            typer.echo(f"    {entry.get('display_name', '')}: {entry.get('short_description', '')}")
            instructions = self._guidance.get_manual_instructions(code)
            if instructions:
                typer.echo(f"    {instructions}")
