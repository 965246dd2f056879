"""CLI presentation helpers for human and JSON output modes."""

from __future__ import annotations

import json
from typing import Any, Mapping

import click

from exitpolicy.constants import CompatibilityMode, DeprecatedCode, ExitStatusCode
from exitpolicy.exit_status.registry import code_name


class CliPresenter:
    """Render command outputs for human and machine-readable modes."""

    def __init__(self, *, json_output: bool, quiet: bool) -> None:
        """Store output-mode flags for rendering decisions."""
        self.json_output = json_output
        self.quiet = quiet

    @property
    def emits_human_output(self) -> bool:
        """Return whether human-readable output should be emitted."""
        return not self.json_output and not self.quiet

    def emit_resolution(
        self,
        *,
        code: int,
        mode: CompatibilityMode,
        reboot_pending: bool,
    ) -> None:
        """Emit one resolved exit code."""
        if self.json_output:
            self.emit_json(
                {
                    "status": "ok",
                    "mode": "resolve",
                    "compatibility_mode": mode.value,
                    "reboot_pending": reboot_pending,
                    "exit_code": code,
                    "name": code_name(code),
                }
            )
            return
        if self.emits_human_output:
            click.echo(str(code))

    def emit_validation(self, *, code: int, valid: bool, mode: CompatibilityMode) -> None:
        """Emit whether ``code`` passed validation."""
        if self.json_output:
            self.emit_json(
                {
                    "status": "ok" if valid else "invalid",
                    "mode": "validate",
                    "compatibility_mode": mode.value,
                    "exit_code": code,
                    "name": code_name(code),
                    "valid": valid,
                }
            )
            return
        if not self.emits_human_output:
            return
        label = code_name(code) or "non-standard"
        verdict = click.style("valid", fg="green") if valid else click.style("invalid", fg="red")
        click.echo(f"{code} ({label}) is {verdict} under {mode.value} mode")

    def emit_registry(self) -> None:
        """Emit the sanctioned and deprecated exit-code tables."""
        if self.json_output:
            self.emit_json(
                {
                    "sanctioned": {code.name: int(code) for code in ExitStatusCode},
                    "deprecated": {code.name: int(code) for code in DeprecatedCode},
                }
            )
            return
        if not self.emits_human_output:
            return
        for code in ExitStatusCode:
            click.echo(f"{int(code):>4}  {code.name}")
        for code in DeprecatedCode:
            click.echo(f"{int(code):>4}  {code.name} " + click.style("(deprecated)", fg="yellow"))

    def emit_error(self, message: str) -> None:
        """Emit an error message on stderr in any mode."""
        click.echo(click.style(message, fg="red"), err=True)

    def emit_json(self, payload: Mapping[str, Any]) -> None:
        """Emit one machine-readable JSON object to stdout."""
        click.echo(json.dumps(payload, sort_keys=True))
