"""Console telemetry: status lines for the CLI. Implements TelemetryPort on top of typer."""

import os

import typer

from aasm_rbi.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Prefixed, optionally colored status output. Errors and warnings go to stderr."""

    def __init__(self, project_name: str, color: str, welcome_message: str, quiet: bool = False) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome_message = welcome_message
        self.quiet = quiet

    @property
    def use_color(self) -> bool:
        return not os.getenv("NO_COLOR")

    def _prefix(self) -> str:
        return f"[{self.project_name}]"

    def _emit(self, message: str, fg: str | None = None, err: bool = False) -> None:
        typer.secho(
            f"{self._prefix()} {message}",
            fg=fg if self.use_color else None,
            err=err,
        )

    def handshake(self) -> None:
        """Announce the tool once per run."""
        if not self.quiet:
            self._emit(self.welcome_message, fg=self.color)

    def step(self, message: str) -> None:
        if not self.quiet:
            self._emit(message)

    def warning(self, message: str) -> None:
        self._emit(f"WARNING: {message}", fg=typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        self._emit(f"ERROR: {message}", fg=typer.colors.RED, err=True)
