"""CLI entry points for aasm-rbi - Thin Controller using Typer."""

import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import Callable, NoReturn, Optional

import typer

from aasm_rbi.domain.config import ConfigurationLoader
from aasm_rbi.domain.constants import TOOL_NAME
from aasm_rbi.domain.entities import MethodDeclaration
from aasm_rbi.domain.errors import AasmRbiError
from aasm_rbi.domain.protocols import (
    DeclarationEmitterProtocol,
    DeclarationSynthesizerProtocol,
    FileSystemProtocol,
    StateMachineRegistryProtocol,
    TelemetryPort,
)
from aasm_rbi.use_cases.generate_rbi import GenerateRbiUseCase, InspectModelUseCase

EXIT_STALE = 1
EXIT_ERROR = 2

# B008: avoid function call in default; use module-level singletons for Typer Options
_MANIFEST_OPTION = typer.Option(
    None, "--manifest", "-m", help="State-machine manifest (default: [tool.aasm-rbi] manifest)")
_VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log per-model decisions")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    synthesizer: DeclarationSynthesizerProtocol
    emitter: DeclarationEmitterProtocol
    registry_factory: Callable[[str], StateMachineRegistryProtocol]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @staticmethod
    def format_declaration(declaration: MethodDeclaration) -> str:
        """One-line signature, e.g. bazify(**params: T.untyped) -> T::Boolean."""
        params = ", ".join(
            f"{'**' if p.variadic_keyword_capture else ''}{p.name}: {p.type}"
            for p in declaration.parameters
        )
        return f"{declaration.name}({params}) -> {declaration.return_type}"

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name=TOOL_NAME,
            help="Generate Sorbet RBI for the methods a state-machine extension adds to models.",
            add_completion=False,
        )

        def registry_for(manifest: Optional[str]) -> StateMachineRegistryProtocol:
            return deps.registry_factory(manifest or deps.config_loader.manifest_path)

        def fail(error: AasmRbiError) -> NoReturn:
            deps.telemetry.error(str(error))
            sys.exit(EXIT_ERROR)

        @app.command()
        def generate(
            manifest: Optional[str] = _MANIFEST_OPTION,
            output_dir: Optional[str] = typer.Option(
                None, "--output-dir", "-o", help="Directory for .rbi files (default: [tool.aasm-rbi] output_dir)"),
            check: bool = typer.Option(
                False, "--check", help="Verify generated files are up to date; write nothing"),
            verbose: bool = _VERBOSE_OPTION,
        ) -> None:
            """Regenerate the RBI file of every model with a state machine."""
            CLIAppFactory.configure_logging(verbose)
            deps.telemetry.handshake()
            use_case = GenerateRbiUseCase(
                registry=registry_for(manifest),
                synthesizer=deps.synthesizer,
                emitter=deps.emitter,
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                config_loader=deps.config_loader,
                output_dir=output_dir or deps.config_loader.output_dir,
            )
            try:
                report = use_case.execute(check=check)
            except AasmRbiError as e:
                fail(e)
            for outcome in report.written():
                typer.echo(f"wrote {outcome.path}")
            sys.exit(EXIT_STALE if report.is_stale() else 0)

        @app.command()
        def inspect(
            model: str = typer.Argument(..., help="Model id, e.g. Post or Admin::Post"),
            manifest: Optional[str] = _MANIFEST_OPTION,
            as_json: bool = typer.Option(False, "--json", help="Print declarations as JSON"),
            verbose: bool = _VERBOSE_OPTION,
        ) -> None:
            """Print the declarations synthesized for one model."""
            CLIAppFactory.configure_logging(verbose)
            use_case = InspectModelUseCase(registry_for(manifest), deps.synthesizer)
            try:
                model_set = use_case.execute(model)
            except AasmRbiError as e:
                fail(e)
            if as_json:
                typer.echo(json.dumps([asdict(d) for d in model_set], indent=2))
                return
            for declaration in model_set:
                typer.echo(CLIAppFactory.format_declaration(declaration))

        @app.command()
        def models(
            manifest: Optional[str] = _MANIFEST_OPTION,
        ) -> None:
            """List models in the manifest with their state machines."""
            registry = registry_for(manifest)
            try:
                for model_id in registry.list_models():
                    if registry.has_state_machine_capability(model_id):
                        names = ", ".join(registry.list_machine_names(model_id)) or "(none)"
                    else:
                        names = "-"
                    typer.echo(f"{model_id}\t{names}")
            except AasmRbiError as e:
                fail(e)

        return app
