"""Use Case: Generate RBI - Resolve every model's state machines and write one .rbi per model."""

import logging
from typing import TYPE_CHECKING

from aasm_rbi.domain.constants import RBI_EXTENSION
from aasm_rbi.domain.entities import (
    GenerationReport,
    ModelDeclarationSet,
    ModelOutcome,
    OutcomeStatus,
)
from aasm_rbi.domain.naming import underscore
from aasm_rbi.domain.protocols import (
    DeclarationEmitterProtocol,
    DeclarationSynthesizerProtocol,
    FileSystemProtocol,
    StateMachineRegistryProtocol,
    TelemetryPort,
)

if TYPE_CHECKING:
    from aasm_rbi.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class InspectModelUseCase:
    """Synthesize one model's declarations without emitting or writing anything."""

    def __init__(
        self,
        registry: StateMachineRegistryProtocol,
        synthesizer: DeclarationSynthesizerProtocol,
    ) -> None:
        self.registry = registry
        self.synthesizer = synthesizer

    def execute(self, model_id: str) -> ModelDeclarationSet:
        """Declarations for model_id; empty when the model has no state machines."""
        if not self.registry.has_state_machine_capability(model_id):
            return ModelDeclarationSet(model_id=model_id)
        machines = [
            self.registry.resolve(model_id, name)
            for name in self.registry.list_machine_names(model_id)
        ]
        return self.synthesizer.synthesize(model_id, machines)


class GenerateRbiUseCase:
    """Orchestrate one generation run over every model the registry knows."""

    def __init__(
        self,
        registry: StateMachineRegistryProtocol,
        synthesizer: DeclarationSynthesizerProtocol,
        emitter: DeclarationEmitterProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: "ConfigurationLoader",
        output_dir: str,
    ) -> None:
        self.registry = registry
        self.synthesizer = synthesizer
        self.emitter = emitter
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.output_dir = output_dir
        self._inspect = InspectModelUseCase(registry, synthesizer)

    def output_path_for(self, model_id: str) -> str:
        """Target file for a model: <output_dir>/<underscored id>.rbi."""
        return self.filesystem.join_path(
            self.output_dir, underscore(model_id) + RBI_EXTENSION
        )

    def execute(self, check: bool = False) -> GenerationReport:
        """
        Generate (or, with check=True, verify) the RBI file of every model.

        Models excluded by config or lacking the state-machine extension are
        skipped. In check mode nothing is written; missing or differing files
        are reported as stale.

        Returns:
            GenerationReport with one outcome per model, in registry order.
        """
        mode = "Checking" if check else "Generating"
        self.telemetry.step(f"{mode} state-machine RBI into: {self.output_dir}")

        excluded = set(self.config_loader.exclude_models)
        outcomes: list[ModelOutcome] = []
        for model_id in self.registry.list_models():
            if model_id in excluded:
                logger.info("Skipping %s: excluded by configuration", model_id)
                outcomes.append(
                    ModelOutcome(model_id, OutcomeStatus.SKIPPED, reason="excluded")
                )
                continue
            if not self.registry.has_state_machine_capability(model_id):
                logger.info("Skipping %s: no state machine", model_id)
                outcomes.append(
                    ModelOutcome(model_id, OutcomeStatus.SKIPPED, reason="no state machine")
                )
                continue
            outcomes.append(self._process_model(model_id, check))

        report = GenerationReport(outcomes=tuple(outcomes))
        self._announce(report, check)
        return report

    def _process_model(self, model_id: str, check: bool) -> ModelOutcome:
        model_set = self._inspect.execute(model_id)
        content = self.emitter.emit(model_set)
        path = self.output_path_for(model_id)
        logger.debug("%s: %d declarations -> %s", model_id, len(model_set), path)

        current = self.filesystem.read_text(path) if self.filesystem.exists(path) else None
        if current == content:
            status = OutcomeStatus.UNCHANGED
        elif check:
            status = OutcomeStatus.STALE
        else:
            self.filesystem.make_dirs(self.filesystem.parent_dir(path))
            self.filesystem.write_text(path, content)
            status = OutcomeStatus.WRITTEN
        return ModelOutcome(
            model_id, status, path=path, declaration_count=len(model_set)
        )

    def _announce(self, report: GenerationReport, check: bool) -> None:
        if check and report.is_stale():
            for outcome in report.stale():
                self.telemetry.warning(f"Stale: {outcome.path} ({outcome.model_id})")
            self.telemetry.error(
                f"{len(report.stale())} RBI file(s) out of date. Rerun generate."
            )
            return
        self.telemetry.step(
            f"Done: {len(report.written())} written, {len(report.unchanged())} unchanged, "
            f"{len(report.skipped())} skipped."
        )
