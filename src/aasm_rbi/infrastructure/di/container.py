from typing import TYPE_CHECKING, Any, cast

from aasm_rbi.domain.config import ConfigurationLoader
from aasm_rbi.infrastructure.config_file_loader import ConfigFileLoader
from aasm_rbi.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from aasm_rbi.infrastructure.gateways.manifest_registry import ManifestStateMachineRegistry
from aasm_rbi.infrastructure.gateways.rbi_emitter import RbiDeclarationEmitter
from aasm_rbi.interface.telemetry import ProjectTelemetry
from aasm_rbi.use_cases.synthesize_declarations import DeclarationSynthesizer

if TYPE_CHECKING:
    from aasm_rbi.domain.protocols import (
        DeclarationEmitterProtocol,
        DeclarationSynthesizerProtocol,
        FileSystemProtocol,
        StateMachineRegistryProtocol,
        TelemetryPort,
    )


class AasmRbiContainer:
    """Dependency Injection Container for the RBI generator."""

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "TelemetryPort", ProjectTelemetry("AASM-RBI", "cyan", "State machine RBI generator online")
        )
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        emitter = RbiDeclarationEmitter(typed_sigil=config_loader.typed_sigil)
        self.register_singleton("RbiDeclarationEmitter", emitter)
        self.register_singleton("DeclarationSynthesizer", DeclarationSynthesizer(types=emitter.types))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_synthesizer(self) -> "DeclarationSynthesizerProtocol":
        """Return the declaration synthesizer."""
        return cast("DeclarationSynthesizerProtocol", self.get("DeclarationSynthesizer"))

    def get_emitter(self) -> "DeclarationEmitterProtocol":
        """Return the RBI emitter."""
        return cast("DeclarationEmitterProtocol", self.get("RbiDeclarationEmitter"))

    @staticmethod
    def create_registry(manifest_path: str) -> "StateMachineRegistryProtocol":
        """Registry over one manifest file. Built per run since the path is a CLI option."""
        return ManifestStateMachineRegistry(manifest_path)
