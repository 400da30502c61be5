from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from aasm_rbi.domain.entities import (
        ModelDeclarationSet,
        StateMachineDescriptor,
        TypeVocabulary,
    )


class StateMachineRegistryProtocol(Protocol):
    """Protocol for the registry that owns every model's state-machine configuration."""

    def list_models(self) -> list[str]:
        """All model ids the registry knows, in declaration order."""
        ...

    def has_state_machine_capability(self, model_id: str) -> bool:
        """True if the model carries the state-machine extension at all."""
        ...

    def list_machine_names(self, model_id: str) -> list[str]:
        """Names of the model's state machines, in declaration order."""
        ...

    def resolve(self, model_id: str, machine_name: str) -> "StateMachineDescriptor":
        """Resolve one named machine of a model into a descriptor."""
        ...


class DeclarationSynthesizerProtocol(Protocol):
    """Protocol for turning resolved machines into method declarations."""

    def synthesize(
        self, model_id: str, machines: Sequence["StateMachineDescriptor"]
    ) -> "ModelDeclarationSet": ...


class DeclarationEmitterProtocol(Protocol):
    """Protocol for materializing a declaration set into file content."""

    @property
    def types(self) -> "TypeVocabulary":
        """Type tokens the emitter understands."""
        ...

    def emit(self, model_set: "ModelDeclarationSet") -> str:
        """Render the declarations of one model. Raises InvalidDeclarationError on bad names."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def exists(self, path: str) -> bool:
        """Check if path exists."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def make_dirs(self, path: str, exist_ok: bool = True) -> None:
        """Create directory and parent directories if needed."""
        ...

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        ...

    def parent_dir(self, path: str) -> str:
        """Return the directory containing path."""
        ...
