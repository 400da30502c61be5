from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

# Opaque type token from the host type vocabulary (e.g. "T::Boolean").
TypeRef = str


@dataclass(frozen=True)
class TypeVocabulary:
    """The two type tokens declarations need. Supplied by the emitter's type system."""
    boolean: TypeRef = "T::Boolean"
    untyped: TypeRef = "T.untyped"


SORBET_TYPES = TypeVocabulary()


@dataclass(frozen=True)
class StateMachineDescriptor:
    """
    Read-only view over one named state machine owned by a model.

    Produced by the registry. Event and state names keep the order the registry
    declared them in.
    """
    events: tuple[str, ...] = ()
    states: tuple[str, ...] = ()
    namespace: Optional[str] = None
    name: str = "default"


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: TypeRef
    variadic_keyword_capture: bool = False


@dataclass(frozen=True)
class MethodDeclaration:
    name: str
    return_type: TypeRef
    parameters: tuple[ParameterSpec, ...] = ()


@dataclass(frozen=True)
class ModelDeclarationSet:
    """Ordered declarations synthesized for one model. Handed to the emitter as a unit."""
    model_id: str
    declarations: tuple[MethodDeclaration, ...] = ()

    def __iter__(self) -> Iterator[MethodDeclaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def names(self) -> list[str]:
        """Declaration names in output order."""
        return [d.name for d in self.declarations]


class OutcomeStatus(Enum):
    """What a generation run did with one model."""
    WRITTEN = "written"
    UNCHANGED = "unchanged"
    STALE = "stale"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ModelOutcome:
    model_id: str
    status: OutcomeStatus
    path: Optional[str] = None
    declaration_count: int = 0
    reason: str = ""


@dataclass(frozen=True)
class GenerationReport:
    """Per-model outcomes of one generation run, in processing order."""
    outcomes: tuple[ModelOutcome, ...] = field(default_factory=tuple)

    def _with_status(self, status: OutcomeStatus) -> list[ModelOutcome]:
        return [o for o in self.outcomes if o.status is status]

    def written(self) -> list[ModelOutcome]:
        return self._with_status(OutcomeStatus.WRITTEN)

    def unchanged(self) -> list[ModelOutcome]:
        return self._with_status(OutcomeStatus.UNCHANGED)

    def stale(self) -> list[ModelOutcome]:
        return self._with_status(OutcomeStatus.STALE)

    def skipped(self) -> list[ModelOutcome]:
        return self._with_status(OutcomeStatus.SKIPPED)

    def is_stale(self) -> bool:
        """True if a check run found any file missing or out of date."""
        return bool(self.stale())
