"""Use Case: Synthesize the method declarations a state-machine extension adds to a model."""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from aasm_rbi.domain.constants import EVENT_PARAMS_NAME
from aasm_rbi.domain.entities import (
    SORBET_TYPES,
    MethodDeclaration,
    ModelDeclarationSet,
    ParameterSpec,
    StateMachineDescriptor,
    TypeVocabulary,
)


@dataclass(frozen=True)
class DeclarationSynthesizer:
    """
    Map resolved state machines to method declarations. Pure: no I/O, no registry access.

    For an event like bazify a model gets:
      - may_bazify?
      - bazify(**params)
      - bazify!(**params)
      - bazify_without_validation!(**params)
    For a state like baz it gets baz?.
    """

    types: TypeVocabulary = field(default_factory=lambda: SORBET_TYPES)

    def synthesize(
        self, model_id: str, machines: Sequence[StateMachineDescriptor]
    ) -> ModelDeclarationSet:
        """Declarations for every machine, concatenated in machine order. Duplicates are kept."""
        declarations: list[MethodDeclaration] = []
        for machine in machines:
            declarations.extend(self._machine_declarations(machine))
        return ModelDeclarationSet(model_id=model_id, declarations=tuple(declarations))

    def _machine_declarations(
        self, machine: StateMachineDescriptor
    ) -> Iterator[MethodDeclaration]:
        prefix = self.prefix_for(machine.namespace)
        for event in machine.events:
            yield from self._event_declarations(prefix + event)
        for state in machine.states:
            yield MethodDeclaration(name=f"{prefix}{state}?", return_type=self.types.boolean)

    def _event_declarations(self, event: str) -> Iterator[MethodDeclaration]:
        params = (
            ParameterSpec(
                name=EVENT_PARAMS_NAME,
                type=self.types.untyped,
                variadic_keyword_capture=True,
            ),
        )
        boolean = self.types.boolean
        yield MethodDeclaration(name=f"may_{event}?", return_type=boolean)
        yield MethodDeclaration(name=event, parameters=params, return_type=boolean)
        yield MethodDeclaration(name=f"{event}!", parameters=params, return_type=boolean)
        yield MethodDeclaration(
            name=f"{event}_without_validation!", parameters=params, return_type=boolean
        )

    @staticmethod
    def prefix_for(namespace: Optional[str]) -> str:
        """Name prefix for a machine namespace; empty when it is missing or blank."""
        return f"{namespace}_" if namespace and namespace.strip() else ""
