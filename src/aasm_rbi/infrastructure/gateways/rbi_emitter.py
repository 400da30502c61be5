"""RBI Emitter - DeclarationEmitterProtocol rendering a ModelDeclarationSet as a Sorbet RBI file."""

from aasm_rbi.domain.constants import DEFAULT_TYPED_SIGIL, TOOL_NAME
from aasm_rbi.domain.entities import SORBET_TYPES, ModelDeclarationSet, TypeVocabulary
from aasm_rbi.domain.protocols import DeclarationEmitterProtocol
from aasm_rbi.infrastructure.gateways.rbi_generator import RbiNamespace, RbiParameter


class RbiDeclarationEmitter(DeclarationEmitterProtocol):
    """Implements DeclarationEmitterProtocol with the RBI builder."""

    def __init__(
        self,
        typed_sigil: str = DEFAULT_TYPED_SIGIL,
        regenerate_command: str = f"{TOOL_NAME} generate",
    ) -> None:
        self._typed_sigil = typed_sigil
        self._regenerate_command = regenerate_command

    @property
    def types(self) -> TypeVocabulary:
        return SORBET_TYPES

    def header_for(self, model_id: str) -> list[str]:
        return [
            f"# This is an autogenerated file for state machine methods in {model_id}",
            f"# Please rerun {self._regenerate_command} to regenerate.",
            "",
            f"# typed: {self._typed_sigil}",
        ]

    def emit(self, model_set: ModelDeclarationSet) -> str:
        """Render the model's class with every declaration, in order."""
        root = RbiNamespace(header=self.header_for(model_set.model_id))
        model_rbi = root.create_class(model_set.model_id)
        for declaration in model_set:
            model_rbi.create_method(
                declaration.name,
                parameters=[
                    RbiParameter(
                        name=p.name,
                        type=p.type,
                        keyword_splat=p.variadic_keyword_capture,
                    )
                    for p in declaration.parameters
                ],
                return_type=declaration.return_type,
            )
        return root.render()
