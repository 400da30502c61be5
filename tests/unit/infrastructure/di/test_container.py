"""Unit tests for AasmRbiContainer wiring."""

from pathlib import Path

import pytest

from aasm_rbi.domain.entities import StateMachineDescriptor, TypeVocabulary
from aasm_rbi.infrastructure.di.container import AasmRbiContainer
from aasm_rbi.infrastructure.gateways.rbi_emitter import RbiDeclarationEmitter


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.aasm-rbi]\ntyped_sigil = "true"\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestAasmRbiContainer:
    def test_synthesizer_takes_types_from_emitter(
        self, project_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        vocabulary = TypeVocabulary(boolean="Bool", untyped="Any")
        monkeypatch.setattr(RbiDeclarationEmitter, "types", property(lambda self: vocabulary))
        machine = StateMachineDescriptor(events=("go",))

        model_set = AasmRbiContainer().get_synthesizer().synthesize("Car", [machine])

        go = model_set.declarations[1]
        assert go.return_type == "Bool"
        assert go.parameters[0].type == "Any"

    def test_emitter_reads_typed_sigil_from_config(self, project_dir: Path) -> None:
        container = AasmRbiContainer()
        model_set = container.get_synthesizer().synthesize("Post", [])

        content = container.get_emitter().emit(model_set)

        assert "# typed: true\n" in content

    def test_unknown_key_raises(self, project_dir: Path) -> None:
        with pytest.raises(ValueError, match="not registered"):
            AasmRbiContainer().get("Nope")
