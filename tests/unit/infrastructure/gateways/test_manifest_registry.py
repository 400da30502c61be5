"""Unit tests for ManifestStateMachineRegistry."""

import json
from pathlib import Path

import pytest

from aasm_rbi.domain.entities import StateMachineDescriptor
from aasm_rbi.domain.errors import (
    ManifestError,
    UnknownModelError,
    UnknownStateMachineError,
)
from aasm_rbi.infrastructure.gateways.manifest_registry import ManifestStateMachineRegistry


class TestManifestLoading:
    def test_loads_yaml_manifest_lazily(self, write_manifest) -> None:
        path = write_manifest()
        registry = ManifestStateMachineRegistry(str(path))
        path.unlink()

        with pytest.raises(ManifestError, match="not found"):
            registry.list_models()

    def test_lists_models_in_file_order(self, write_manifest) -> None:
        registry = ManifestStateMachineRegistry(str(write_manifest()))

        assert registry.list_models() == ["Post", "Comment", "Admin::AuditLog"]

    def test_loads_json_manifest(self, tmp_path: Path, post_manifest) -> None:
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps(post_manifest), encoding="utf-8")

        registry = ManifestStateMachineRegistry(str(path))

        assert registry.list_machine_names("Post") == ["default", "review"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        registry = ManifestStateMachineRegistry(str(tmp_path / "nope.yml"))

        with pytest.raises(ManifestError):
            registry.list_models()

    def test_unparsable_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yml"
        path.write_text("models: [unclosed\n", encoding="utf-8")

        with pytest.raises(ManifestError, match="Cannot parse"):
            ManifestStateMachineRegistry(str(path)).list_models()

    def test_empty_file_has_no_models(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        assert ManifestStateMachineRegistry(str(path)).list_models() == []

    @pytest.mark.parametrize(
        "document",
        [
            ["Post"],
            {"models": ["Post"]},
            {"models": {"Post": "default"}},
            {"models": {"Post": {"state_machines": ["default"]}}},
        ],
    )
    def test_structurally_wrong_documents_raise(self, document: object) -> None:
        with pytest.raises(ManifestError):
            ManifestStateMachineRegistry.from_mapping(document)


class TestCapabilityAndResolution:
    def test_capability_requires_state_machines_key(self, post_manifest) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(post_manifest)

        assert registry.has_state_machine_capability("Post") is True
        assert registry.has_state_machine_capability("Comment") is False
        assert registry.has_state_machine_capability("Admin::AuditLog") is True

    def test_null_model_entry_has_no_capability(self) -> None:
        registry = ManifestStateMachineRegistry.from_mapping({"models": {"Tag": None}})

        assert registry.has_state_machine_capability("Tag") is False

    def test_resolve_returns_descriptor(self, post_manifest) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(post_manifest)

        assert registry.resolve("Post", "review") == StateMachineDescriptor(
            name="review",
            namespace="review",
            events=("approve",),
            states=("pending", "approved"),
        )
        assert registry.resolve("Post", "default").namespace is None

    def test_resolve_defaults_missing_lists_to_empty(self) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(
            {"models": {"Job": {"state_machines": {"default": None}}}}
        )

        assert registry.resolve("Job", "default") == StateMachineDescriptor(name="default")

    def test_resolve_coerces_scalar_names_to_strings(self) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(
            {"models": {"Job": {"state_machines": {1: {"namespace": 2, "states": [3]}}}}}
        )

        assert registry.list_machine_names("Job") == ["1"]
        descriptor = registry.resolve("Job", "1")
        assert descriptor.namespace == "2"
        assert descriptor.states == ("3",)

    def test_non_list_events_raise(self) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(
            {"models": {"Job": {"state_machines": {"default": {"events": "run"}}}}}
        )

        with pytest.raises(ManifestError, match="must be a list"):
            registry.resolve("Job", "default")

    def test_unknown_model_raises(self, post_manifest) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(post_manifest)

        with pytest.raises(UnknownModelError):
            registry.has_state_machine_capability("Ghost")

    def test_unknown_machine_raises(self, post_manifest) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(post_manifest)

        with pytest.raises(UnknownStateMachineError):
            registry.resolve("Post", "billing")

    def test_model_without_capability_lists_no_machines(self, post_manifest) -> None:
        registry = ManifestStateMachineRegistry.from_mapping(post_manifest)

        assert registry.list_machine_names("Comment") == []
