"""Manifest Registry - StateMachineRegistryProtocol over a YAML/JSON dump of every model's machines."""

from pathlib import Path
from typing import Optional

import yaml

from aasm_rbi.domain.entities import StateMachineDescriptor
from aasm_rbi.domain.errors import (
    ManifestError,
    UnknownModelError,
    UnknownStateMachineError,
)
from aasm_rbi.domain.protocols import StateMachineRegistryProtocol


class ManifestStateMachineRegistry(StateMachineRegistryProtocol):
    """
    Registry read from a manifest file, loaded once on first use.

    Layout:
        models:
          Post:
            state_machines:
              default: {namespace: null, events: [...], states: [...]}
          Comment: {}    # no state machine

    JSON manifests load the same way (yaml.safe_load accepts JSON).
    """

    def __init__(self, manifest_path: str) -> None:
        self._path = manifest_path
        self._models: Optional[dict[str, dict[str, object]]] = None

    @classmethod
    def from_mapping(cls, data: object, source: str = "<memory>") -> "ManifestStateMachineRegistry":
        """Build a registry from an already-parsed manifest document."""
        registry = cls(source)
        registry._models = cls._parse_models(data, source)
        return registry

    def _load(self) -> dict[str, dict[str, object]]:
        if self._models is None:
            path = Path(self._path)
            if not path.is_file():
                raise ManifestError(f"State-machine manifest not found: {self._path}")
            try:
                with path.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ManifestError(f"Cannot parse manifest {self._path}: {e}") from e
            self._models = self._parse_models(data, self._path)
        return self._models

    @staticmethod
    def _parse_models(data: object, source: str) -> dict[str, dict[str, object]]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ManifestError(f"{source}: top level must be a mapping with a 'models' key")
        models = data.get("models") or {}
        if not isinstance(models, dict):
            raise ManifestError(f"{source}: 'models' must be a mapping of model id to entry")
        parsed: dict[str, dict[str, object]] = {}
        for model_id, entry in models.items():
            if entry is None:
                entry = {}
            if not isinstance(entry, dict):
                raise ManifestError(f"{source}: entry for model '{model_id}' must be a mapping")
            machines = entry.get("state_machines", None)
            if machines is not None and not isinstance(machines, dict):
                raise ManifestError(
                    f"{source}: 'state_machines' of model '{model_id}' must be a mapping"
                )
            parsed[str(model_id)] = entry
        return parsed

    def _model_entry(self, model_id: str) -> dict[str, object]:
        models = self._load()
        if model_id not in models:
            raise UnknownModelError(f"Model '{model_id}' is not in {self._path}")
        return models[model_id]

    def _machines(self, model_id: str) -> dict[object, object]:
        machines = self._model_entry(model_id).get("state_machines")
        return machines if isinstance(machines, dict) else {}

    def list_models(self) -> list[str]:
        """Model ids in manifest order."""
        return list(self._load())

    def has_state_machine_capability(self, model_id: str) -> bool:
        """True when the entry declares state_machines, even an empty one."""
        return "state_machines" in self._model_entry(model_id)

    def list_machine_names(self, model_id: str) -> list[str]:
        """Machine names in manifest order."""
        return [str(name) for name in self._machines(model_id)]

    def resolve(self, model_id: str, machine_name: str) -> StateMachineDescriptor:
        """Descriptor for one machine. Names are passed through as strings, unvalidated."""
        machines = {str(k): v for k, v in self._machines(model_id).items()}
        if machine_name not in machines:
            raise UnknownStateMachineError(
                f"Model '{model_id}' has no state machine named '{machine_name}'"
            )
        body = machines[machine_name] or {}
        if not isinstance(body, dict):
            raise ManifestError(
                f"{self._path}: machine '{machine_name}' of '{model_id}' must be a mapping"
            )
        namespace = body.get("namespace")
        return StateMachineDescriptor(
            name=machine_name,
            namespace=None if namespace is None else str(namespace),
            events=self._names(body, "events", model_id, machine_name),
            states=self._names(body, "states", model_id, machine_name),
        )

    def _names(
        self, body: dict[str, object], key: str, model_id: str, machine_name: str
    ) -> tuple[str, ...]:
        raw = body.get(key) or []
        if not isinstance(raw, list):
            raise ManifestError(
                f"{self._path}: '{key}' of machine '{machine_name}' on '{model_id}' must be a list"
            )
        return tuple(str(name) for name in raw)
