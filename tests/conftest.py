"""Pytest configuration: shared manifests and fakes.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/ on
the path so aasm_rbi imports without an install.
"""

import copy
from pathlib import Path
from typing import Callable

import pytest
import yaml

POST_MANIFEST: dict[str, object] = {
    "models": {
        "Post": {
            "state_machines": {
                "default": {
                    "events": ["publish", "archive"],
                    "states": ["draft", "published", "archived"],
                },
                "review": {
                    "namespace": "review",
                    "events": ["approve"],
                    "states": ["pending", "approved"],
                },
            }
        },
        "Comment": {},
        "Admin::AuditLog": {
            "state_machines": {
                "default": {"events": [], "states": []},
            }
        },
    }
}


@pytest.fixture
def post_manifest() -> dict[str, object]:
    return copy.deepcopy(POST_MANIFEST)


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Write a manifest document to tmp_path and return its path."""

    def _write(data: object = POST_MANIFEST, name: str = "aasm_manifest.yml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


class FakeTelemetry:
    """Records telemetry calls for assertions."""

    def __init__(self) -> None:
        self.steps: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.handshakes = 0

    def step(self, message: str) -> None:
        self.steps.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def handshake(self) -> None:
        self.handshakes += 1


@pytest.fixture
def telemetry() -> FakeTelemetry:
    return FakeTelemetry()
