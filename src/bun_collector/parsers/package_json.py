"""Read package.json manifests from installed package directories."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ..base import CollectorError


MANIFEST_NAME = "package.json"

_DEPENDENCY_MAP = {
    "type": ["object", "null"],
    "additionalProperties": {"type": "string"},
}

MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "version": {"type": "string"},
        "dependencies": _DEPENDENCY_MAP,
        "optionalDependencies": _DEPENDENCY_MAP,
    },
}

_VALIDATOR = Draft202012Validator(MANIFEST_SCHEMA)


class ManifestError(CollectorError):
    """Raised when a manifest is missing, unreadable or malformed."""


@dataclass(slots=True, frozen=True)
class Manifest:
    """The parts of a package.json the collector cares about."""

    name: str | None
    version: str | None
    dependencies: dict[str, str] = field(default_factory=dict)
    optional_dependencies: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        return cls(
            name=data.get("name"),
            version=data.get("version"),
            dependencies=dict(data.get("dependencies") or {}),
            optional_dependencies=dict(data.get("optionalDependencies") or {}),
        )


def _format_errors(errors: list) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def read_manifest(directory: Path, manifest_name: str = MANIFEST_NAME) -> Manifest:
    """Load and validate the manifest stored in ``directory``.

    Any failure is fatal for the collection run: the caller gets a
    ``ManifestError`` naming the directory and the underlying reason.
    """
    path = Path(directory) / manifest_name
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestError(f"Unable to read {manifest_name} for {directory}: {exc}") from exc

    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ManifestError(
            f"Unable to read {manifest_name} for {directory}: {_format_errors(errors)}"
        )

    return Manifest.from_dict(data)
