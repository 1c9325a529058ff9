"""Shared fixtures for collector tests."""

import json
from pathlib import Path
from typing import Optional

import pytest


def _write_package(
    directory: Path,
    name: Optional[str] = None,
    version: Optional[str] = None,
    dependencies: Optional[dict] = None,
    optional: Optional[dict] = None,
    **extra,
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    manifest: dict = dict(extra)
    if name is not None:
        manifest["name"] = name
    if version is not None:
        manifest["version"] = version
    if dependencies is not None:
        manifest["dependencies"] = dependencies
    if optional is not None:
        manifest["optionalDependencies"] = optional
    (directory / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return directory


@pytest.fixture
def write_package():
    """Return a helper that writes a package.json into a directory."""
    return _write_package


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty project root directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root
