"""Resolved dependency node model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_VERSION = "0.0.0"


@dataclass(slots=True, eq=False)
class DependencyNode:
    """One installed package instance found on disk.

    ``dependencies`` and ``optional_dependencies`` hold the children that were
    found in ``node_modules``; ``manifest_dependencies`` and
    ``manifest_optional_dependencies`` are the maps copied verbatim from the
    package's own manifest. Only the latter decide whether an edge is a
    production edge.

    Nodes are shared between parents and may point back at an ancestor when
    the installation contains a dependency cycle, so identity comparison is
    used instead of field equality.
    """

    name: str
    version: str
    reference: str
    path: Path
    manifest_dependencies: dict[str, str] = field(default_factory=dict)
    manifest_optional_dependencies: dict[str, str] = field(default_factory=dict)
    dependencies: dict[str, DependencyNode] | None = None
    optional_dependencies: dict[str, DependencyNode] | None = None

    @property
    def id(self) -> str:
        return dependency_id(self)

    def iter_children(self) -> Iterator[tuple[str, DependencyNode, dict[str, str]]]:
        """Yield ``(alias, child, manifest_map)`` for required then optional children."""
        for alias, child in (self.dependencies or {}).items():
            yield alias, child, self.manifest_dependencies
        for alias, child in (self.optional_dependencies or {}).items():
            yield alias, child, self.manifest_optional_dependencies

    def __repr__(self) -> str:
        return f"DependencyNode({self.id!r}, path={str(self.path)!r})"


def dependency_id(node: DependencyNode) -> str:
    """Return the ``name@reference`` key used by the transitive map and production graph."""
    return f"{node.name}@{node.reference}"
