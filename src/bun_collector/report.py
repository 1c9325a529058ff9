"""Report aggregation and JSON-friendly output."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .base import CollectionResult


def _display_path(path: Path, root: Path) -> str:
    try:
        relative = path.relative_to(root)
    except ValueError:
        return str(path)
    return str(relative) or "."


def aggregate(result: CollectionResult) -> dict[str, Any]:
    """Turn a collection result into a single serialisable report.

    ``packages`` lists every distinct installation from the transitive map,
    flagged with whether it is reachable through production edges.
    ``productionGraph`` is passed through keyed by ``name@reference``.
    """
    root = result.tree.path
    production_ids = {node.id for node in result.production_dependencies()}

    packages: list[dict[str, Any]] = []
    for dep_id, node in sorted(result.all_dependencies.items()):
        packages.append(
            {
                "id": dep_id,
                "name": node.name,
                "version": node.version,
                "reference": node.reference,
                "path": _display_path(node.path, root),
                "production": dep_id in production_ids,
            }
        )

    graph = {
        dep_id: {"dependencies": list(children)}
        for dep_id, children in result.production_graph.items()
    }

    report: dict[str, Any] = {
        "version": "1",
        "root": {
            "id": result.root_id,
            "name": result.tree.name,
            "version": result.tree.version,
            "path": str(root),
        },
        "packages": packages,
        "productionGraph": graph,
        "totals": {
            "packages": len(packages),
            "production": len(production_ids),
            "edges": sum(len(children) for children in result.production_graph.values()),
        },
    }

    return report
