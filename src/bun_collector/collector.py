"""Collector for projects installed by Bun.

Bun installs a hoisted ``node_modules`` layout and its lockfile is not parsed
here. Instead the tree is rebuilt from disk: each manifest's declared
dependencies are looked up through the hoisting chain, every real
installation directory becomes one shared ``DependencyNode``, and references
are allocated per directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .base import NodeModulesCollector, UnsupportedOperationError
from .discovery import InstallOptions, PackageManager
from .models import DEFAULT_VERSION, DependencyNode
from .parsers.package_json import read_manifest
from .references import ReferenceAllocator
from .resolver import find_installed_dependency

logger = logging.getLogger(__name__)

ROOT_REFERENCE = "."


@dataclass(slots=True)
class ResolutionContext:
    """Memo tables for a single tree build."""

    cache_by_path: dict[Path, DependencyNode] = field(default_factory=dict)
    processing_paths: set[Path] = field(default_factory=set)
    references: ReferenceAllocator = field(default_factory=ReferenceAllocator)


def _non_empty(mapping: dict[str, DependencyNode]) -> dict[str, DependencyNode] | None:
    return mapping or None


class BunNodeModulesCollector(NodeModulesCollector):
    """Rebuild a Bun project's dependency graph from its node_modules directories."""

    @property
    def install_options(self) -> InstallOptions:
        return InstallOptions(manager=PackageManager.BUN, lockfile="bun.lock")

    def get_args(self) -> list[str]:
        return []

    def get_dependencies_tree(self) -> DependencyNode:
        ctx = ResolutionContext()
        manifest = read_manifest(self.root_dir, self.settings.manifest_name)

        optional = manifest.optional_dependencies
        dependencies, optional_dependencies = self._resolve_children(
            ctx, self.root_dir, manifest.dependencies, optional
        )
        return DependencyNode(
            name=manifest.name or ".",
            version=manifest.version or DEFAULT_VERSION,
            reference=ROOT_REFERENCE,
            path=self.root_dir,
            manifest_dependencies=manifest.dependencies,
            manifest_optional_dependencies=optional,
            dependencies=_non_empty(dependencies),
            optional_dependencies=_non_empty(optional_dependencies),
        )

    def collect_all_dependencies(self, tree: DependencyNode) -> None:
        for _alias, dependency, _manifest in tree.iter_children():
            key = dependency.id
            if key not in self.all_dependencies:
                self.all_dependencies[key] = dependency
                self.collect_all_dependencies(dependency)

    def extract_production_dependency_graph(
        self, tree: DependencyNode, dependency_id: str
    ) -> None:
        if dependency_id in self.production_graph:
            return

        # Registered up front so a cycle back to this node stops here.
        edges: list[str] = []
        self.production_graph[dependency_id] = edges

        for alias, child, manifest in tree.iter_children():
            if alias not in manifest:
                continue
            child_id = child.id
            edges.append(child_id)
            self.extract_production_dependency_graph(child, child_id)

    def parse_dependencies_tree(self, blob: str) -> DependencyNode:
        raise UnsupportedOperationError(
            "BunNodeModulesCollector does not parse external dependency trees"
        )

    def _resolve_children(
        self,
        ctx: ResolutionContext,
        requester_dir: Path,
        manifest_dependencies: dict[str, str],
        manifest_optional_dependencies: dict[str, str],
    ) -> tuple[dict[str, DependencyNode], dict[str, DependencyNode]]:
        dependencies: dict[str, DependencyNode] = {}
        optional_dependencies: dict[str, DependencyNode] = {}

        for alias in manifest_dependencies:
            dep = self._load_dependency(ctx, alias, requester_dir, is_optional=False)
            if dep is not None:
                dependencies[alias] = dep

        if self.settings.include_optional:
            for alias in manifest_optional_dependencies:
                dep = self._load_dependency(ctx, alias, requester_dir, is_optional=True)
                if dep is not None:
                    optional_dependencies[alias] = dep

        return dependencies, optional_dependencies

    def _load_dependency(
        self,
        ctx: ResolutionContext,
        alias: str,
        requester_dir: Path,
        is_optional: bool,
    ) -> DependencyNode | None:
        installed_path = find_installed_dependency(
            requester_dir, alias, self.root_dir, self.settings.modules_dir
        )
        if installed_path is None:
            if not is_optional:
                logger.debug(
                    "Could not locate dependency %s required from %s", alias, requester_dir
                )
            return None

        real_dir = installed_path.resolve()

        cached = ctx.cache_by_path.get(real_dir)
        if cached is not None:
            return cached

        if real_dir in ctx.processing_paths:
            return ctx.cache_by_path.get(real_dir)

        ctx.processing_paths.add(real_dir)
        try:
            manifest = read_manifest(real_dir, self.settings.manifest_name)
            dependency = DependencyNode(
                name=manifest.name or alias,
                version=manifest.version or DEFAULT_VERSION,
                reference="",
                path=real_dir,
                manifest_dependencies=manifest.dependencies,
                manifest_optional_dependencies=manifest.optional_dependencies,
            )
            # Cached before recursing: a cycle back to this directory gets
            # this node and its reference is filled in below.
            ctx.cache_by_path[real_dir] = dependency

            dependencies, optional_dependencies = self._resolve_children(
                ctx, real_dir, manifest.dependencies, manifest.optional_dependencies
            )
            dependency.dependencies = _non_empty(dependencies)
            dependency.optional_dependencies = _non_empty(optional_dependencies)
            dependency.reference = ctx.references.allocate(
                dependency.name, manifest.version, real_dir
            )
            return dependency
        finally:
            ctx.processing_paths.discard(real_dir)
