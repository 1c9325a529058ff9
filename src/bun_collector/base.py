"""Base framework shared by node_modules collectors.

A collector builds one dependency tree rooted at the project directory and
derives two views from it: the transitive map of every distinct installed
package, and the production graph of manifest-declared edges.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from .config import Settings
from .discovery import InstallOptions
from .models import DependencyNode, dependency_id

logger = logging.getLogger(__name__)


class CollectorError(RuntimeError):
    """Base error for failures that abort a collection run."""


class UnsupportedOperationError(CollectorError):
    """Raised when a collector is asked for something its package manager cannot do."""


@dataclass(slots=True)
class CollectionResult:
    """Everything produced by one ``collect()`` run."""

    tree: DependencyNode
    root_id: str
    all_dependencies: dict[str, DependencyNode]
    production_graph: dict[str, list[str]]

    def production_dependencies(self) -> list[DependencyNode]:
        """Return the packages reachable from the root through production edges.

        The root itself is excluded. Each package appears once, in the order it
        is first reached.
        """
        ordered: list[DependencyNode] = []
        seen = {self.root_id}
        stack = list(reversed(self.production_graph.get(self.root_id, [])))
        while stack:
            dep_id = stack.pop()
            if dep_id in seen:
                continue
            seen.add(dep_id)
            node = self.all_dependencies.get(dep_id)
            if node is None:
                continue
            ordered.append(node)
            stack.extend(reversed(self.production_graph.get(dep_id, [])))
        return ordered


class NodeModulesCollector(ABC):
    """Template for collectors that read an installed ``node_modules`` tree."""

    def __init__(self, root_dir: Path | str, settings: Settings | None = None) -> None:
        self.root_dir = Path(root_dir).resolve()
        self.settings = settings or Settings()
        self.all_dependencies: dict[str, DependencyNode] = {}
        self.production_graph: dict[str, list[str]] = {}

    @property
    @abstractmethod
    def install_options(self) -> InstallOptions:
        """Package manager and lockfile this collector handles."""

    @abstractmethod
    def get_args(self) -> list[str]:
        """Arguments for a package-manager listing command, if one is used."""

    @abstractmethod
    def get_dependencies_tree(self) -> DependencyNode:
        """Build the resolved dependency tree rooted at ``root_dir``."""

    @abstractmethod
    def collect_all_dependencies(self, tree: DependencyNode) -> None:
        """Populate ``all_dependencies`` from ``tree``."""

    @abstractmethod
    def extract_production_dependency_graph(
        self, tree: DependencyNode, dependency_id: str
    ) -> None:
        """Populate ``production_graph`` starting at ``tree``."""

    @abstractmethod
    def parse_dependencies_tree(self, blob: str) -> DependencyNode:
        """Parse a dependency tree emitted by the package manager."""

    def collect(self) -> CollectionResult:
        """Run a full collection and return its results."""
        self.all_dependencies = {}
        self.production_graph = {}

        manager = self.install_options.manager.value
        logger.info("Collecting %s dependencies under %s", manager, self.root_dir)

        tree = self.get_dependencies_tree()
        root_id = dependency_id(tree)
        self.collect_all_dependencies(tree)
        self.extract_production_dependency_graph(tree, root_id)

        logger.info(
            "Collected %d installed packages (%d graph entries) for %s",
            len(self.all_dependencies),
            len(self.production_graph),
            root_id,
        )
        return CollectionResult(
            tree=tree,
            root_id=root_id,
            all_dependencies=self.all_dependencies,
            production_graph=self.production_graph,
        )
