"""Bun node_modules collector.

Rebuilds the installed dependency graph of a Bun project from its
``node_modules`` directories and derives the production-only subgraph used
when packaging an application.
"""

from .base import CollectionResult, CollectorError, UnsupportedOperationError
from .collector import BunNodeModulesCollector
from .core import collect_node_modules

__all__ = [
    "BunNodeModulesCollector",
    "CollectionResult",
    "CollectorError",
    "UnsupportedOperationError",
    "collect_node_modules",
]
