"""Data models for the node_modules collector."""

from __future__ import annotations

from .dependency_node import DEFAULT_VERSION, DependencyNode, dependency_id

__all__ = [
    "DEFAULT_VERSION",
    "DependencyNode",
    "dependency_id",
]
