"""Core collection entrypoint.

This module has no CLI concerns so it can be called from scripts and from a
packaging pipeline alike.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .collector import BunNodeModulesCollector
from .config import Settings
from .discovery import detect_package_manager
from .report import aggregate

logger = logging.getLogger(__name__)


def collect_node_modules(root: Path, settings: Settings | None = None) -> dict[str, Any]:
    """Collect the installed dependency graph under ``root``.

    Params:
        root: project directory containing package.json and node_modules
        settings: optional collector settings; defaults are used when None

    Returns: dict report (see ``report.aggregate``)

    Raises ``ManifestError`` when any reachable manifest cannot be read.
    """
    root = Path(root).resolve()
    collector = BunNodeModulesCollector(root, settings)

    expected = collector.install_options
    detected = detect_package_manager(root)
    if detected is None:
        logger.info("No lockfile found in %s; reading node_modules as-is", root)
    elif detected is not expected.manager:
        logger.warning(
            "%s looks like a %s project, expected %s (%s)",
            root,
            detected.value,
            expected.manager.value,
            expected.lockfile,
        )

    return aggregate(collector.collect())
