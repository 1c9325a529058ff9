"""Locate installed packages through the node_modules hoisting chain."""

from __future__ import annotations

from pathlib import Path


MODULES_DIR = "node_modules"


def find_installed_dependency(
    start_dir: Path,
    name: str,
    root_dir: Path,
    modules_dir: str = MODULES_DIR,
) -> Path | None:
    """Return the directory ``name`` is installed in as seen from ``start_dir``.

    Looks for ``<dir>/node_modules/<name>`` at ``start_dir`` and then at each
    ancestor up to and including ``root_dir``. A final lookup directly under
    the resolved root covers requesters that live outside the root's ancestor
    chain (symlinked workspace packages). Returns None when nothing is
    installed; callers decide whether that matters.
    """
    resolved_root = Path(root_dir).resolve()
    current = Path(start_dir)

    while True:
        candidate = current / modules_dir / name
        if candidate.exists():
            return candidate
        if current.resolve() == resolved_root:
            break
        parent = current.parent
        if parent == current:
            break
        current = parent

    root_candidate = resolved_root / modules_dir / name
    if root_candidate.exists():
        return root_candidate

    return None
