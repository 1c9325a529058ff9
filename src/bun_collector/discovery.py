"""Package manager and lockfile discovery utilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


@dataclass(slots=True, frozen=True)
class InstallOptions:
    """Identify the package manager and lockfile a collector works with."""

    manager: PackageManager
    lockfile: str

    def to_dict(self) -> dict[str, str]:
        return {"manager": self.manager.value, "lockfile": self.lockfile}


# Checked in this order; the first lockfile present wins.
LOCKFILES: dict[str, PackageManager] = {
    "bun.lock": PackageManager.BUN,
    "bun.lockb": PackageManager.BUN,
    "pnpm-lock.yaml": PackageManager.PNPM,
    "yarn.lock": PackageManager.YARN,
    "package-lock.json": PackageManager.NPM,
    "npm-shrinkwrap.json": PackageManager.NPM,
}


def discover_lockfiles(root: Path) -> list[Path]:
    """Return the known lockfiles present directly in ``root``."""
    root = Path(root).resolve()
    return [root / name for name in LOCKFILES if (root / name).is_file()]


def detect_package_manager(root: Path) -> PackageManager | None:
    """Guess which package manager installed ``root`` from its lockfile."""
    found = discover_lockfiles(root)
    if not found:
        return None
    return LOCKFILES[found[0].name]
