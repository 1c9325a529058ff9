"""Stable references for installed package directories."""

from __future__ import annotations

from hashlib import sha1
from pathlib import Path

from .models import DEFAULT_VERSION

DIGEST_LENGTH = 8


def path_digest(real_path: Path | str) -> str:
    """Return the short hex digest used to disambiguate colliding installs."""
    return sha1(str(real_path).encode("utf-8")).hexdigest()[:DIGEST_LENGTH]


class ReferenceAllocator:
    """Assign one reference per real installation path.

    The first path seen for a ``name@version`` pair gets the bare version as
    its reference. Any other path claiming the same pair (nested copies in a
    non-deduplicated install) gets ``<version>+<digest of path>``.
    """

    def __init__(self) -> None:
        self.reference_by_path: dict[str, str] = {}
        self.path_by_name_version: dict[str, str] = {}

    def allocate(self, name: str, version: str | None, real_path: Path | str) -> str:
        path_key = str(real_path)
        cached = self.reference_by_path.get(path_key)
        if cached:
            return cached

        normalized_version = version or DEFAULT_VERSION
        key = f"{name}@{normalized_version}"
        existing_path = self.path_by_name_version.get(key)

        if existing_path is None:
            self.path_by_name_version[key] = path_key
            self.reference_by_path[path_key] = normalized_version
            return normalized_version

        if existing_path == path_key:
            self.reference_by_path[path_key] = normalized_version
            return normalized_version

        reference = f"{normalized_version}+{path_digest(path_key)}"
        self.reference_by_path[path_key] = reference
        return reference
