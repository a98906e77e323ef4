"""Package manager identifiers and the lockfiles that reveal them."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from collections.abc import Mapping


class PackageManager(str, Enum):
    """Package managers that can run package.json scripts."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value


# Iteration order is the tie-break when a directory holds several lockfiles.
MANAGER_LOCKFILES: Mapping[PackageManager, tuple[str, ...]] = MappingProxyType(
    {
        PackageManager.NPM: ("package-lock.json",),
        PackageManager.PNPM: ("pnpm-lock.yaml",),
        PackageManager.YARN: ("yarn.lock",),
        PackageManager.BUN: ("bun.lockb", "bun.lock"),
    }
)
