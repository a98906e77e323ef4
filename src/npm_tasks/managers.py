"""Package manager inference from lockfile presence."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Sequence

from .logging import get_logger
from .models import MANAGER_LOCKFILES, PackageManager

logger = get_logger(__name__)

__all__ = [
    "MANAGER_LOCKFILES",
    "PackageManager",
    "promote",
    "resolve_for_directory",
    "resolve_from_candidates",
]


def resolve_for_directory(directory: Path) -> PackageManager | None:
    """Return the manager whose lockfile sits directly inside ``directory``.

    If lockfiles of several managers are present, the first in
    ``MANAGER_LOCKFILES`` order wins.
    """
    for manager, lockfiles in MANAGER_LOCKFILES.items():
        if any((directory / lockfile).is_file() for lockfile in lockfiles):
            return manager
    return None


def resolve_from_candidates(
    candidates: Sequence[Path],
    default: PackageManager = PackageManager.NPM,
) -> PackageManager:
    """Return the manager for the first candidate manifest whose directory has a lockfile."""
    for candidate in candidates:
        manager = resolve_for_directory(candidate.parent)
        if manager is not None:
            logger.debug("Using %s from lockfile beside %s", manager.value, candidate)
            return manager
    logger.debug("No lockfile found, defaulting to %s", default.value)
    return default


def promote(candidates: Sequence[Path], index: int) -> list[Path]:
    """Move ``candidates[index]`` to the front, keeping the others in order."""
    ordered = list(candidates)
    accepted = ordered.pop(index)
    ordered.insert(0, accepted)
    return ordered
