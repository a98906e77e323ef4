"""Manifest discovery: upward search for candidate manifests and root selection."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Sequence

from .config import DEFAULT_MANIFEST_NAME
from .logging import get_logger
from .models import ManifestDescriptor
from .parsers.package_json import load as load_manifest

logger = get_logger(__name__)


def _parents_from(start: Path) -> list[Path]:
    start = start.resolve()
    if start.is_file():
        start = start.parent
    return [start, *start.parents]


def find_upward(
    name: str,
    start: Path,
    stop: Path | None = None,
    limit: int | None = None,
) -> list[Path]:
    """Collect ``<dir>/<name>`` files from ``start`` toward the filesystem root.

    The walk ends before visiting ``stop``. If ``stop`` is not an ancestor of
    ``start`` the walk runs to the filesystem root.
    """
    stop = stop.resolve() if stop is not None else None
    found: list[Path] = []
    for directory in _parents_from(start):
        if stop is not None and directory == stop:
            break
        candidate = directory / name
        if candidate.is_file():
            found.append(candidate)
            if limit is not None and len(found) >= limit:
                break
    return found


def locate_candidates(
    start_path: Path,
    working_root: Path,
    manifest_name: str = DEFAULT_MANIFEST_NAME,
) -> list[Path]:
    """Find candidate manifests for ``start_path``, nearest first.

    Every manifest between the start directory and ``working_root`` is
    collected, since the closest one may only be a nested package marker.
    When none is found, fall back to the single nearest manifest above
    ``working_root``.
    """
    working_root = working_root.resolve()
    # the filesystem root is its own parent and has nothing above it to stop at
    stop = working_root.parent if working_root.parent != working_root else None
    matches = find_upward(manifest_name, start_path, stop=stop)
    if matches:
        logger.debug("Found %d candidate manifest(s) below %s", len(matches), working_root)
        return matches

    fallback = find_upward(manifest_name, working_root, limit=1)
    logger.debug("No manifest up to %s, fallback search found %d", working_root, len(fallback))
    return fallback


def select_root(
    candidates: Sequence[Path],
) -> tuple[ManifestDescriptor | None, int | None]:
    """Return the first candidate that looks like a project root and its index."""
    for index, candidate in enumerate(candidates):
        manifest = load_manifest(candidate)
        if manifest is not None and manifest.is_project_root:
            logger.debug("Accepted %s as project manifest", candidate)
            return manifest, index
    return None, None
