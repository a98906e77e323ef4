"""Parse pnpm-workspace.yaml to capture workspace package entries."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger

logger = get_logger(__name__)

PNPM_WORKSPACE_FILE = "pnpm-workspace.yaml"


def load_workspaces(directory: Path) -> tuple[str, ...]:
    """Return the ``packages`` entries of ``directory``/pnpm-workspace.yaml.

    A missing or malformed file yields an empty tuple. Exclusion patterns
    (entries starting with ``!``) are dropped.
    """
    import yaml

    path = directory / PNPM_WORKSPACE_FILE
    if not path.is_file():
        return ()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.debug("Skipping %s: %s", path, exc)
        return ()

    if not isinstance(data, dict):
        return ()
    packages = data.get("packages") or []
    if not isinstance(packages, list):
        return ()

    return tuple(
        str(entry) for entry in packages if isinstance(entry, str) and not entry.startswith("!")
    )
