"""Turn a resolved manifest into the ordered list of runnable tasks."""

from __future__ import annotations

from pathlib import Path
from collections.abc import Iterable, Sequence

from .config import DEFAULT_MANIFEST_NAME
from .logging import get_logger
from .models import ManifestDescriptor, PackageManager, TaskDescriptor
from .parsers.package_json import load as load_manifest

logger = get_logger(__name__)


def _script_tasks(
    manifest: ManifestDescriptor, manager: PackageManager, label: str
) -> Iterable[TaskDescriptor]:
    for script in manifest.script_names:
        yield TaskDescriptor(
            name=f"{label} {script}",
            command=manager.value,
            args=("run", script),
            cwd=manifest.directory,
        )


def _load_workspace(
    root_dir: Path, workspace: str, manifest_name: str
) -> ManifestDescriptor | None:
    manifest = load_manifest(root_dir / workspace / manifest_name)
    if manifest is None or not manifest.scripts:
        logger.debug("Workspace %s has no usable scripts, skipping", workspace)
        return None
    return manifest


def enumerate_tasks(
    manifest: ManifestDescriptor,
    manager: PackageManager,
    workspaces: Sequence[str] | None = None,
    manifest_name: str = DEFAULT_MANIFEST_NAME,
) -> list[TaskDescriptor]:
    """Build tasks for the root scripts, then each workspace, then a bare manager task.

    ``workspaces`` overrides the entries declared in the manifest.
    """
    tasks = list(_script_tasks(manifest, manager, manager.value))

    entries = manifest.workspaces if workspaces is None else tuple(workspaces)
    for workspace in entries:
        workspace_manifest = _load_workspace(manifest.directory, workspace, manifest_name)
        if workspace_manifest is None:
            continue
        tasks.extend(_script_tasks(workspace_manifest, manager, f"{manager.value}[{workspace}]"))

    tasks.append(TaskDescriptor(name=manager.value, command=manager.value))
    return tasks


def build_invocation(task: TaskDescriptor, default_cwd: Path | None = None) -> dict[str, object]:
    """Return the ``cmd``/``args``/``cwd`` triple an executor needs to spawn ``task``."""
    cwd = task.cwd if task.cwd is not None else default_cwd
    return {
        "cmd": [task.command],
        "args": list(task.args),
        "cwd": str(cwd) if cwd is not None else None,
    }
