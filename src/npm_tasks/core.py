"""Core discovery entrypoints.

This module MUST NOT spawn processes or cache results so it can be used by the
CLI and by hosts that run and memoise tasks themselves.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from collections.abc import Callable

from .config import Settings
from .discovery import locate_candidates, select_root
from .logging import get_logger
from .managers import promote, resolve_from_candidates
from .models import (
    ConditionResult,
    ManifestDescriptor,
    PackageManager,
    ProjectResolution,
    SearchContext,
    TaskDescriptor,
)
from .parsers.package_json import load as load_manifest
from .parsers.pnpm_workspace import load_workspaces
from .tasks import enumerate_tasks

logger = get_logger(__name__)

ExecutablePredicate = Callable[[str], object]


def _resolve(
    context: SearchContext, settings: Settings
) -> tuple[ManifestDescriptor | None, ProjectResolution]:
    candidates = locate_candidates(
        context.start_dir, context.working_root, manifest_name=settings.manifest_name
    )
    manifest, index = select_root(candidates)
    if manifest is None or index is None:
        return None, ProjectResolution(
            package_file=None,
            manager=settings.default_manager,
            candidates=tuple(candidates),
        )

    ordered = promote(candidates, index)
    manager = resolve_from_candidates(ordered, default=settings.default_manager)
    return manifest, ProjectResolution(
        package_file=manifest.path,
        manager=manager,
        candidates=tuple(ordered),
    )


def resolve_project(
    start_path: Path | str,
    working_root: Path | str | None = None,
    settings: Settings | None = None,
) -> ProjectResolution:
    """Find the project manifest for ``start_path`` and the manager that runs it.

    Params:
        start_path: file or directory the search starts from; a relative
            path is taken relative to ``working_root``, not the process cwd
        working_root: bound for the first search phase; defaults to the
            process working directory
        settings: discovery settings; defaults to built-in settings
    """
    settings = settings or Settings()
    context = SearchContext.from_path(start_path, working_root)
    _, resolution = _resolve(context, settings)
    return resolution


def _workspace_entries(
    manifest: ManifestDescriptor, manager: PackageManager, settings: Settings
) -> tuple[str, ...]:
    if manifest.workspaces or manager is not PackageManager.PNPM:
        return manifest.workspaces
    if not settings.pnpm_workspace_file:
        return manifest.workspaces
    return load_workspaces(manifest.directory)


def discover_tasks(
    start_path: Path | str,
    working_root: Path | str | None = None,
    settings: Settings | None = None,
) -> list[TaskDescriptor]:
    """Return every task for the project containing ``start_path``.

    No project manifest yields an empty list.
    """
    settings = settings or Settings()
    context = SearchContext.from_path(start_path, working_root)
    manifest, resolution = _resolve(context, settings)
    if manifest is None:
        logger.debug("No project manifest found for %s", context.start_path)
        return []

    # Reload so the task list reflects the file as it is now.
    manifest = load_manifest(manifest.path)
    if manifest is None:
        return []

    workspaces = _workspace_entries(manifest, resolution.manager, settings)
    tasks = enumerate_tasks(
        manifest,
        resolution.manager,
        workspaces=workspaces,
        manifest_name=settings.manifest_name,
    )
    logger.debug("Discovered %d task(s) in %s", len(tasks), manifest.path)
    return tasks


def generate_tasks(
    start_path: Path | str,
    callback: Callable[[list[TaskDescriptor]], None],
    working_root: Path | str | None = None,
    settings: Settings | None = None,
) -> None:
    """Discover tasks and hand the complete list to ``callback`` once."""
    callback(discover_tasks(start_path, working_root=working_root, settings=settings))


def cache_key(
    start_path: Path | str,
    working_root: Path | str | None = None,
    settings: Settings | None = None,
) -> Path | None:
    """Return the accepted manifest path, usable to memoise the task list."""
    return resolve_project(start_path, working_root=working_root, settings=settings).package_file


def check_condition(
    start_path: Path | str,
    working_root: Path | str | None = None,
    settings: Settings | None = None,
    is_executable: ExecutablePredicate | None = None,
) -> ConditionResult:
    """Report whether tasks can be offered: a manifest exists and its manager is runnable.

    ``is_executable`` defaults to :func:`shutil.which`.
    """
    settings = settings or Settings()
    is_executable = is_executable or shutil.which
    resolution = resolve_project(start_path, working_root=working_root, settings=settings)
    if not resolution.found:
        return ConditionResult(ok=False, reason=f"No {settings.manifest_name} file found")
    if not is_executable(resolution.manager.value):
        return ConditionResult(
            ok=False, reason=f"Could not find command '{resolution.manager.value}'"
        )
    return ConditionResult(ok=True)
