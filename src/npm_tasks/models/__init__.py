"""Data models for task discovery."""

from __future__ import annotations

from .manifest import ManifestDescriptor
from .package_manager import MANAGER_LOCKFILES, PackageManager
from .resolution import ConditionResult, ProjectResolution, SearchContext
from .task_descriptor import TaskDescriptor

__all__ = [
    "ConditionResult",
    "MANAGER_LOCKFILES",
    "ManifestDescriptor",
    "PackageManager",
    "ProjectResolution",
    "SearchContext",
    "TaskDescriptor",
]
