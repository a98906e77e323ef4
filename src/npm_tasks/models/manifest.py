"""Parsed package.json model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from collections.abc import Mapping
from typing import Any


@dataclass(frozen=True)
class ManifestDescriptor:
    """The parts of a package.json that task discovery cares about.

    ``scripts`` keeps the declaration order of the manifest as pairs of
    (name, command).
    """

    path: Path
    scripts: tuple[tuple[str, str], ...] = ()
    workspaces: tuple[str, ...] = ()

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def script_names(self) -> list[str]:
        return [name for name, _ in self.scripts]

    @property
    def is_project_root(self) -> bool:
        """A manifest without scripts or workspaces is treated as a nested marker."""
        return bool(self.scripts) or bool(self.workspaces)

    @classmethod
    def from_mapping(cls, path: Path, data: Mapping[str, Any]) -> ManifestDescriptor:
        scripts = data.get("scripts") or {}
        workspaces = data.get("workspaces") or []
        # yarn also accepts {"packages": [...], "nohoist": [...]}
        if isinstance(workspaces, Mapping):
            workspaces = workspaces.get("packages") or []
        return cls(
            path=path,
            scripts=tuple((str(name), str(command)) for name, command in scripts.items()),
            workspaces=tuple(str(entry) for entry in workspaces),
        )
