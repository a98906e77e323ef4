"""Inputs and intermediate results of the discovery pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .package_manager import PackageManager


@dataclass(frozen=True)
class SearchContext:
    """Where to start looking and the working root that bounds the first search."""

    start_path: Path
    working_root: Path

    @property
    def start_dir(self) -> Path:
        if self.start_path.is_file():
            return self.start_path.parent
        return self.start_path

    @classmethod
    def from_path(
        cls, start_path: Path | str, working_root: Path | str | None = None
    ) -> SearchContext:
        """Build a context; a relative ``start_path`` is joined to ``working_root``."""
        root = Path(working_root) if working_root is not None else Path.cwd()
        root = root.resolve()
        start = Path(start_path)
        if not start.is_absolute():
            start = root / start
        return cls(start_path=start.resolve(), working_root=root)


@dataclass(frozen=True)
class ProjectResolution:
    """The accepted manifest and the manager chosen for it.

    ``candidates`` is the order the manager lookup walked, with the accepted
    manifest promoted to the front.
    """

    package_file: Path | None
    manager: PackageManager
    candidates: tuple[Path, ...] = ()

    @property
    def found(self) -> bool:
        return self.package_file is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "packageFile": str(self.package_file) if self.package_file else None,
            "manager": self.manager.value,
            "candidates": [str(p) for p in self.candidates],
        }


@dataclass(frozen=True)
class ConditionResult:
    """Outcome of checking whether tasks can be offered for a path."""

    ok: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.ok
