"""Task descriptor model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TaskDescriptor:
    """A runnable task: the manager binary, its arguments and where to run it.

    ``cwd`` is ``None`` for tasks that run in the caller's own directory.
    """

    name: str
    command: str
    args: tuple[str, ...] = ()
    cwd: Path | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Task name must be non-empty")
        if not self.command:
            raise ValueError("Task command must be non-empty")

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "cmd": [self.command],
            "args": list(self.args),
            "cwd": str(self.cwd) if self.cwd is not None else None,
        }
