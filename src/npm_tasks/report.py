"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any
from collections.abc import Sequence

from .models import ProjectResolution, TaskDescriptor


def aggregate(
    resolution: ProjectResolution, tasks: Sequence[TaskDescriptor]
) -> dict[str, Any]:
    """Combine a project resolution and its tasks into a single JSON-friendly report.

    Workspace tasks are those whose name carries a ``[workspace]`` label; the
    trailing bare manager task counts towards neither scripts nor workspaces.
    """
    manager = resolution.manager.value
    workspace_tasks = sum(1 for t in tasks if t.name.startswith(f"{manager}["))
    script_tasks = sum(1 for t in tasks if t.name.startswith(f"{manager} "))

    report: dict[str, Any] = {
        **resolution.to_dict(),
        "tasks": [task.to_dict() for task in tasks],
        "totals": {
            "tasks": len(tasks),
            "scripts": script_tasks,
            "workspaceTasks": workspace_tasks,
        },
    }

    return report
