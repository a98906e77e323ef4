"""Human-readable Markdown rendering of a task report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with the resolved project and a table of tasks."""
    totals = report.get("totals", {})
    tasks = report.get("tasks", [])

    lines = []
    lines.append("# npm-tasks Summary")
    lines.append("")
    lines.append(
        f"Manifest: {report.get('packageFile') or '(none)'} | Manager: {report.get('manager', '')}"
    )
    lines.append(
        f"Tasks: {totals.get('tasks', 0)} | Scripts: {totals.get('scripts', 0)}"
        f" | Workspace tasks: {totals.get('workspaceTasks', 0)}"
    )
    lines.append("")
    lines.append("| Task | Command | Directory |")
    lines.append("| --- | --- | --- |")

    for task in tasks:
        command = " ".join([*(task.get("cmd") or []), *(task.get("args") or [])])
        cwd = task.get("cwd") or "(caller)"
        lines.append(f"| {task.get('name', '')} | `{command}` | {cwd} |")

    if not tasks:
        lines.append("| (no tasks found) | n/a | n/a |")

    return "\n".join(lines) + "\n"
