"""npm-tasks core package.

This package discovers runnable package.json scripts for a project and infers
the package manager that should run them. It is callable from the bundled CLI
and from any host that wants the task list as structured data.
"""

__all__ = [
    "core",
]
