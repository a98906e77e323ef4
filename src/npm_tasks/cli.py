"""List the package.json tasks available for a path."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import check_condition, discover_tasks, resolve_project
from .logging import configure_logging
from .report import aggregate
from .summary import render_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="npm-tasks", description=__doc__)
    parser.add_argument(
        "--path",
        type=Path,
        default=Path("."),
        help="File or directory to start the manifest search from",
    )
    parser.add_argument(
        "--cwd",
        type=Path,
        default=None,
        help="Working root bounding the first search phase (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON settings file (default: $NPM_TASKS_CONFIG)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check that a manifest exists and its package manager is installed",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()
    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if args.check:
        result = check_condition(args.path, working_root=args.cwd, settings=settings)
        if not result:
            print(f"ERROR: {result.reason}", file=sys.stderr)
            return 1
        print("OK")
        return 0

    resolution = resolve_project(args.path, working_root=args.cwd, settings=settings)
    tasks = discover_tasks(args.path, working_root=args.cwd, settings=settings)
    report = aggregate(resolution, tasks)

    if args.format == "markdown":
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))

    return 0 if resolution.found else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
