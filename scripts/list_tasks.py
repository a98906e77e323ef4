#!/usr/bin/env python3
"""Local entrypoint to list package.json tasks without installing the console script.

Usage:
  python scripts/list_tasks.py --path src/index.ts [--cwd .] [--format markdown]

This calls the same cli.main used by the ``npm-tasks`` console script.
"""

from __future__ import annotations

from npm_tasks.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
