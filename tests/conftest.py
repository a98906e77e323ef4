from __future__ import annotations

import json
from pathlib import Path

import pytest


def _write_manifest(directory: Path, **fields) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    path.write_text(json.dumps(fields), encoding="utf-8")
    return path


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def write_manifest():
    return _write_manifest


@pytest.fixture
def touch():
    return _touch


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    return tmp_path.resolve()


@pytest.fixture
def repo(workspace: Path) -> Path:
    """Root scripts, one workspace member and a pnpm lockfile."""
    root = workspace / "repo"
    _write_manifest(
        root,
        name="repo",
        scripts={"build": "tsc -b", "test": "vitest"},
        workspaces=["packages/a"],
    )
    _touch(root / "pnpm-lock.yaml")
    _write_manifest(root / "packages" / "a", name="a", scripts={"lint": "eslint ."})
    return root
