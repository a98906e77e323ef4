from __future__ import annotations

import pytest

from npm_tasks.parsers.package_json import ManifestError, load, parse
from npm_tasks.parsers.pnpm_workspace import load_workspaces


def test_parse_keeps_script_order(workspace, write_manifest):
    path = write_manifest(workspace, scripts={"z": "1", "a": "2", "m": "3"})
    manifest = parse(path)
    assert manifest.script_names == ["z", "a", "m"]
    assert manifest.scripts[0] == ("z", "1")
    assert manifest.directory == workspace


def test_parse_absent_fields_are_empty(workspace, write_manifest):
    manifest = parse(write_manifest(workspace, name="marker"))
    assert manifest.scripts == ()
    assert manifest.workspaces == ()
    assert not manifest.is_project_root


def test_parse_yarn_object_workspaces(workspace, write_manifest):
    path = write_manifest(workspace, workspaces={"packages": ["a", "b"], "nohoist": ["**/x"]})
    manifest = parse(path)
    assert manifest.workspaces == ("a", "b")
    assert manifest.is_project_root


def test_parse_invalid_json(workspace):
    path = workspace / "package.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ManifestError, match="invalid JSON"):
        parse(path)


def test_parse_rejects_malformed_scripts(workspace, write_manifest):
    path = write_manifest(workspace, scripts=["build"])
    with pytest.raises(ManifestError, match="scripts"):
        parse(path)


def test_load_returns_none_on_failure(workspace, write_manifest):
    assert load(workspace / "package.json") is None
    path = write_manifest(workspace, workspaces="packages/*")
    assert load(path) is None


def test_pnpm_workspace_file(workspace):
    (workspace / "pnpm-workspace.yaml").write_text(
        "packages:\n  - 'packages/a'\n  - 'apps/web'\n  - '!**/test/**'\n",
        encoding="utf-8",
    )
    assert load_workspaces(workspace) == ("packages/a", "apps/web")


def test_pnpm_workspace_file_missing_or_malformed(workspace):
    assert load_workspaces(workspace) == ()
    (workspace / "pnpm-workspace.yaml").write_text("packages: [unclosed", encoding="utf-8")
    assert load_workspaces(workspace) == ()
    (workspace / "pnpm-workspace.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_workspaces(workspace) == ()


def test_parse_non_utf8(workspace):
    path = workspace / "package.json"
    path.write_bytes(b'{"name": "\xff"}')
    with pytest.raises(ManifestError, match="not UTF-8"):
        parse(path)
    assert load(path) is None


def test_pnpm_workspace_file_non_utf8(workspace):
    (workspace / "pnpm-workspace.yaml").write_bytes(b"packages:\n  - '\xff'\n")
    assert load_workspaces(workspace) == ()
