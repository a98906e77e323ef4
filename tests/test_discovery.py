from __future__ import annotations

from pathlib import Path

from npm_tasks.discovery import find_upward, locate_candidates, select_root


def test_find_upward_collects_nearest_first(workspace, write_manifest):
    outer = write_manifest(workspace / "app", scripts={"dev": "vite"})
    inner = write_manifest(workspace / "app" / "src" / "lib", name="lib")
    found = find_upward("package.json", workspace / "app" / "src" / "lib" / "deep")
    assert found[:2] == [inner, outer]


def test_find_upward_stops_before_stop_dir(workspace, write_manifest):
    write_manifest(workspace, scripts={"x": "y"})
    inner = write_manifest(workspace / "a", scripts={"x": "y"})
    assert find_upward("package.json", workspace / "a", stop=workspace) == [inner]


def test_find_upward_limit(workspace, write_manifest):
    inner = write_manifest(workspace / "a" / "b", name="b")
    write_manifest(workspace / "a", name="a")
    assert find_upward("package.json", workspace / "a" / "b", limit=1) == [inner]


def test_find_upward_from_file_starts_at_parent(workspace, write_manifest, touch):
    manifest = write_manifest(workspace / "app", scripts={"dev": "vite"})
    source = touch(workspace / "app" / "index.ts")
    assert find_upward("package.json", source, stop=workspace) == [manifest]


def test_locate_includes_working_root(workspace, write_manifest, touch):
    root = write_manifest(workspace / "repo", scripts={"build": "tsc"})
    marker = write_manifest(workspace / "repo" / "src" / "components", name="components")
    source = touch(workspace / "repo" / "src" / "components" / "Button.tsx")
    write_manifest(workspace, name="above-working-root")

    candidates = locate_candidates(source, workspace / "repo")

    assert candidates == [marker, root]


def test_locate_falls_back_above_working_root(workspace, write_manifest, touch):
    root = write_manifest(workspace / "repo", scripts={"build": "tsc"})
    write_manifest(workspace, name="outer")
    source = touch(workspace / "repo" / "sub" / "src" / "main.ts")

    candidates = locate_candidates(source, workspace / "repo" / "sub")

    assert candidates == [root]


def test_locate_start_outside_working_root(workspace, write_manifest, touch):
    other = write_manifest(workspace / "other", scripts={"start": "node ."})
    (workspace / "repo").mkdir()
    source = touch(workspace / "other" / "lib" / "x.js")

    assert locate_candidates(source, workspace / "repo")[0] == other


def test_locate_custom_manifest_name(workspace, touch):
    manifest = touch(workspace / "app" / "manifest.json")
    assert locate_candidates(workspace / "app", workspace, manifest_name="manifest.json") == [
        manifest
    ]


def test_select_root_skips_markers(workspace, write_manifest):
    marker = write_manifest(workspace / "a" / "b", name="marker")
    root = write_manifest(workspace / "a", scripts={"build": "tsc"})

    manifest, index = select_root([marker, root])

    assert index == 1
    assert manifest is not None and manifest.path == root


def test_select_root_skips_unparsable(workspace, write_manifest):
    broken = workspace / "a" / "b" / "package.json"
    broken.parent.mkdir(parents=True)
    broken.write_text("{not json", encoding="utf-8")
    root = write_manifest(workspace / "a", workspaces=["packages/*"])

    manifest, index = select_root([broken, root])

    assert index == 1
    assert manifest.workspaces == ("packages/*",)


def test_select_root_none_qualify(workspace, write_manifest):
    marker = write_manifest(workspace, name="x", scripts={}, workspaces=[])
    assert select_root([marker, workspace / "missing" / "package.json"]) == (None, None)
    assert select_root([]) == (None, None)


def test_select_root_skips_non_utf8(workspace, write_manifest):
    broken = workspace / "a" / "b" / "package.json"
    broken.parent.mkdir(parents=True)
    broken.write_bytes(b'{"name": "\xff"}')
    root = write_manifest(workspace / "a", scripts={"build": "tsc"})

    manifest, index = select_root([broken, root])

    assert index == 1
    assert manifest.path == root


def test_locate_with_filesystem_root_as_working_root(workspace, monkeypatch):
    import npm_tasks.discovery as discovery

    calls = []

    def fake_find_upward(name, start, stop=None, limit=None):
        calls.append((start, stop, limit))
        return [Path("/package.json")]

    monkeypatch.setattr(discovery, "find_upward", fake_find_upward)

    assert locate_candidates(workspace, Path("/")) == [Path("/package.json")]
    assert calls == [(workspace, None, None)]
