from pathlib import Path

import pytest

from cargo_pack import UnknownPackage, WorkspaceDiscoveryError
from cargo_pack.testing import write_manifest, write_package
from cargo_pack.workspace import Package, Workspace, find_root_manifest_for_wd


def _names(workspace: Workspace) -> list[str]:
    return [member.name for member in workspace.members]


def test_find_root_manifest_walks_up(tmp_path: Path) -> None:
    manifest = write_package(tmp_path / "crate", "crate")
    nested = tmp_path / "crate" / "src" / "bin"
    nested.mkdir(parents=True)

    assert find_root_manifest_for_wd(nested) == manifest.resolve()


def test_find_root_manifest_prefers_nearest(tmp_path: Path) -> None:
    write_manifest(tmp_path, '[workspace]\nmembers = ["inner"]\n')
    inner = write_package(tmp_path / "inner", "inner")

    assert find_root_manifest_for_wd(tmp_path / "inner") == inner.resolve()


def test_find_root_manifest_missing(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceDiscoveryError, match="could not find `Cargo.toml`"):
        find_root_manifest_for_wd(tmp_path)


def test_single_package_is_its_own_workspace(tmp_path: Path) -> None:
    manifest = write_package(tmp_path, "solo", version="1.2.3")

    workspace = Workspace.load(manifest)

    assert workspace.root_manifest == manifest.resolve()
    assert workspace.root == tmp_path.resolve()
    assert workspace.members == (
        Package(name="solo", manifest_path=manifest.resolve(), version="1.2.3"),
    )
    assert workspace.current().name == "solo"
    assert workspace.current().root == tmp_path.resolve()


def test_virtual_workspace_members_from_globs(tmp_path: Path) -> None:
    write_manifest(
        tmp_path,
        """
        [workspace]
        members = ["crates/*", "tools/cli"]
        exclude = ["crates/scratch"]
        """,
    )
    write_package(tmp_path / "crates" / "alpha", "alpha")
    write_package(tmp_path / "crates" / "beta", "beta")
    write_package(tmp_path / "crates" / "scratch", "scratch")
    (tmp_path / "crates" / "notes.txt").write_text("not a crate")
    write_package(tmp_path / "tools" / "cli", "cli")

    workspace = Workspace.load(tmp_path / "Cargo.toml")

    assert _names(workspace) == ["alpha", "beta", "cli"]
    with pytest.raises(WorkspaceDiscoveryError, match="virtual manifest"):
        workspace.current()


def test_member_discovers_parent_workspace(tmp_path: Path) -> None:
    write_manifest(tmp_path, '[workspace]\nmembers = ["a", "b"]\n')
    write_package(tmp_path / "a", "a")
    b_manifest = write_package(tmp_path / "b", "b")

    workspace = Workspace.discover(tmp_path / "b")

    assert workspace.root_manifest == (tmp_path / "Cargo.toml").resolve()
    assert workspace.current_manifest == b_manifest.resolve()
    assert _names(workspace) == ["a", "b"]
    assert workspace.current().name == "b"
    assert workspace.resolve("a").name == "a"
    assert workspace.resolve(None).name == "b"


def test_root_package_is_a_member(tmp_path: Path) -> None:
    write_package(
        tmp_path,
        "root",
        """
        [workspace]
        members = ["sub"]
        """,
    )
    write_package(tmp_path / "sub", "sub")

    workspace = Workspace.load(tmp_path / "Cargo.toml")

    assert sorted(_names(workspace)) == ["root", "sub"]
    assert workspace.current().name == "root"


def test_excluded_package_is_its_own_workspace(tmp_path: Path) -> None:
    write_manifest(
        tmp_path,
        """
        [workspace]
        members = []
        exclude = ["vendor"]
        """,
    )
    vendored = write_package(tmp_path / "vendor" / "dep", "dep")

    workspace = Workspace.load(vendored)

    assert workspace.root_manifest == vendored.resolve()
    assert _names(workspace) == ["dep"]


def test_explicit_package_workspace_key(tmp_path: Path) -> None:
    write_manifest(tmp_path / "ws", '[workspace]\nmembers = ["../pkg"]\n')
    manifest = write_manifest(
        tmp_path / "pkg",
        """
        [package]
        name = "pkg"
        workspace = "../ws"
        """,
    )

    workspace = Workspace.load(manifest)

    assert workspace.root_manifest == (tmp_path / "ws" / "Cargo.toml").resolve()
    assert workspace.current().name == "pkg"


def test_package_outside_member_list_is_rejected(tmp_path: Path) -> None:
    write_manifest(tmp_path, '[workspace]\nmembers = ["a"]\n')
    write_package(tmp_path / "a", "a")
    stray = write_package(tmp_path / "stray", "stray")

    with pytest.raises(WorkspaceDiscoveryError, match="believes it's in a workspace"):
        Workspace.load(stray)


def test_member_without_manifest_is_rejected(tmp_path: Path) -> None:
    write_manifest(tmp_path, '[workspace]\nmembers = ["missing"]\n')

    with pytest.raises(WorkspaceDiscoveryError, match="failed to load manifest"):
        Workspace.load(tmp_path / "Cargo.toml")


def test_member_without_name_is_rejected(tmp_path: Path) -> None:
    write_manifest(tmp_path, '[workspace]\nmembers = ["a"]\n')
    write_manifest(tmp_path / "a", '[package]\nversion = "0.1.0"\n')

    with pytest.raises(WorkspaceDiscoveryError, match="package.name"):
        Workspace.load(tmp_path / "Cargo.toml")


def test_members_must_be_strings(tmp_path: Path) -> None:
    write_manifest(tmp_path, "[workspace]\nmembers = [1]\n")

    with pytest.raises(WorkspaceDiscoveryError, match="array of strings"):
        Workspace.load(tmp_path / "Cargo.toml")


def test_workspace_resolve_unknown(tmp_path: Path) -> None:
    manifest = write_package(tmp_path, "solo")

    with pytest.raises(UnknownPackage):
        Workspace.load(manifest).resolve("other")
