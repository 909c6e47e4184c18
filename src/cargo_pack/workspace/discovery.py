"""Cargo workspace discovery.

Finds the manifest for a working directory, the workspace root that manifest
belongs to, and the packages that make up the workspace.
"""

from __future__ import annotations

import glob
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..config import MANIFEST_NAME
from ..errors import WorkspaceDiscoveryError
from ..manifest import load_manifest
from ..runtime.logging import get_logger
from ..tree.paths import TomlValue
from .resolve import resolve_package

_GLOB_CHARS = frozenset("*?[")


@dataclass(frozen=True)
class Package:
    name: str
    manifest_path: Path
    version: str | None = None

    @property
    def root(self) -> Path:
        return self.manifest_path.parent


@dataclass(frozen=True)
class Workspace:
    root_manifest: Path
    current_manifest: Path
    members: tuple[Package, ...]

    @property
    def root(self) -> Path:
        return self.root_manifest.parent

    def current(self) -> Package:
        """Return the package whose manifest the workspace was loaded from."""
        for member in self.members:
            if member.manifest_path == self.current_manifest:
                return member
        raise WorkspaceDiscoveryError(
            f"manifest path `{self.current_manifest}` is a virtual manifest, but this "
            "command requires running against an actual package in this workspace"
        )

    def resolve(self, name: str | None) -> Package:
        return resolve_package(self.members, name, self.current)

    @classmethod
    def load(cls, manifest_path: Path, *, manifest_name: str = MANIFEST_NAME) -> Workspace:
        manifest_path = manifest_path.resolve()
        documents: dict[Path, dict[str, TomlValue]] = {
            manifest_path: load_manifest(manifest_path)
        }
        root_manifest = _find_workspace_root(manifest_path, documents, manifest_name)
        if root_manifest not in documents:
            documents[root_manifest] = load_manifest(root_manifest)

        members = _collect_members(root_manifest, documents, manifest_name)
        workspace = cls(
            root_manifest=root_manifest,
            current_manifest=manifest_path,
            members=members,
        )

        is_package = isinstance(documents[manifest_path].get("package"), dict)
        if is_package and not any(m.manifest_path == manifest_path for m in members):
            raise WorkspaceDiscoveryError(
                "current package believes it's in a workspace when it's not:\n"
                f"current:   {manifest_path}\n"
                f"workspace: {root_manifest}"
            )

        get_logger().debug(
            "workspace %s: %s",
            root_manifest,
            ", ".join(member.name for member in members) or "<no members>",
        )
        return workspace

    @classmethod
    def discover(cls, cwd: Path, *, manifest_name: str = MANIFEST_NAME) -> Workspace:
        root = find_root_manifest_for_wd(cwd, manifest_name=manifest_name)
        return cls.load(root, manifest_name=manifest_name)


def find_root_manifest_for_wd(cwd: Path, *, manifest_name: str = MANIFEST_NAME) -> Path:
    """Return the nearest manifest in ``cwd`` or one of its parents."""
    cwd = cwd.resolve()
    for directory in (cwd, *cwd.parents):
        candidate = directory / manifest_name
        if candidate.is_file():
            return candidate
    raise WorkspaceDiscoveryError(
        f"could not find `{manifest_name}` in `{cwd}` or any parent directory"
    )


def _workspace_table(document: dict[str, TomlValue]) -> dict[str, TomlValue] | None:
    table = document.get("workspace")
    return table if isinstance(table, dict) else None


def _string_list(
    table: dict[str, TomlValue], key: str, manifest: Path
) -> list[str]:
    raw = table.get(key, [])
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise WorkspaceDiscoveryError(
            f"`workspace.{key}` in `{manifest}` must be an array of strings"
        )
    return list(raw)


def _is_excluded(package_dir: Path, root_dir: Path, excludes: Sequence[str]) -> bool:
    return any(
        package_dir.is_relative_to((root_dir / exclude).resolve())
        for exclude in excludes
    )


def _find_workspace_root(
    manifest_path: Path,
    documents: dict[Path, dict[str, TomlValue]],
    manifest_name: str,
) -> Path:
    document = documents[manifest_path]
    if _workspace_table(document) is not None:
        return manifest_path

    package = document.get("package")
    explicit = package.get("workspace") if isinstance(package, dict) else None
    if isinstance(explicit, str):
        candidate = (manifest_path.parent / explicit).resolve()
        if candidate.is_dir():
            candidate = candidate / manifest_name
        candidate_doc = load_manifest(candidate)
        if _workspace_table(candidate_doc) is None:
            raise WorkspaceDiscoveryError(
                f"root of a workspace inferred but wasn't a root: {candidate}"
            )
        documents[candidate] = candidate_doc
        return candidate

    package_dir = manifest_path.parent
    for directory in package_dir.parents:
        candidate = directory / manifest_name
        if not candidate.is_file():
            continue
        candidate_doc = load_manifest(candidate)
        workspace = _workspace_table(candidate_doc)
        if workspace is None:
            continue
        if _is_excluded(
            package_dir, directory, _string_list(workspace, "exclude", candidate)
        ):
            continue
        documents[candidate] = candidate_doc
        return candidate

    return manifest_path


def _expand_member_pattern(root_dir: Path, pattern: str) -> list[Path]:
    if not _GLOB_CHARS.intersection(pattern):
        return [(root_dir / pattern).resolve()]
    matches = sorted(glob.glob(str(root_dir / pattern)))
    return [Path(match).resolve() for match in matches if Path(match).is_dir()]


def _package_from_document(
    manifest_path: Path, document: dict[str, TomlValue]
) -> Package | None:
    package = document.get("package")
    if package is None:
        return None
    if not isinstance(package, dict):
        raise WorkspaceDiscoveryError(f"`package` in `{manifest_path}` must be a table")

    name = package.get("name")
    if not isinstance(name, str) or not name:
        raise WorkspaceDiscoveryError(
            f"missing field `package.name` in `{manifest_path}`"
        )
    version = package.get("version")
    return Package(
        name=name,
        manifest_path=manifest_path,
        version=version if isinstance(version, str) else None,
    )


def _collect_members(
    root_manifest: Path,
    documents: dict[Path, dict[str, TomlValue]],
    manifest_name: str,
) -> tuple[Package, ...]:
    root_document = documents[root_manifest]
    root_dir = root_manifest.parent
    manifests: set[Path] = set()

    workspace = _workspace_table(root_document)
    if workspace is not None:
        excludes = _string_list(workspace, "exclude", root_manifest)
        for pattern in _string_list(workspace, "members", root_manifest):
            for package_dir in _expand_member_pattern(root_dir, pattern):
                if _is_excluded(package_dir, root_dir, excludes):
                    continue
                manifest = package_dir / manifest_name
                if not manifest.is_file():
                    raise WorkspaceDiscoveryError(
                        f"failed to load manifest for workspace member `{package_dir}`"
                    )
                manifests.add(manifest)

    if isinstance(root_document.get("package"), dict):
        manifests.add(root_manifest)

    members: list[Package] = []
    for manifest in sorted(manifests):
        document = documents.get(manifest)
        if document is None:
            document = load_manifest(manifest)
        package = _package_from_document(manifest, document)
        if package is None:
            raise WorkspaceDiscoveryError(
                f"workspace member `{manifest}` is a virtual manifest"
            )
        members.append(package)
    return tuple(members)


__all__ = ["Package", "Workspace", "find_root_manifest_for_wd"]
