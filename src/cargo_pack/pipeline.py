from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .decode import decode_value
from .errors import MetadataNotFound
from .manifest import load_manifest
from .runtime.logging import get_logger
from .tree.keys import PACK_METADATA_PATH, as_metadata_path
from .tree.paths import PATH_MISSING, lookup
from .workspace import Workspace

T = TypeVar("T")


def decode_from_manifest(
    workspace: Workspace,
    package_name: str | None,
    target: type[T],
    path: str | Sequence[str] = PACK_METADATA_PATH,
    *,
    missing_ok: bool = False,
) -> T:
    """
    Decode the metadata at `path` in a workspace package's manifest.

    The manifest is read and parsed on every call.

    Parameters:
        workspace (Workspace): Workspace to resolve the package in.
        package_name (str | None): Package to read; None selects the workspace's current package.
        target (type[T]): Type to decode the located value into.
        path (str | Sequence[str]): Dotted key or explicit segments; defaults to `package.metadata.pack`.
        missing_ok (bool): Decode an empty table instead of raising when `path` is absent.

    Returns:
        T: The decoded value.

    Raises:
        InvalidMetadataPath: If a dotted `path` is malformed.
        UnknownPackage, AmbiguousPackage: If `package_name` does not select exactly one member.
        WorkspaceDiscoveryError: If no name is given and the workspace has no current package.
        ManifestReadError, ManifestParseError: If the manifest cannot be loaded.
        MetadataNotFound: If `path` is absent and `missing_ok` is False.
        DecodeShapeError: If the located value does not fit `target`.
    """
    segments = as_metadata_path(path)
    logger = get_logger()

    package = workspace.resolve(package_name)
    manifest = package.manifest_path
    logger.debug("package %s: %s", package.name, manifest)

    document = load_manifest(manifest)
    value = lookup(document, segments)
    if value is PATH_MISSING:
        if not missing_ok:
            raise MetadataNotFound(segments, manifest)
        logger.debug("no %s in %s, using defaults", ".".join(segments), manifest)
        value = {}

    decoded = decode_value(value, target, path=segments, manifest=manifest)
    logger.debug("decoded %s: %r", ".".join(segments), decoded)
    return decoded


__all__ = ["decode_from_manifest"]
