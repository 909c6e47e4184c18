"""Reading and parsing Cargo manifests."""

from __future__ import annotations

import tomllib
from pathlib import Path

from .errors import ManifestParseError, ManifestReadError
from .runtime.logging import get_logger
from .tree.paths import TomlValue


def read_manifest(path: Path) -> bytes:
    """Return the raw bytes of the manifest at ``path``."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ManifestReadError(path, exc.strerror or str(exc)) from exc


def parse_manifest(data: bytes, path: Path) -> dict[str, TomlValue]:
    """Parse manifest bytes into a document.

    ``path`` is only used for error reporting. Parser messages are passed
    through as-is.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestParseError(path, f"invalid UTF-8: {exc.reason}") from exc

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestParseError(
            path,
            str(exc),
            lineno=getattr(exc, "lineno", None),
            colno=getattr(exc, "colno", None),
        ) from exc


def load_manifest(path: Path) -> dict[str, TomlValue]:
    get_logger().debug("reading manifest: %s", path)
    return parse_manifest(read_manifest(path), path)


__all__ = ["load_manifest", "parse_manifest", "read_manifest"]
