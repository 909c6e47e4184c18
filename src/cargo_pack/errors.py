from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any


class CargoPackError(Exception):
    """Base exception for cargo-pack errors."""


class InvalidMetadataPath(CargoPackError, ValueError):
    """Raised when a dotted metadata path does not follow the TOML key grammar."""


class WorkspaceDiscoveryError(CargoPackError):
    """Raised when no usable Cargo workspace can be located."""


class PackageResolutionError(CargoPackError):
    """Raised when a package name does not select exactly one workspace member."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class UnknownPackage(PackageResolutionError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"unknown package {name}")


class AmbiguousPackage(PackageResolutionError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"ambiguous name {name}")


class ManifestError(CargoPackError):
    """Raised when a manifest cannot be turned into a document."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ManifestReadError(ManifestError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"failed to read `{path}`: {reason}")


class ManifestParseError(ManifestError):
    """Raised when a manifest is not valid UTF-8 TOML.

    ``reason`` is the parser's own message. ``lineno`` and ``colno`` are set
    when the parser reports a position.
    """

    def __init__(
        self,
        path: Path,
        reason: str,
        *,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        self.reason = reason
        self.lineno = lineno
        self.colno = colno
        super().__init__(path, f"failed to parse manifest at `{path}`: {reason}")


class MetadataNotFound(CargoPackError):
    """Raised when the requested metadata path is absent from a manifest."""

    def __init__(self, path: Sequence[str], manifest: Path) -> None:
        self.path = tuple(path)
        self.manifest = manifest
        dotted = ".".join(self.path) or "<root>"
        super().__init__(f"no {dotted} found in {manifest}")


class DecodeShapeError(CargoPackError):
    """Raised when located metadata does not match the requested type."""

    def __init__(
        self,
        target: object,
        path: Sequence[str],
        manifest: Path,
        details: str,
        errors: Sequence[dict[str, Any]] = (),
    ) -> None:
        self.target = target
        self.path = tuple(path)
        self.manifest = manifest
        self.errors = list(errors)
        dotted = ".".join(self.path) or "<root>"
        target_name = getattr(target, "__name__", repr(target))
        super().__init__(
            f"invalid {dotted} in {manifest} for {target_name}:\n{details}"
        )


__all__ = [
    "AmbiguousPackage",
    "CargoPackError",
    "DecodeShapeError",
    "InvalidMetadataPath",
    "ManifestError",
    "ManifestParseError",
    "ManifestReadError",
    "MetadataNotFound",
    "PackageResolutionError",
    "UnknownPackage",
    "WorkspaceDiscoveryError",
]
