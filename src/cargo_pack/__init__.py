"""
cargo-pack: shared configuration for Cargo packers.

Packers read their settings from the crate manifest:

```toml
[package.metadata.pack]
# Not used for now. Reserved for future use
default-packers = ["docker"]
# files to pack in addition to binaries
files = ["README.md"]
```

This package uses a src-layout. Import the package as `cargo_pack`.
"""

from importlib.metadata import version

__version__ = version("cargo-pack")

from .config import CARGO_PACK_CONFIG, CargoPackConfig
from .core import CargoPack
from .decode import ManifestModel, PackConfig, decode_value
from .errors import (
    AmbiguousPackage,
    CargoPackError,
    DecodeShapeError,
    InvalidMetadataPath,
    ManifestError,
    ManifestParseError,
    ManifestReadError,
    MetadataNotFound,
    PackageResolutionError,
    UnknownPackage,
    WorkspaceDiscoveryError,
)
from .pipeline import decode_from_manifest
from .runtime import configure_logging, get_logger
from .tree import (
    PACK_METADATA_PATH,
    PATH_MISSING,
    MetadataPath,
    TomlValue,
    as_metadata_path,
    lookup,
    parse_dotted_key,
)
from .workspace import Package, Workspace, find_root_manifest_for_wd, resolve_package

__all__ = [
    "__version__",
    "AmbiguousPackage",
    "CARGO_PACK_CONFIG",
    "CargoPack",
    "CargoPackConfig",
    "CargoPackError",
    "DecodeShapeError",
    "InvalidMetadataPath",
    "ManifestError",
    "ManifestModel",
    "ManifestParseError",
    "ManifestReadError",
    "MetadataNotFound",
    "MetadataPath",
    "PACK_METADATA_PATH",
    "PATH_MISSING",
    "Package",
    "PackConfig",
    "PackageResolutionError",
    "TomlValue",
    "UnknownPackage",
    "Workspace",
    "WorkspaceDiscoveryError",
    "as_metadata_path",
    "configure_logging",
    "decode_from_manifest",
    "decode_value",
    "find_root_manifest_for_wd",
    "get_logger",
    "lookup",
    "parse_dotted_key",
    "resolve_package",
]
