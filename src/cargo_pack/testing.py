import textwrap
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import pytest

from .config import CARGO_PACK_CONFIG, MANIFEST_NAME


@dataclass(frozen=True)
class _CargoPackConfigSnapshot:
    cwd_override: Path | None
    manifest_name: str
    log_level: int

    @classmethod
    def capture(cls) -> "_CargoPackConfigSnapshot":
        return cls(
            cwd_override=CARGO_PACK_CONFIG.cwd_override,
            manifest_name=CARGO_PACK_CONFIG.manifest_name,
            log_level=CARGO_PACK_CONFIG.log_level,
        )

    def restore(self) -> None:
        CARGO_PACK_CONFIG.cwd_override = self.cwd_override
        CARGO_PACK_CONFIG.manifest_name = self.manifest_name
        CARGO_PACK_CONFIG.log_level = self.log_level


@contextmanager
def cargo_pack_test_env(cwd: Path) -> Generator[Path, None, None]:
    """Point workspace discovery at ``cwd`` for the duration of the context."""
    snapshot = _CargoPackConfigSnapshot.capture()
    root = cwd.resolve()
    CARGO_PACK_CONFIG.cwd_override = root
    CARGO_PACK_CONFIG.manifest_name = MANIFEST_NAME
    try:
        yield root
    finally:
        snapshot.restore()


def write_manifest(directory: Path, body: str) -> Path:
    """Write a dedented ``Cargo.toml`` into ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / MANIFEST_NAME
    manifest.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return manifest


def write_package(
    directory: Path,
    name: str,
    extra: str = "",
    *,
    version: str = "0.1.0",
) -> Path:
    """Write a minimal package manifest, followed by ``extra`` TOML."""
    header = f'[package]\nname = "{name}"\nversion = "{version}"\n'
    return write_manifest(directory, header + textwrap.dedent(extra))


@pytest.fixture()
def cargo_pack_tmp_root(tmp_path: Path) -> Generator[Path, None, None]:
    """Run discovery from a temporary directory for the test."""
    with cargo_pack_test_env(tmp_path) as root:
        yield root
