from __future__ import annotations

import logging
import os
from pathlib import Path

MANIFEST_NAME = "Cargo.toml"


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def _env_log_level(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    # unknown names fall back rather than failing the import
    if not isinstance(level, int):
        return default
    return level


class CargoPackConfig:
    """Process-wide settings for workspace discovery and logging.

    Values are seeded from ``CARGO_PACK_*`` environment variables and may be
    overwritten in code (tests do this through ``cargo_pack.testing``).
    """

    def __init__(self) -> None:
        self.cwd_override: Path | None = _env_path("CARGO_PACK_CWD")
        self.manifest_name: str = (
            os.environ.get("CARGO_PACK_MANIFEST_NAME", "").strip() or MANIFEST_NAME
        )
        self.log_level: int = _env_log_level("CARGO_PACK_LOG_LEVEL", logging.WARNING)

    @property
    def cwd(self) -> Path:
        """Directory workspace discovery starts from."""
        if self.cwd_override is not None:
            return self.cwd_override.resolve()
        return Path.cwd()


CARGO_PACK_CONFIG = CargoPackConfig()


__all__ = ["CARGO_PACK_CONFIG", "CargoPackConfig", "MANIFEST_NAME"]
