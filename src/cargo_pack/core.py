from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .config import CARGO_PACK_CONFIG, CargoPackConfig
from .decode import PackConfig
from .pipeline import decode_from_manifest
from .runtime.logging import get_logger
from .tree.keys import PACK_METADATA_PATH
from .workspace import Package, Workspace

T = TypeVar("T")


class CargoPack:
    """Pack configuration of one package in a Cargo workspace.

    Construction discovers the workspace from ``config.cwd`` and decodes
    ``[package.metadata.pack]`` once. A package without that table gets a
    ``PackConfig`` whose fields are all ``None``.

    ```python
    pack = CargoPack()
    for name in pack.files():
        ...
    ```
    """

    def __init__(
        self,
        package_name: str | None = None,
        *,
        config: CargoPackConfig | None = None,
    ) -> None:
        settings = CARGO_PACK_CONFIG if config is None else config
        self._ws = Workspace.discover(settings.cwd, manifest_name=settings.manifest_name)
        self._package_name = package_name
        self._pack_config = decode_from_manifest(
            self._ws,
            package_name,
            PackConfig,
            PACK_METADATA_PATH,
            missing_ok=True,
        )
        get_logger().debug("config: %r", self._pack_config)

    @property
    def ws(self) -> Workspace:
        """The workspace the package belongs to."""
        return self._ws

    @property
    def config(self) -> PackConfig:
        return self._pack_config

    @property
    def package_name(self) -> str | None:
        return self._package_name

    def package(self) -> Package:
        """Resolve the package again against the workspace."""
        return self._ws.resolve(self._package_name)

    def files(self) -> list[str]:
        """Files listed in ``package.metadata.pack.files``, or ``[]``."""
        return list(self._pack_config.files or [])

    def decode_from_manifest(
        self,
        target: type[T],
        path: str | Sequence[str] | None = None,
    ) -> T:
        """Decode ``target`` from this package's manifest.

        Without ``path`` the ``package.metadata.pack`` table is decoded, and a
        package that has none decodes as an empty table, as on construction.
        An explicit ``path`` that is absent raises ``MetadataNotFound``.
        """
        return decode_from_manifest(
            self._ws,
            self._package_name,
            target,
            PACK_METADATA_PATH if path is None else path,
            missing_ok=path is None,
        )


__all__ = ["CargoPack"]
