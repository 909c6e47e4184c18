"""Typed decoding of located manifest metadata."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .errors import DecodeShapeError
from .tree.paths import TomlValue

T = TypeVar("T")


def kebab_case(name: str) -> str:
    return name.replace("_", "-")


class ManifestModel(BaseModel):
    """Base for metadata models whose manifest keys are kebab-case.

    A field ``default_packers`` is read from the manifest key
    ``default-packers`` only; the snake-case spelling is not a manifest key.
    Keys without a matching field are ignored. Field names still work as
    keyword arguments when a model is built in Python.
    """

    model_config = ConfigDict(
        alias_generator=kebab_case,
        validate_by_alias=True,
        validate_by_name=True,
        strict=True,
        frozen=True,
        extra="ignore",
    )


class PackConfig(ManifestModel):
    """
    Contents of ``[package.metadata.pack]``.

    ```toml
    [package.metadata.pack]
    # Not used for now. Reserved for future use
    default-packers = ["docker"]
    # files to pack in addition to binaries
    files = ["README.md"]
    ```
    """

    files: list[str] | None = None
    """Files to pack in addition to build outputs."""
    default_packers: list[str] | None = None
    """Reserved for future use."""


def decode_value(
    value: TomlValue,
    target: type[T],
    *,
    path: Sequence[str] = (),
    manifest: Path = Path("<memory>"),
) -> T:
    """Validate ``value`` as an instance of ``target``.

    ``target`` may be anything pydantic can build a ``TypeAdapter`` for:
    pydantic models, TypedDicts, or plain types like ``list[str]``.
    Validation is strict: a string never stands in for a number or a
    boolean, and manifest keys only match by alias. ``path`` and
    ``manifest`` only feed the error message.
    """
    adapter: TypeAdapter[T] = TypeAdapter(target)
    try:
        return adapter.validate_python(
            value, strict=True, by_alias=True, by_name=False
        )
    except ValidationError as exc:
        raise DecodeShapeError(
            target,
            path,
            manifest,
            str(exc),
            exc.errors(include_url=False),
        ) from exc


__all__ = ["ManifestModel", "PackConfig", "decode_value", "kebab_case"]
