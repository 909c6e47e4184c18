"""Metadata path parsing.

A metadata path is a tuple of key segments. Callers may hand one over as an
explicit sequence (``["package", "metadata", "pack"]``) or as a TOML dotted
key (``'package.metadata."pack.docker"'``); both end up as the same tuple.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from ..errors import InvalidMetadataPath

MetadataPath: TypeAlias = tuple[str, ...]

PACK_METADATA_PATH: MetadataPath = ("package", "metadata", "pack")

_BARE_KEY_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"
)
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
}
_WHITESPACE = " \t"


def parse_dotted_key(text: str) -> MetadataPath:
    """Split a TOML dotted key into its segments.

    Supports bare keys, basic-quoted keys with TOML escapes and
    literal-quoted keys, with optional whitespace around each dot. The empty
    (or all-whitespace) string is the empty path.
    """

    if not text.strip(_WHITESPACE):
        return ()

    segments: list[str] = []
    index = 0
    length = len(text)
    while True:
        index = _skip_whitespace(text, index)
        segment, index = _parse_key(text, index)
        segments.append(segment)
        index = _skip_whitespace(text, index)
        if index == length:
            return tuple(segments)
        if text[index] != ".":
            raise InvalidMetadataPath(
                f"metadata path {text!r} has unexpected {text[index]!r} at offset {index}"
            )
        index += 1


def _skip_whitespace(text: str, index: int) -> int:
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    return index


def _parse_key(text: str, index: int) -> tuple[str, int]:
    if index >= len(text):
        raise InvalidMetadataPath(f"metadata path {text!r} has empty segment")
    char = text[index]
    if char == '"':
        return _parse_basic_key(text, index + 1)
    if char == "'":
        close = text.find("'", index + 1)
        if close == -1:
            raise InvalidMetadataPath(f"metadata path {text!r} has unterminated key")
        return text[index + 1 : close], close + 1

    start = index
    while index < len(text) and text[index] in _BARE_KEY_CHARS:
        index += 1
    if index == start:
        raise InvalidMetadataPath(
            f"metadata path {text!r} has invalid key character {char!r} at offset {index}"
        )
    return text[start:index], index


def _parse_basic_key(text: str, index: int) -> tuple[str, int]:
    chars: list[str] = []
    while index < len(text):
        char = text[index]
        if char == '"':
            return "".join(chars), index + 1
        if char != "\\":
            chars.append(char)
            index += 1
            continue

        escape = text[index + 1 : index + 2]
        if escape in _SIMPLE_ESCAPES:
            chars.append(_SIMPLE_ESCAPES[escape])
            index += 2
        elif escape in ("u", "U"):
            width = 4 if escape == "u" else 8
            digits = text[index + 2 : index + 2 + width]
            if len(digits) != width or not all(
                d in "0123456789abcdefABCDEF" for d in digits
            ):
                raise InvalidMetadataPath(
                    f"metadata path {text!r} has malformed unicode escape"
                )
            codepoint = int(digits, 16)
            if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
                raise InvalidMetadataPath(
                    f"metadata path {text!r} escapes a non-scalar unicode value"
                )
            chars.append(chr(codepoint))
            index += 2 + width
        else:
            raise InvalidMetadataPath(
                f"metadata path {text!r} has unsupported escape {escape!r}"
            )
    raise InvalidMetadataPath(f"metadata path {text!r} has unterminated key")


def as_metadata_path(path: str | Sequence[str]) -> MetadataPath:
    """Normalize either call convention into a ``MetadataPath``."""

    if isinstance(path, str):
        return parse_dotted_key(path)
    segments = tuple(path)
    for segment in segments:
        if not isinstance(segment, str):
            raise TypeError(
                f"metadata path segments must be str, got {type(segment).__name__}"
            )
    return segments


def format_metadata_path(path: Sequence[str]) -> str:
    """Render a path back as a dotted key, quoting segments that need it."""

    parts: list[str] = []
    for segment in path:
        if segment and all(char in _BARE_KEY_CHARS for char in segment):
            parts.append(segment)
        else:
            escaped = segment.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'"{escaped}"')
    return ".".join(parts)


__all__ = [
    "InvalidMetadataPath",
    "MetadataPath",
    "PACK_METADATA_PATH",
    "as_metadata_path",
    "format_metadata_path",
    "parse_dotted_key",
]
