"""Path traversal over parsed manifest documents."""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from typing import TypeAlias

TomlScalar: TypeAlias = (
    str | int | float | bool | datetime.datetime | datetime.date | datetime.time
)
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]


class _PathMissing:
    """Sentinel for missing document paths."""

    def __repr__(self) -> str:
        return "PATH_MISSING"


PATH_MISSING: _PathMissing = _PathMissing()


def _parse_index(segment: str) -> int | None:
    # str.isdigit() also accepts non-ASCII digits like "²"
    if not segment or not (segment.isascii() and segment.isdigit()):
        return None
    return int(segment, 10)


def lookup(document: TomlValue, path: Sequence[str]) -> TomlValue | _PathMissing:
    """Resolve ``path`` through nested tables and arrays.

    A segment is a key when the current node is a table and a base-10 index
    when it is an array; the segment's own shape never decides. Returns
    ``PATH_MISSING`` as soon as a segment is unavailable, including when a
    scalar is reached with segments left over. The empty path returns
    ``document`` itself.
    """

    current = document
    for segment in path:
        match current:
            case dict():
                if segment not in current:
                    return PATH_MISSING
                current = current[segment]
            case list():
                index = _parse_index(segment)
                if index is None or index >= len(current):
                    return PATH_MISSING
                current = current[index]
            case _:
                return PATH_MISSING

    return current


__all__ = ["PATH_MISSING", "TomlScalar", "TomlValue", "lookup"]
