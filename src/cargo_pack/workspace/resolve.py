from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

from ..errors import AmbiguousPackage, UnknownPackage


class _Member(Protocol):
    @property
    def name(self) -> str: ...


M = TypeVar("M", bound=_Member)


def resolve_package(
    members: Iterable[M],
    name: str | None,
    current: Callable[[], M],
) -> M:
    """
    Select the workspace member a command should operate on.

    Parameters:
        members (Iterable[M]): Workspace members to search.
        name (str | None): Requested package name. Matched exactly and case-sensitively.
        current (Callable[[], M]): Produces the workspace's current package; only called when `name` is None.

    Returns:
        M: The single member named `name`, or the current package when no name is given.

    Raises:
        UnknownPackage: If no member is named `name`.
        AmbiguousPackage: If more than one member is named `name`.
    """
    if name is None:
        return current()

    matches = [member for member in members if member.name == name]
    match len(matches):
        case 0:
            raise UnknownPackage(name)
        case 1:
            return matches[0]
        case _:
            raise AmbiguousPackage(name)


__all__ = ["resolve_package"]
