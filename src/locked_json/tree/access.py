"""Untyped navigation and mutation primitives over plain JSON values.

These functions are the unguarded building blocks used by ``LockedJson``.
They take no locks themselves and never copy: returned values are references
into the same tree that was passed in.

Lookups report misses through a ``found`` flag instead of raising, so that
callers can substitute the null sentinel and keep chaining.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from locked_json.errors import TypeMismatchError
from locked_json.tree.nodes import describe_kind

__all__ = [
    "delete_key",
    "get_index",
    "get_key",
    "get_path",
    "set_key",
    "set_path",
]


def get_key(data: Any, key: str) -> tuple[Any, bool]:
    """Return ``(data[key], True)``, or ``(None, False)`` on a miss.

    A miss is either a missing key or ``data`` not being an object.
    """
    if isinstance(data, dict) and key in data:
        return data[key], True
    return None, False


def get_path(data: Any, branch: Sequence[str]) -> tuple[Any, bool]:
    """Follow ``branch`` key by key from ``data``.

    An empty branch returns ``data`` itself. The first miss short-circuits to
    ``(None, False)``.
    """
    current = data
    for key in branch:
        current, found = get_key(current, key)
        if not found:
            return None, False
    return current, True


def get_index(data: Any, index: int) -> tuple[Any, bool]:
    """Return ``(data[index], True)``, or ``(None, False)`` on a miss.

    Negative indexes are treated as misses rather than counted from the end,
    as are indexes that are not plain ints (including ``bool``).
    """
    if isinstance(index, bool) or not isinstance(index, int):
        return None, False
    if isinstance(data, list) and 0 <= index < len(data):
        return data[index], True
    return None, False


def set_key(data: Any, key: str, value: Any) -> None:
    """Assign ``data[key] = value``.

    Raises:
        TypeMismatchError: If ``data`` is not an object.
    """
    if not isinstance(data, dict):
        raise TypeMismatchError(
            "object", describe_kind(data), f"cannot set key {key!r}"
        )
    data[key] = value


def set_path(data: Any, branch: Sequence[str], value: Any) -> Any:
    """Write ``value`` at ``branch`` below ``data`` and return the new root.

    Segments are applied root to leaf. A root or intermediate node that is
    missing or not an object is overwritten with a new empty object, which
    discards whatever was stored there. An empty branch makes ``value`` the
    new root.
    """
    if not branch:
        return value

    root = data if isinstance(data, dict) else {}
    current = root
    for key in branch[:-1]:
        child = current.get(key)
        if not isinstance(child, dict):
            child = {}
            current[key] = child
        current = child
    current[branch[-1]] = value
    return root


def delete_key(data: Any, key: str) -> None:
    """Remove ``key`` from ``data``; a no-op if absent or not an object."""
    if isinstance(data, dict):
        data.pop(key, None)
