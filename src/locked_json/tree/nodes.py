"""NodeKind StrEnum and kind dispatch for untyped JSON values.

A JSON tree is made of plain Python values as produced by :mod:`json`:
``dict``, ``list``, ``str``, ``int``/``float``, ``bool`` and ``None``.
``kind_of`` tags each value with one of the six JSON kinds so that accessors
can match on an explicit kind instead of scattering ``isinstance`` checks.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

import numpy as np

__all__ = ["JsonValue", "NodeKind", "describe_kind", "kind_of"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class NodeKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - OBJECT   -> "object"
    - ARRAY    -> "array"
    - STRING   -> "string"
    - NUMBER   -> "number"  : int or float
    - BOOLEAN  -> "boolean"
    - NULL     -> "null"
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


def kind_of(value: Any) -> NodeKind:
    """Return the JSON kind of ``value``.

    NumPy scalars are accepted since numeric data often arrives from array
    code; ``np.bool_`` is a boolean, ``np.integer``/``np.floating`` numbers.

    Raises:
        TypeError: If ``value`` is not a JSON-compatible Python value.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, (bool, np.bool_)):
        return NodeKind.BOOLEAN
    if value is None:
        return NodeKind.NULL
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.ARRAY
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (int, float, np.integer, np.floating)):
        return NodeKind.NUMBER

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def describe_kind(value: Any) -> NodeKind | str:
    """Like ``kind_of`` but never raises; unknown values yield their type name.

    Used when reporting mismatches, where a foreign object placed into the
    tree by ``set`` must still produce a readable error.
    """
    try:
        return kind_of(value)
    except TypeError:
        return type(value).__name__
