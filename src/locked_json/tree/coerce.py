"""Strict coercions from untyped JSON values to Python types.

Each function matches on the value's ``NodeKind`` and either returns the
converted value or raises ``TypeMismatchError``. Numbers coerce across
numeric types:

- ``to_float64``: any number within float range.  Integers beyond 2**53
  round to the nearest double, as float64 conversion does elsewhere.
- ``to_int64`` / ``to_int``: integers, and integral floats (``2.0``), within
  the signed 64-bit range.
- ``to_uint64``: the same, within ``[0, 2**64 - 1]``.

Strings never coerce to numbers and booleans never coerce to integers.
Bounds come from NumPy's ``iinfo`` so they match the fixed-width types the
names refer to.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from locked_json.errors import TypeMismatchError
from locked_json.tree.nodes import NodeKind, describe_kind, kind_of

__all__ = [
    "to_array",
    "to_bool",
    "to_bytes",
    "to_float64",
    "to_int",
    "to_int64",
    "to_object",
    "to_string",
    "to_string_array",
    "to_uint64",
]

_INT64 = np.iinfo(np.int64)
_UINT64 = np.iinfo(np.uint64)


def _require(value: Any, kind: NodeKind, expected: str) -> None:
    try:
        actual = kind_of(value)
    except TypeError as exc:
        raise TypeMismatchError(expected, type(value).__name__) from exc
    if actual != kind:
        raise TypeMismatchError(expected, actual)


def to_object(value: Any) -> dict[str, Any]:
    """Return a shallow copy of an object node."""
    _require(value, NodeKind.OBJECT, "object")
    return dict(value)


def to_array(value: Any) -> list[Any]:
    """Return a shallow copy of an array node."""
    _require(value, NodeKind.ARRAY, "array")
    return list(value)


def to_bool(value: Any) -> bool:
    _require(value, NodeKind.BOOLEAN, "bool")
    return bool(value)


def to_string(value: Any) -> str:
    _require(value, NodeKind.STRING, "string")
    return str(value)


def to_bytes(value: Any) -> bytes:
    """Return the UTF-8 encoding of a string node."""
    _require(value, NodeKind.STRING, "bytes")
    return str(value).encode("utf-8")


def to_string_array(value: Any) -> list[str]:
    """Return an array of strings; ``null`` elements become ``""``.

    Raises:
        TypeMismatchError: If the node is not an array, or any element is
            neither a string nor null.
    """
    _require(value, NodeKind.ARRAY, "string array")
    result: list[str] = []
    for idx, item in enumerate(value):
        if item is None:
            result.append("")
            continue
        if not isinstance(item, str):
            raise TypeMismatchError(
                "string array", describe_kind(item), f"element {idx} is not a string"
            )
        result.append(item)
    return result


def to_float64(value: Any) -> float:
    """Return a number as ``float``; integers above 2**53 may lose precision."""
    _require(value, NodeKind.NUMBER, "float64")
    try:
        return float(value)
    except OverflowError as exc:
        raise TypeMismatchError(
            "float64", NodeKind.NUMBER, f"{value} is out of range"
        ) from exc


def _to_integral(value: Any, expected: str, info: np.iinfo) -> int:
    _require(value, NodeKind.NUMBER, expected)
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value) or not float(value).is_integer():
            raise TypeMismatchError(
                expected, NodeKind.NUMBER, f"{value} is not an integral value"
            )
    number = int(value)
    if not int(info.min) <= number <= int(info.max):
        raise TypeMismatchError(expected, NodeKind.NUMBER, f"{value} is out of range")
    return number


def to_int64(value: Any) -> int:
    return _to_integral(value, "int64", _INT64)


def to_int(value: Any) -> int:
    # int is 64 bits wide, same as int64
    return _to_integral(value, "int", _INT64)


def to_uint64(value: Any) -> int:
    return _to_integral(value, "uint64", _UINT64)
