"""Exception hierarchy for locked-json.

Every error raised by the package derives from ``LockedJsonError`` and also
from the built-in exception a caller would naturally expect (``ValueError``
for bad input, ``TypeError`` for kind mismatches), so existing ``except``
clauses keep working.

Navigation (``get``, ``get_path``, ``get_index``, ``check_get``) never raises;
misses are represented by a handle around ``None``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from locked_json.tree.nodes import NodeKind

__all__ = [
    "EncodeError",
    "LockedJsonError",
    "ParseError",
    "TypeMismatchError",
]


class LockedJsonError(Exception):
    """Base exception for all locked-json errors.

    Args:
        message: Human-readable description.
        wrapped: The lower-level exception that caused this one, if any.
    """

    def __init__(self, message: str, wrapped: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.wrapped = wrapped


class ParseError(LockedJsonError, ValueError):
    """Raised when input bytes, text or a stream are not valid JSON."""


class EncodeError(LockedJsonError, ValueError):
    """Raised when a node cannot be serialized to JSON."""


class TypeMismatchError(LockedJsonError, TypeError):
    """Raised by a strict accessor when the node is not of the requested type.

    Attributes:
        expected: Name of the requested type (e.g. ``"object"``, ``"int64"``).
        actual:   Kind of the node that was found, or the Python type name
                  for a value that is not JSON at all.
    """

    def __init__(
        self, expected: str, actual: NodeKind | str, detail: str = ""
    ) -> None:
        message = f"expected {expected}, got {actual}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual
