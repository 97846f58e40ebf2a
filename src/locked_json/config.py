"""EncodeConfig: serialization options for LockedJson output.

EncodeConfig is a frozen (immutable) dataclass; one instance can be shared
freely between threads and handles.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_ENCODE_CONFIG", "EncodeConfig"]


@dataclass(frozen=True, slots=True)
class EncodeConfig:
    """Immutable options for ``serialize()`` and ``serialize_pretty()``.

    Attributes:
        indent: Spaces per nesting level for pretty output (>= 0).  Ignored by
            compact output.
        sort_keys: Emit object keys in sorted order, giving a canonical byte
            representation independent of insertion order.  Default True.
        ensure_ascii: Escape non-ASCII characters as ``\\uXXXX``.  Default
            False: output is plain UTF-8.
    """

    indent: int = 2
    sort_keys: bool = True
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)


DEFAULT_ENCODE_CONFIG = EncodeConfig()
