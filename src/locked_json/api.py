"""Public constructor functions for locked-json.

Module-level shortcuts for the ``LockedJson`` class methods.  Each call
returns a fresh handle with its own lock; nothing is shared between calls.
"""

from __future__ import annotations

from typing import IO, Any

from locked_json.wrapper import LockedJson

__all__ = ["empty", "from_bytes", "from_stream", "from_value"]


def from_bytes(raw: bytes | bytearray | str) -> LockedJson:
    """Parse UTF-8 JSON ``raw`` into a new handle.

    Args:
        raw: JSON document as bytes or text.

    Returns:
        A ``LockedJson`` wrapping the parsed root.

    Raises:
        ParseError: If ``raw`` is not valid UTF-8 JSON.
    """
    return LockedJson.from_bytes(raw)


def from_stream(reader: IO[bytes] | IO[str]) -> LockedJson:
    """Read and parse a whole stream into a new handle.

    Args:
        reader: Any object with a blocking ``read()`` returning bytes or str.

    Raises:
        ParseError: If the stream contents are not valid JSON.
    """
    return LockedJson.from_stream(reader)


def empty() -> LockedJson:
    """Return a new handle around an empty object.  Never fails."""
    return LockedJson.empty()


def from_value(value: Any) -> LockedJson:
    """Wrap an existing Python JSON value by reference (no copy)."""
    return LockedJson.from_value(value)
