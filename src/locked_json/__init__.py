"""locked-json - a thread-safe handle over untyped JSON document trees."""

from __future__ import annotations

from locked_json.api import empty, from_bytes, from_stream, from_value
from locked_json.config import DEFAULT_ENCODE_CONFIG, EncodeConfig
from locked_json.errors import (
    EncodeError,
    LockedJsonError,
    ParseError,
    TypeMismatchError,
)
from locked_json.tree.nodes import NodeKind
from locked_json.wrapper import LockedJson

__version__: str = "0.5.0"
__all__: list[str] = [
    "DEFAULT_ENCODE_CONFIG",
    "EncodeConfig",
    "EncodeError",
    "LockedJson",
    "LockedJsonError",
    "NodeKind",
    "ParseError",
    "TypeMismatchError",
    "empty",
    "from_bytes",
    "from_stream",
    "from_value",
]
