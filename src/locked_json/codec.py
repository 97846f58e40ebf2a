"""JSON parse/encode functions over the standard library ``json`` module.

Parsing is strict: input must be UTF-8, and the non-standard literals
``NaN``, ``Infinity`` and ``-Infinity`` that :func:`json.loads` accepts by
default are rejected.  Encoding refuses non-finite floats for the same
reason.  All failures surface as ``ParseError`` / ``EncodeError`` with the
original exception chained.
"""

from __future__ import annotations

import json
from typing import IO, Any

import numpy as np

from locked_json.config import DEFAULT_ENCODE_CONFIG, EncodeConfig
from locked_json.errors import EncodeError, ParseError

__all__ = ["encode", "parse", "parse_stream"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def parse(raw: bytes | bytearray | str) -> Any:
    """Parse UTF-8 JSON text into plain Python values.

    Args:
        raw: JSON document as bytes or an already-decoded string.

    Returns:
        The parsed value (dict, list, str, int, float, bool or None).

    Raises:
        ParseError: If ``raw`` is not valid UTF-8 or not valid JSON.
    """
    try:
        text = raw if isinstance(raw, str) else bytes(raw).decode("utf-8")
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueError subclasses
        raise ParseError(f"invalid JSON: {exc}", wrapped=exc) from exc


def parse_stream(reader: IO[bytes] | IO[str]) -> Any:
    """Read ``reader`` to the end and parse its contents.

    Blocks until the reader is exhausted.  I/O errors propagate unchanged.
    """
    return parse(reader.read())


def _encode_default(value: Any) -> Any:
    # NumPy scalars (np.int64, np.bool_, ...) are not json-native
    if isinstance(value, np.generic):
        return value.item()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(
    value: Any,
    config: EncodeConfig | None = None,
    pretty: bool = False,
) -> bytes:
    """Serialize ``value`` to UTF-8 JSON bytes.

    Args:
        value:  The JSON value to encode.
        config: Output options.  Defaults to ``DEFAULT_ENCODE_CONFIG``.
        pretty: Indent by ``config.indent`` spaces per level when True;
                otherwise emit the compact form with no whitespace.

    Raises:
        EncodeError: For non-finite floats, reference cycles, or values with
            no JSON representation.
    """
    cfg = config or DEFAULT_ENCODE_CONFIG
    try:
        text = json.dumps(
            value,
            indent=cfg.indent if pretty else None,
            separators=(",", ": ") if pretty else (",", ":"),
            sort_keys=cfg.sort_keys,
            ensure_ascii=cfg.ensure_ascii,
            allow_nan=False,
            default=_encode_default,
        )
    except (ValueError, TypeError, RecursionError) as exc:
        raise EncodeError(f"cannot encode JSON: {exc}", wrapped=exc) from exc
    return text.encode("utf-8")
