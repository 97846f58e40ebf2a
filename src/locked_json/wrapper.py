"""LockedJson: a lock-guarded handle around one node of an untyped JSON tree.

Each ``LockedJson`` pairs a ``threading.Lock`` with a reference to a JSON
value (a plain ``dict``, ``list``, ``str``, number, ``bool`` or ``None``).
Every operation on a handle runs under that handle's lock, so calls made
through the same handle are serialized.

Navigation (``get``, ``get_path``, ``get_index``, ``check_get``) returns a
*new* handle with its own fresh lock, wrapping the child node by reference.
Mutating through the child mutates the shared tree the parent sees.

Locking is per handle, not per tree: a parent's lock does not cover its
children.  A ``set``/``delete`` through a parent may run concurrently with
reads or writes through a child handle obtained earlier, and the child keeps
pointing at the subtree it wrapped even if the parent has since replaced it.
Callers that need a sequence of operations to be atomic over a subtree must
issue them all through one handle or coordinate externally.

Navigation never raises.  A missing key or index, or navigating through a
node of the wrong kind, yields a handle around ``None`` (the null sentinel),
so chains like ``doc.get("a").get("b").get_index(0)`` only fail, if at all,
at the final strict accessor.

Example::

    from locked_json import LockedJson

    doc = LockedJson.from_bytes(b'{"a": {"b": 1}}')
    doc.get("a").get("b").must_int()      # 1
    doc.get("a").set("c", 2)
    doc.serialize()                       # b'{"a":{"b":1,"c":2}}'
    doc.get("missing").must_int(42)       # 42
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import IO, Any, TypeVar

from locked_json import codec
from locked_json.config import EncodeConfig
from locked_json.errors import EncodeError, TypeMismatchError
from locked_json.tree import access, coerce
from locked_json.tree.nodes import describe_kind

__all__ = ["LockedJson"]

T = TypeVar("T")

_MISSING: Any = object()


class LockedJson:
    """Thread-safe handle around a node of a JSON document tree.

    Args:
        data: The JSON value to wrap, by reference (no copy is made).  When
            omitted, the handle wraps a new empty object.
    """

    __slots__ = ("_data", "_lock")

    def __init__(self, data: Any = _MISSING) -> None:
        self._lock = threading.Lock()
        self._data: Any = {} if data is _MISSING else data

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, raw: bytes | bytearray | str) -> LockedJson:
        """Parse ``raw`` as UTF-8 JSON and wrap the resulting root.

        Raises:
            ParseError: If ``raw`` is malformed.
        """
        return cls(codec.parse(raw))

    @classmethod
    def from_stream(cls, reader: IO[bytes] | IO[str]) -> LockedJson:
        """Read ``reader`` to the end, parse it, and wrap the resulting root.

        Blocks on ``reader`` like any blocking read.

        Raises:
            ParseError: If the stream contents are malformed.
            OSError: Propagated unchanged from ``reader.read()``.
        """
        return cls(codec.parse_stream(reader))

    @classmethod
    def empty(cls) -> LockedJson:
        """Return a handle around a new empty object."""
        return cls({})

    @classmethod
    def from_value(cls, value: Any) -> LockedJson:
        """Wrap an existing Python JSON value by reference."""
        return cls(value)

    def unmarshal(self, raw: bytes | bytearray | str) -> None:
        """Replace this handle's node with the parse of ``raw``.

        Only this handle is repointed; children obtained earlier keep their
        old nodes.  On failure the current node is left untouched.

        Raises:
            ParseError: If ``raw`` is malformed.
        """
        data = codec.parse(raw)
        with self._lock:
            self._data = data

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def interface(self) -> Any:
        """Return the underlying JSON value (a live reference, not a copy)."""
        with self._lock:
            return self._data

    def serialize(self, config: EncodeConfig | None = None) -> bytes:
        """Encode the node as compact JSON bytes.

        Raises:
            EncodeError: If the node holds a value with no JSON form.
        """
        with self._lock:
            return codec.encode(self._data, config)

    def serialize_pretty(self, config: EncodeConfig | None = None) -> bytes:
        """Encode the node as indented JSON bytes.

        Raises:
            EncodeError: If the node holds a value with no JSON form.
        """
        with self._lock:
            return codec.encode(self._data, config, pretty=True)

    def __bytes__(self) -> bytes:
        return self.serialize()

    def __repr__(self) -> str:
        try:
            body = self.serialize().decode("utf-8")
        except EncodeError:
            with self._lock:
                body = f"<unencodable {describe_kind(self._data)}>"
        return f"{type(self).__name__}({body})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Assign ``value`` at ``key`` in this object node, overwriting.

        A ``LockedJson`` value is unwrapped to the node it holds.

        Raises:
            TypeMismatchError: If this node is not an object.
        """
        if isinstance(value, LockedJson):
            value = value.interface()
        with self._lock:
            access.set_key(self._data, key, value)

    def set_path(self, branch: Sequence[str], value: Any) -> None:
        """Write ``value`` at the nested ``branch`` of keys, creating objects.

        Missing intermediate keys are created as empty objects.  Any node on
        the way that is not an object, this node included, is replaced by a
        new empty object and its previous content is lost.  An empty
        ``branch`` replaces this node with ``value``.
        """
        if isinstance(branch, str):
            raise TypeError("branch must be a sequence of keys, not a str")
        if isinstance(value, LockedJson):
            value = value.interface()
        with self._lock:
            self._data = access.set_path(self._data, branch, value)

    def delete(self, key: str) -> None:
        """Remove ``key`` from this object node; a no-op if it is absent."""
        with self._lock:
            access.delete_key(self._data, key)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def get(self, key: str) -> LockedJson:
        """Return a new handle for ``key``, or the null sentinel on a miss.

        Useful for chaining through nested objects::

            doc.get("top_level").get("dict").get("value").must_int()
        """
        with self._lock:
            value, _ = access.get_key(self._data, key)
        return LockedJson(value)

    def get_path(self, *branch: str) -> LockedJson:
        """Return a new handle for the nested ``branch`` of keys.

        Equivalent to chained ``get`` calls, under a single acquisition of
        this handle's lock::

            doc.get_path("top_level", "dict")
        """
        with self._lock:
            value, _ = access.get_path(self._data, branch)
        return LockedJson(value)

    def get_index(self, index: int) -> LockedJson:
        """Return a new handle for array element ``index``.

        Negative, out-of-range or non-int indexes, and non-array nodes, yield
        the null sentinel::

            doc.get("top_level").get("array").get_index(1).get("key").must_int()
        """
        with self._lock:
            value, _ = access.get_index(self._data, index)
        return LockedJson(value)

    def check_get(self, key: str) -> tuple[LockedJson, bool]:
        """Like ``get`` but also report whether ``key`` was present.

        Distinguishes a key holding ``null`` from a missing key::

            data, ok = doc.get("top_level").check_get("inner")
            if ok:
                ...
        """
        with self._lock:
            value, found = access.get_key(self._data, key)
        return LockedJson(value), found

    # ------------------------------------------------------------------
    # Strict accessors
    # ------------------------------------------------------------------

    def _read(self, convert: Callable[[Any], T]) -> T:
        with self._lock:
            return convert(self._data)

    def as_object(self) -> dict[str, Any]:
        """Return a shallow copy of this object node."""
        return self._read(coerce.to_object)

    def as_array(self) -> list[Any]:
        """Return a shallow copy of this array node."""
        return self._read(coerce.to_array)

    def as_bool(self) -> bool:
        return self._read(coerce.to_bool)

    def as_string(self) -> str:
        return self._read(coerce.to_string)

    def as_bytes(self) -> bytes:
        """Return this string node encoded as UTF-8."""
        return self._read(coerce.to_bytes)

    def as_string_array(self) -> list[str]:
        """Return this array node as strings; ``null`` elements become ``""``."""
        return self._read(coerce.to_string_array)

    def as_float64(self) -> float:
        return self._read(coerce.to_float64)

    def as_int(self) -> int:
        return self._read(coerce.to_int)

    def as_int64(self) -> int:
        return self._read(coerce.to_int64)

    def as_uint64(self) -> int:
        return self._read(coerce.to_uint64)

    # ------------------------------------------------------------------
    # Lenient accessors
    # ------------------------------------------------------------------

    def _read_or(self, convert: Callable[[Any], T], default: T) -> T:
        try:
            return self._read(convert)
        except TypeMismatchError:
            return default

    def must_array(self, default: list[Any] | None = None) -> list[Any]:
        """Return the array, else ``default``, else a new empty list.

        Handy for iterating without a type check::

            for item in doc.get("results").must_array():
                ...
        """
        return self._read_or(coerce.to_array, [] if default is None else default)

    def must_map(self, default: dict[str, Any] | None = None) -> dict[str, Any]:
        """Return the object, else ``default``, else a new empty dict."""
        return self._read_or(coerce.to_object, {} if default is None else default)

    def must_string(self, default: str = "") -> str:
        return self._read_or(coerce.to_string, default)

    def must_string_array(self, default: list[str] | None = None) -> list[str]:
        return self._read_or(
            coerce.to_string_array, [] if default is None else default
        )

    def must_int(self, default: int = 0) -> int:
        """Return the int, else ``default``, else ``0``.

        Useful where a plain value is needed in a single expression::

            handler(doc.get("param").must_int(), doc.get("opt").must_int(5150))
        """
        return self._read_or(coerce.to_int, default)

    def must_float64(self, default: float = 0.0) -> float:
        return self._read_or(coerce.to_float64, default)

    def must_bool(self, default: bool = False) -> bool:
        return self._read_or(coerce.to_bool, default)

    def must_int64(self, default: int = 0) -> int:
        return self._read_or(coerce.to_int64, default)

    def must_uint64(self, default: int = 0) -> int:
        return self._read_or(coerce.to_uint64, default)
