"""Tests for JSON parse/encode.

Covers:
- Parsing bytes, bytearray, str and streams
- Strictness: invalid UTF-8, malformed JSON, NaN/Infinity literals
- Compact and pretty output, key sorting, non-ASCII handling
- EncodeError for non-finite floats, cycles and foreign objects
- NumPy scalars are encoded as plain numbers/booleans
"""

from __future__ import annotations

import io
import json
from typing import Any

import numpy as np
import pytest

from locked_json.codec import encode, parse, parse_stream
from locked_json.config import EncodeConfig
from locked_json.errors import EncodeError, ParseError


class TestParse:
    def test_bytes(self) -> None:
        assert parse(b'{"a": [1, 2.5, "x", true, null]}') == {
            "a": [1, 2.5, "x", True, None]
        }

    def test_bytearray_and_str(self) -> None:
        assert parse(bytearray(b"[1]")) == [1]
        assert parse('"ok"') == "ok"

    def test_scalar_root(self) -> None:
        assert parse(b"null") is None
        assert parse(b"12") == 12

    def test_big_integers_are_exact(self) -> None:
        assert parse(b"18446744073709551615") == 2**64 - 1

    def test_utf8(self) -> None:
        assert parse('{"k": "żółw"}'.encode()) == {"k": "żółw"}

    @pytest.mark.parametrize(
        "raw", [b"", b"{", b"{'a': 1}", b"[1,]", b"{} x", b"tru"]
    )
    def test_malformed(self, raw: bytes) -> None:
        with pytest.raises(ParseError, match="invalid JSON"):
            parse(raw)

    def test_invalid_utf8(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(b'"\xff"')
        assert isinstance(exc_info.value.wrapped, UnicodeDecodeError)

    @pytest.mark.parametrize("raw", [b"NaN", b"[Infinity]", b'{"a": -Infinity}'])
    def test_non_standard_constants_rejected(self, raw: bytes) -> None:
        with pytest.raises(ParseError, match="non-standard JSON constant"):
            parse(raw)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse(b"{")

    def test_cause_is_chained(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(b"{")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
        assert exc_info.value.wrapped is exc_info.value.__cause__

    def test_deep_nesting_is_a_parse_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(b"[" * 200_000 + b"]" * 200_000)
        assert isinstance(exc_info.value.wrapped, RecursionError)


class TestParseStream:
    def test_binary_stream(self) -> None:
        assert parse_stream(io.BytesIO(b'{"a": 1}')) == {"a": 1}

    def test_text_stream(self) -> None:
        assert parse_stream(io.StringIO("[true]")) == [True]

    def test_malformed_stream(self) -> None:
        with pytest.raises(ParseError):
            parse_stream(io.BytesIO(b"[1, 2"))

    def test_read_error_propagates(self) -> None:
        class FailingReader(io.RawIOBase):
            def read(self, size: int = -1) -> bytes:
                raise OSError("disk gone")

        with pytest.raises(OSError, match="disk gone") as exc_info:
            parse_stream(FailingReader())
        assert not isinstance(exc_info.value, ParseError)


class TestEncode:
    def test_compact_sorted(self) -> None:
        assert encode({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'

    def test_unsorted(self) -> None:
        config = EncodeConfig(sort_keys=False)
        assert encode({"b": 1, "a": 2}, config) == b'{"b":1,"a":2}'

    def test_pretty(self) -> None:
        assert encode({"a": [1]}, pretty=True) == b'{\n  "a": [\n    1\n  ]\n}'

    def test_pretty_custom_indent(self) -> None:
        config = EncodeConfig(indent=4)
        assert encode({"a": 1}, config, pretty=True) == b'{\n    "a": 1\n}'

    def test_non_ascii_is_utf8_by_default(self) -> None:
        assert encode("żółw") == '"żółw"'.encode()

    def test_ensure_ascii(self) -> None:
        assert encode("é", EncodeConfig(ensure_ascii=True)) == b'"\\u00e9"'

    def test_numpy_scalars(self) -> None:
        value = {"i": np.int64(3), "f": np.float64(0.5), "b": np.bool_(True)}
        assert encode(value) == b'{"b":true,"f":0.5,"i":3}'

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), [float("-inf")]])
    def test_non_finite_floats(self, value: Any) -> None:
        with pytest.raises(EncodeError, match="cannot encode JSON"):
            encode(value)

    def test_cycle(self) -> None:
        data: dict[str, Any] = {}
        data["self"] = data
        with pytest.raises(EncodeError):
            encode(data)

    def test_foreign_object(self) -> None:
        with pytest.raises(EncodeError) as exc_info:
            encode({"a": object()})
        assert isinstance(exc_info.value.wrapped, TypeError)

    def test_round_trip(self) -> None:
        doc = {"a": {"b": [1, 2.5, None, True, "s"]}, "c": {}}
        assert parse(encode(doc)) == doc
        assert parse(encode(doc, pretty=True)) == doc
