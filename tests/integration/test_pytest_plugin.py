"""Integration tests for the locked-json pytest plugin.

These tests verify that the locked_json_document fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require locked-json to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from locked_json import LockedJson, ParseError


def test_fixture_returns_callable(locked_json_document: Any) -> None:
    """The fixture should return a factory, not a document."""
    assert callable(locked_json_document)


def test_fixture_builds_empty_document(locked_json_document: Any) -> None:
    doc = locked_json_document()
    assert isinstance(doc, LockedJson)
    assert doc.interface() == {}


def test_fixture_parses_bytes_and_text(locked_json_document: Any) -> None:
    assert locked_json_document(b'{"a": 1}').get("a").as_int() == 1
    assert locked_json_document("[true]").get_index(0).as_bool() is True


def test_fixture_wraps_values(locked_json_document: Any) -> None:
    data = {"a": {"b": 2}}
    doc = locked_json_document(data)
    doc.get("a").set("c", 3)
    assert data == {"a": {"b": 2, "c": 3}}


def test_fixture_propagates_parse_errors(locked_json_document: Any) -> None:
    with pytest.raises(ParseError):
        locked_json_document(b"{oops")


def test_plugin_discovery() -> None:
    """Verify locked_json_document appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "locked_json_document" in result.stdout, (
        f"locked_json_document not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
