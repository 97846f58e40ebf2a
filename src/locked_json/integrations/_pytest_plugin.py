"""pytest plugin for locked-json.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from locked_json import LockedJson


@pytest.fixture
def locked_json_document() -> Any:
    """Fixture that returns a factory for ``LockedJson`` documents.

    Function-scoped so every test builds its documents from scratch; handles
    share a tree only if the test passes the same Python value twice.

    Usage in tests::

        def test_reads_nested(locked_json_document):
            doc = locked_json_document(b'{"a": {"b": 1}}')
            assert doc.get_path("a", "b").as_int() == 1

    Returns:
        A callable ``_make(source=None) -> LockedJson``.  ``None`` yields an
        empty object, ``bytes``/``str`` are parsed as JSON, and any other
        value is wrapped by reference.
    """

    def _make(source: Any = None) -> LockedJson:
        """Build a ``LockedJson`` from ``source``.

        Raises:
            ParseError: When ``source`` is bytes/str that is not valid JSON.
        """
        if source is None:
            return LockedJson.empty()
        if isinstance(source, (bytes, bytearray, str)):
            return LockedJson.from_bytes(source)
        return LockedJson.from_value(source)

    return _make
