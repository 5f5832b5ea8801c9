from __future__ import annotations

from widgetkit.api.dropdown import SelectionMode
from widgetkit.diagnostics.json_codec import dumps_bytes, dumps_text, loads


def test_codec_serializes_opaque_values_with_repr() -> None:
    text = dumps_text({"mode": SelectionMode.MULTIPLE, "keys": frozenset({"b", "a"})})
    payload = loads(text)
    assert payload["mode"] == repr(SelectionMode.MULTIPLE)
    assert payload["keys"] == ["a", "b"]


def test_codec_supports_sorted_pretty_output() -> None:
    data = dumps_bytes({"b": 1, "a": 2}, pretty=True, sort_keys=True)
    assert data.startswith(b"{\n")
    assert data.index(b'"a"') < data.index(b'"b"')
