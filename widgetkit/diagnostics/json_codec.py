"""JSON codec helpers for log records and diagnostics export."""

from __future__ import annotations

from typing import Any

import orjson


def _default(value: Any) -> Any:
    # Option decorations and enum members reach log payloads as opaque objects.
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return repr(value)


def dumps_bytes(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> bytes:
    """Serialize payload to UTF-8 JSON bytes."""
    options = 0
    if pretty:
        options |= orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    return orjson.dumps(payload, default=_default, option=options)


def dumps_text(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> str:
    return dumps_bytes(payload, pretty=pretty, sort_keys=sort_keys).decode("utf-8")


def loads(data: bytes | str) -> Any:
    return orjson.loads(data)


__all__ = ["dumps_bytes", "dumps_text", "loads"]
