"""Backend-agnostic key normalization helpers."""

from __future__ import annotations

_KEY_MAP: dict[str, str] = {
    "enter": "enter",
    "return": "enter",
    "escape": "escape",
    "esc": "escape",
    "space": "space",
    "spacebar": "space",
    "arrowdown": "down",
    "down": "down",
    "arrowup": "up",
    "up": "up",
    "home": "home",
    "end": "end",
}


def map_key_name(key_name: str) -> str | None:
    """Normalize backend key names to widget key identifiers."""
    if key_name == " ":
        return "space"
    normalized = key_name.strip().lower().replace("_", "")
    return _KEY_MAP.get(normalized)
