"""Public environment input event types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event published by the host environment.

    ``target`` is an opaque handle for hit-testing backends that resolve
    elements instead of coordinates.
    """

    event_type: str
    x: float
    y: float
    button: int = 1
    target: object | None = None


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key/char event published by the host environment."""

    event_type: str
    value: str


__all__ = ["KeyEvent", "PointerEvent"]
