"""Geometry primitives and bounds-based outside-pointer detection."""

from __future__ import annotations

from dataclasses import dataclass

from widgetkit.api.input_events import PointerEvent


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


class BoundsDismissalPredicate:
    """Classifies a pointer event as outside when it misses trigger and menu rects.

    The rendering layer calls :meth:`set_bounds` after each layout pass; the menu
    rect is ``None`` while the menu is not laid out.
    """

    __slots__ = ("_trigger", "_menu")

    def __init__(self, trigger: Rect | None = None, menu: Rect | None = None) -> None:
        self._trigger = trigger
        self._menu = menu

    def set_bounds(self, *, trigger: Rect | None, menu: Rect | None) -> None:
        self._trigger = trigger
        self._menu = menu

    def __call__(self, event: PointerEvent) -> bool:
        for rect in (self._trigger, self._menu):
            if rect is not None and rect.contains(event.x, event.y):
                return False
        return True
