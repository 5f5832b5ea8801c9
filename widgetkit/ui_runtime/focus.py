"""FocusIndex arithmetic over visible options."""

from __future__ import annotations

from collections.abc import Sequence

from widgetkit.api.dropdown import OptionRecord

NO_FOCUS = -1


def first_enabled_index(options: Sequence[OptionRecord]) -> int:
    for index, option in enumerate(options):
        if not option.disabled:
            return index
    return NO_FOCUS


def last_enabled_index(options: Sequence[OptionRecord]) -> int:
    for index in range(len(options) - 1, -1, -1):
        if not options[index].disabled:
            return index
    return NO_FOCUS


def step_focus(options: Sequence[OptionRecord], current: int, delta: int) -> int:
    """Advance focus by +1/-1 with wraparound, skipping disabled entries."""
    count = len(options)
    if count == 0:
        return NO_FOCUS
    if current < 0 or current >= count:
        return first_enabled_index(options) if delta > 0 else last_enabled_index(options)
    step = 1 if delta > 0 else -1
    index = current
    for _ in range(count):
        index = (index + step) % count
        if not options[index].disabled:
            return index
    return NO_FOCUS


def clamp_focus(index: int, visible_count: int) -> int:
    """Clamp focus into ``[0, visible_count)``, or -1 when nothing is visible."""
    if visible_count <= 0 or index < 0:
        return NO_FOCUS
    return min(index, visible_count - 1)
