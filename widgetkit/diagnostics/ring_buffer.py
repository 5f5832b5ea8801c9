"""Bounded anomaly history for the diagnostics hub."""

from __future__ import annotations

from collections import deque


class RingBuffer[T]:
    """Keeps the newest ``capacity`` items; older ones fall off the front."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._items: deque[T] = deque(maxlen=int(capacity))

    @property
    def capacity(self) -> int:
        return self._items.maxlen or 0

    def __len__(self) -> int:
        return len(self._items)

    def append(self, value: T) -> None:
        self._items.append(value)

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self, *, limit: int | None = None) -> list[T]:
        """Return items oldest first, or only the newest ``limit``."""
        items = list(self._items)
        if limit is None or limit >= len(items):
            return items
        return items[len(items) - max(0, int(limit)) :]
