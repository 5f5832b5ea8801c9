"""Environment channel contract shared by the host and its widgets."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Subscription:
    """Token returned by ``subscribe``; hand it back to ``unsubscribe``."""

    id: int


class EventBus(Protocol):
    """Channel the host publishes pointer and key events on.

    Widgets only subscribe while they need environment input (an open menu)
    and unsubscribe when they stop.
    """

    def subscribe[TEvent](
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription: ...

    def unsubscribe(self, subscription: Subscription) -> None:
        """Drop a subscription; unknown tokens are ignored."""

    def publish(self, event: object) -> int:
        """Deliver ``event`` to matching subscribers and return how many ran."""


def create_event_bus() -> EventBus:
    """Create the in-process environment bus."""
    from widgetkit.runtime.events import RuntimeEventBus

    return RuntimeEventBus()
