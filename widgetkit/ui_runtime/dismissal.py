"""Open-scoped outside-pointer and Escape listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType

from widgetkit.api.dropdown import DismissalPredicate
from widgetkit.api.events import EventBus, Subscription
from widgetkit.api.input_events import KeyEvent, PointerEvent
from widgetkit.ui_runtime.keymap import map_key_name

DISMISS_OUTSIDE_POINTER = "outside_pointer"
DISMISS_ESCAPE = "escape"


class DismissalScope:
    """Holds at most one pointer and one key subscription on the environment bus.

    ``acquire`` and ``release`` are idempotent so re-entrant open/close paths can
    never stack duplicate listeners or leak one.
    """

    __slots__ = ("_environment", "_is_outside", "_on_dismiss", "_logger", "_pointer_sub", "_key_sub")

    def __init__(
        self,
        environment: EventBus | None,
        is_outside: DismissalPredicate | None,
        on_dismiss: Callable[[str], None],
        logger: logging.Logger,
    ) -> None:
        self._environment = environment
        self._is_outside = is_outside
        self._on_dismiss = on_dismiss
        self._logger = logger
        self._pointer_sub: Subscription | None = None
        self._key_sub: Subscription | None = None

    @property
    def active(self) -> bool:
        return self._pointer_sub is not None or self._key_sub is not None

    def set_predicate(self, is_outside: DismissalPredicate | None) -> None:
        self._is_outside = is_outside

    def acquire(self) -> None:
        environment = self._environment
        if environment is None or self.active:
            return
        try:
            self._pointer_sub = environment.subscribe(PointerEvent, self._handle_pointer)
            self._key_sub = environment.subscribe(KeyEvent, self._handle_key)
        except BaseException:
            self.release()
            raise
        self._logger.debug("dismissal listeners acquired")

    def release(self) -> None:
        environment = self._environment
        if environment is None or not self.active:
            return
        pointer_sub, key_sub = self._pointer_sub, self._key_sub
        self._pointer_sub = None
        self._key_sub = None
        try:
            if pointer_sub is not None:
                environment.unsubscribe(pointer_sub)
        finally:
            if key_sub is not None:
                environment.unsubscribe(key_sub)
        self._logger.debug("dismissal listeners released")

    def __enter__(self) -> DismissalScope:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def _handle_pointer(self, event: PointerEvent) -> None:
        if event.event_type != "pointer_down" or self._is_outside is None:
            return
        if self._is_outside(event):
            self._on_dismiss(DISMISS_OUTSIDE_POINTER)

    def _handle_key(self, event: KeyEvent) -> None:
        if event.event_type != "key_down":
            return
        if map_key_name(event.value) == "escape":
            self._on_dismiss(DISMISS_ESCAPE)
