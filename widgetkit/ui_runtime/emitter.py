"""Change emitter: one outward notification per discrete user action."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from widgetkit.api.dropdown import ChangeHandler, Selection
from widgetkit.ui_runtime.selection import to_host_value


@dataclass(slots=True)
class ActionScope:
    """Mutable marker a handler uses to request a forced emit."""

    force_emit: bool = False


class ChangeEmitter:
    """Wraps store mutations so the host sees exactly one ``on_change`` per action.

    Nested actions collapse into the outermost one.
    """

    def __init__(
        self,
        on_change: ChangeHandler,
        read_selection: Callable[[], Selection],
        logger: logging.Logger,
    ) -> None:
        self._on_change = on_change
        self._read_selection = read_selection
        self._logger = logger
        self._current: ActionScope | None = None

    def set_handler(self, on_change: ChangeHandler) -> None:
        self._on_change = on_change

    @contextmanager
    def action(self, name: str) -> Iterator[ActionScope]:
        if self._current is not None:
            yield self._current
            return

        scope = ActionScope()
        before = self._read_selection()
        self._current = scope
        try:
            yield scope
        finally:
            self._current = None
        after = self._read_selection()
        if after != before or scope.force_emit:
            self._emit(name, after)

    def _emit(self, action: str, selection: Selection) -> None:
        value = to_host_value(selection)
        self._logger.debug("dropdown change", extra={"action": action, "value": value})
        self._on_change(value)
