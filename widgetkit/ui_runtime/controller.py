"""Open/closed state machine, keyboard focus, and dismissal for the dropdown."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from widgetkit.api.dropdown import (
    DismissalPredicate,
    InteractionState,
    OptionKey,
    OptionRecord,
)
from widgetkit.api.events import EventBus
from widgetkit.api.flow import FlowContext, FlowTransition
from widgetkit.runtime.errors import AnomalyReporter, out_of_range_anomaly
from widgetkit.runtime.flow import FlowMachine
from widgetkit.ui_runtime.catalog import OptionCatalog
from widgetkit.ui_runtime.dismissal import DismissalScope
from widgetkit.ui_runtime.filtering import FilterEngine
from widgetkit.ui_runtime.focus import (
    NO_FOCUS,
    clamp_focus,
    first_enabled_index,
    last_enabled_index,
    step_focus,
)
from widgetkit.ui_runtime.keymap import map_key_name
from widgetkit.ui_runtime.selection import SelectionStore, ToggleOutcome

CLOSED = InteractionState.CLOSED
OPEN = InteractionState.OPEN


@dataclass(frozen=True, slots=True)
class KeyOutcome:
    """Result of routing one key press through the controller."""

    handled: bool
    toggle: ToggleOutcome | None = None


class InteractionController:
    """Sole mutator of engine state; invoked only from the UI thread."""

    def __init__(
        self,
        *,
        catalog: OptionCatalog,
        store: SelectionStore,
        searchable: bool,
        disabled: bool,
        report: AnomalyReporter,
        logger: logging.Logger,
        environment: EventBus | None = None,
        is_outside: DismissalPredicate | None = None,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._searchable = searchable
        self._disabled = disabled
        self._report = report
        self._logger = logger
        self._filter = FilterEngine(catalog)
        self._focus_index = NO_FOCUS
        self._search_focused = False
        self._scope = DismissalScope(environment, is_outside, self._dismiss_from_environment, logger)
        self._machine: FlowMachine[InteractionState] = FlowMachine(CLOSED, name="dropdown", logger=logger)
        self._machine.add_transitions(self._transitions())

    def _transitions(self) -> tuple[FlowTransition[InteractionState], ...]:
        return (
            FlowTransition(
                trigger="activate",
                source=CLOSED,
                target=OPEN,
                guard=self._can_open,
                after=self._enter_open,
            ),
            FlowTransition(trigger="activate", source=OPEN, target=CLOSED, after=self._enter_closed),
            FlowTransition(trigger="dismiss", source=OPEN, target=CLOSED, after=self._enter_closed),
            FlowTransition(trigger="commit", source=OPEN, target=CLOSED, after=self._enter_closed),
        )

    @property
    def state(self) -> InteractionState:
        return self._machine.state

    @property
    def is_open(self) -> bool:
        return self._machine.state is OPEN

    @property
    def catalog(self) -> OptionCatalog:
        return self._catalog

    @property
    def store(self) -> SelectionStore:
        return self._store

    @property
    def visible(self) -> tuple[OptionRecord, ...]:
        return self._filter.visible

    @property
    def search_term(self) -> str:
        return self._filter.term

    @property
    def focus_index(self) -> int:
        return self._focus_index

    @property
    def search_focused(self) -> bool:
        return self._search_focused

    @property
    def searchable(self) -> bool:
        return self._searchable

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def listening(self) -> bool:
        return self._scope.active

    # -- transitions -------------------------------------------------------

    def activate(self) -> bool:
        """Trigger click/Enter/Space: opens when closed, closes when open."""
        return self._machine.trigger("activate")

    def dismiss(self, reason: str = "dismiss") -> bool:
        """Close without touching the selection; always reachable while open."""
        changed = self._machine.trigger("dismiss")
        if changed:
            self._logger.debug("dropdown dismissed", extra={"reason": reason})
        return changed

    def _can_open(self, context: FlowContext[InteractionState]) -> bool:
        return not self._disabled

    def _enter_open(self, context: FlowContext[InteractionState]) -> None:
        if self._searchable:
            self._search_focused = True
            self._focus_index = NO_FOCUS
        else:
            self._search_focused = False
            self._focus_index = first_enabled_index(self._filter.visible)
        self._scope.acquire()

    def _enter_closed(self, context: FlowContext[InteractionState]) -> None:
        try:
            self._scope.release()
        finally:
            self._filter.set_search_term("")
            self._focus_index = NO_FOCUS
            self._search_focused = False

    def _dismiss_from_environment(self, reason: str) -> None:
        self.dismiss(reason)

    # -- search and focus --------------------------------------------------

    def set_search_term(self, term: str) -> bool:
        """Recompute VisibleOptions; focus resets only when the projection changed."""
        if not self.is_open:
            return False
        if not self._filter.set_search_term(term):
            return False
        self._focus_index = first_enabled_index(self._filter.visible)
        return True

    def move_focus(self, delta: int) -> int:
        if self.is_open:
            self._focus_index = step_focus(self._filter.visible, self._focus_index, delta)
        return self._focus_index

    def focus_first(self) -> int:
        if self.is_open:
            self._focus_index = first_enabled_index(self._filter.visible)
        return self._focus_index

    def focus_last(self) -> int:
        if self.is_open:
            self._focus_index = last_enabled_index(self._filter.visible)
        return self._focus_index

    def _clamp_focus(self) -> None:
        clamped = clamp_focus(self._focus_index, len(self._filter.visible))
        if clamped != self._focus_index:
            out_of_range_anomaly(
                self._report,
                "focus_clamped",
                f"focus index {self._focus_index} clamped to {clamped}",
                previous=self._focus_index,
                clamped=clamped,
                visible_count=len(self._filter.visible),
            )
            self._focus_index = clamped

    # -- selection ---------------------------------------------------------

    def select(self, key: OptionKey) -> ToggleOutcome:
        """Activate the visible option with ``key``."""
        if not self.is_open or self._disabled:
            return ToggleOutcome(changed=False, rejected="closed")
        if self._catalog.contains(key) and not any(o.value == key for o in self._filter.visible):
            self._logger.debug("ignoring activation of filtered-out option", extra={"key": key})
            return ToggleOutcome(changed=False, rejected="not_visible")
        outcome = self._store.toggle(key, self._catalog)
        if outcome.close_requested:
            self._machine.trigger("commit")
        else:
            self._clamp_focus()
        return outcome

    def select_focused(self) -> ToggleOutcome | None:
        visible = self._filter.visible
        if not self.is_open or not 0 <= self._focus_index < len(visible):
            return None
        return self.select(visible[self._focus_index].value)

    def clear(self) -> bool:
        if self._disabled:
            return False
        return self._store.clear()

    def remove(self, key: OptionKey) -> bool:
        if self._disabled:
            return False
        return self._store.remove(key)

    # -- keyboard ----------------------------------------------------------

    def handle_key(self, key_name: str) -> KeyOutcome:
        key = map_key_name(key_name)
        if key is None or self._disabled:
            return KeyOutcome(handled=False)
        if not self.is_open:
            if key in {"enter", "space"}:
                return KeyOutcome(handled=self.activate())
            return KeyOutcome(handled=False)
        if key == "escape":
            return KeyOutcome(handled=self.dismiss("escape"))
        if key == "down":
            self.move_focus(+1)
            return KeyOutcome(handled=True)
        if key == "up":
            self.move_focus(-1)
            return KeyOutcome(handled=True)
        if key == "home":
            self.focus_first()
            return KeyOutcome(handled=True)
        if key == "end":
            self.focus_last()
            return KeyOutcome(handled=True)
        if key == "enter" or (key == "space" and not self._searchable):
            return KeyOutcome(handled=True, toggle=self.select_focused())
        return KeyOutcome(handled=False)

    # -- host refresh ------------------------------------------------------

    def set_catalog(self, catalog: OptionCatalog) -> None:
        self._catalog = catalog
        if self._filter.set_catalog(catalog) and self.is_open:
            self._clamp_focus()

    def replace_store(self, store: SelectionStore) -> None:
        self._store = store

    def set_predicate(self, is_outside: DismissalPredicate | None) -> None:
        self._scope.set_predicate(is_outside)

    def set_searchable(self, searchable: bool) -> None:
        if searchable == self._searchable:
            return
        self._searchable = searchable
        if not self.is_open:
            return
        self._search_focused = searchable
        if not searchable and self._filter.set_search_term(""):
            self._focus_index = first_enabled_index(self._filter.visible)

    def set_disabled(self, disabled: bool) -> None:
        self._disabled = disabled
        if disabled:
            self.dismiss("disabled")

    def teardown(self) -> None:
        """Close and release every listener, whatever state we are in."""
        try:
            self.dismiss("teardown")
        finally:
            self._scope.release()
