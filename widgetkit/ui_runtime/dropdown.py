"""Host-facing dropdown/combobox selection engine."""

from __future__ import annotations

from types import TracebackType

from widgetkit.api.dropdown import (
    ChangeHandler,
    DismissalPredicate,
    DropdownHandlers,
    DropdownProps,
    DropdownView,
    HostValue,
    InteractionState,
    OptionKey,
    Selection,
    SelectionMode,
)
from widgetkit.api.events import EventBus
from widgetkit.diagnostics.hub import DiagnosticHub
from widgetkit.runtime.errors import AnomalyReporter
from widgetkit.runtime.logging import get_logger
from widgetkit.ui_runtime.catalog import OptionCatalog
from widgetkit.ui_runtime.controller import InteractionController
from widgetkit.ui_runtime.emitter import ChangeEmitter
from widgetkit.ui_runtime.selection import SelectionStore, ToggleOutcome, selection_from_host_value
from widgetkit.ui_runtime.view_model import project_view

_UNCHANGED = object()


class Dropdown:
    """Selection engine behind one dropdown widget.

    The host supplies :class:`DropdownProps` at construction and again on every
    render via :meth:`update`. A rendering layer reads :meth:`view` and binds
    :meth:`handlers` to its elements. Changes reach the host through
    ``on_change`` exactly once per user action that altered the selection.

    Outside-click dismissal needs both an ``environment`` bus, on which the
    host publishes :class:`~widgetkit.api.input_events.PointerEvent` and
    :class:`~widgetkit.api.input_events.KeyEvent`, and an ``is_outside``
    predicate. Listeners live only while the menu is open; :meth:`dispose`
    (or leaving a ``with`` block) releases them unconditionally.
    """

    def __init__(
        self,
        props: DropdownProps,
        *,
        on_change: ChangeHandler,
        environment: EventBus | None = None,
        is_outside: DismissalPredicate | None = None,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        self._logger = get_logger("widgetkit.dropdown")
        self._report = AnomalyReporter(self._logger, diagnostics)
        self._props = props
        self._disposed = False
        mode = SelectionMode.coerce(props.mode)
        store = SelectionStore(
            mode,
            self._report,
            selection_from_host_value(mode, props.value, self._report),
        )
        self._controller = InteractionController(
            catalog=OptionCatalog.from_raw(props.options, self._report),
            store=store,
            searchable=props.searchable,
            disabled=props.disabled,
            report=self._report,
            logger=self._logger,
            environment=environment,
            is_outside=is_outside,
        )
        self._emitter = ChangeEmitter(on_change, self._read_selection, self._logger)
        self._handlers = DropdownHandlers(
            on_trigger_activate=self.on_trigger_activate,
            on_search_change=self.on_search_change,
            on_option_activate=self.on_option_activate,
            on_key_down=self.on_key_down,
            on_clear=self.on_clear,
            on_chip_remove=self.on_chip_remove,
        )

    def _read_selection(self) -> Selection:
        return self._controller.store.selection

    @property
    def props(self) -> DropdownProps:
        return self._props

    @property
    def state(self) -> InteractionState:
        return self._controller.state

    @property
    def is_open(self) -> bool:
        return self._controller.is_open

    @property
    def selection(self) -> Selection:
        return self._controller.store.selection

    @property
    def value(self) -> HostValue:
        return self._controller.store.to_host_value()

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def listening(self) -> bool:
        """Whether dismissal listeners are currently registered."""
        return self._controller.listening

    # -- host refresh ------------------------------------------------------

    def update(
        self,
        props: DropdownProps,
        *,
        on_change: ChangeHandler | None = None,
        is_outside: DismissalPredicate | None | object = _UNCHANGED,
    ) -> None:
        """Apply re-supplied host props; never emits ``on_change``."""
        if self._disposed:
            return
        previous = self._props
        self._props = props
        controller = self._controller
        if on_change is not None:
            self._emitter.set_handler(on_change)
        if is_outside is not _UNCHANGED:
            controller.set_predicate(is_outside)  # type: ignore[arg-type]

        if props.options != previous.options:
            catalog = OptionCatalog.from_raw(props.options, self._report)
            if catalog != controller.catalog:
                controller.set_catalog(catalog)

        if props.mode is not previous.mode:
            mode = SelectionMode.coerce(props.mode)
            controller.replace_store(
                SelectionStore(mode, self._report, selection_from_host_value(mode, props.value, self._report))
            )
        else:
            controller.store.reconcile(props.value, previous.value, controlled=props.controlled)

        controller.set_searchable(props.searchable)
        controller.set_disabled(props.disabled)

    # -- presentation boundary ----------------------------------------------

    def view(self) -> DropdownView:
        return project_view(
            self._controller,
            widget_id=self._props.widget_id,
            placeholder=self._props.placeholder,
            label=self._props.label,
        )

    def handlers(self) -> DropdownHandlers:
        return self._handlers

    def on_trigger_activate(self) -> None:
        if self._disposed:
            return
        self._controller.activate()

    def on_search_change(self, term: str) -> None:
        if self._disposed:
            return
        self._controller.set_search_term(term)

    def on_option_activate(self, key: OptionKey) -> None:
        if self._disposed:
            return
        with self._emitter.action("select") as scope:
            outcome = self._controller.select(key)
            scope.force_emit = self._forces_reselect_emit(outcome)

    def on_key_down(self, key_name: str) -> bool:
        """Route one key press; returns whether the widget consumed it."""
        if self._disposed:
            return False
        with self._emitter.action("key") as scope:
            outcome = self._controller.handle_key(key_name)
            scope.force_emit = self._forces_reselect_emit(outcome.toggle)
        return outcome.handled

    def on_clear(self) -> None:
        if self._disposed:
            return
        with self._emitter.action("clear"):
            self._controller.clear()

    def on_chip_remove(self, key: OptionKey) -> None:
        if self._disposed:
            return
        with self._emitter.action("chip_remove"):
            self._controller.remove(key)

    def dismiss(self) -> bool:
        """Programmatic close; selection is left untouched."""
        return self._controller.dismiss("host")

    def _forces_reselect_emit(self, outcome: ToggleOutcome | None) -> bool:
        return outcome is not None and outcome.reselected and self._props.emit_on_reselect

    # -- teardown ----------------------------------------------------------

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._controller.teardown()

    def __enter__(self) -> Dropdown:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()
