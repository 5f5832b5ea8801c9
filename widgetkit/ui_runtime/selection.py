"""Selection store: current value plus toggle/clear semantics."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from widgetkit.api.dropdown import (
    HostValue,
    MultipleSelection,
    OptionKey,
    Selection,
    SelectionMode,
    SingleSelection,
)
from widgetkit.runtime.errors import AnomalyReporter, configuration_anomaly, usage_anomaly
from widgetkit.ui_runtime.catalog import OptionCatalog, is_option_key


@dataclass(frozen=True, slots=True)
class ToggleOutcome:
    """Result of one toggle request."""

    changed: bool
    close_requested: bool = False
    reselected: bool = False
    rejected: str | None = None


def empty_selection(mode: SelectionMode) -> Selection:
    if mode is SelectionMode.MULTIPLE:
        return MultipleSelection()
    return SingleSelection()


def to_host_value(selection: Selection) -> HostValue:
    """Convert the tagged union to the host's value shape."""
    if isinstance(selection, MultipleSelection):
        return list(selection.keys)
    return selection.key


def selection_from_host_value(
    mode: SelectionMode,
    value: HostValue,
    report: AnomalyReporter,
) -> Selection:
    """Normalize a host value into the tagged union for ``mode``."""
    if value is None:
        return empty_selection(mode)
    if mode is SelectionMode.SINGLE:
        if is_option_key(value):
            return SingleSelection(value)  # type: ignore[arg-type]
        configuration_anomaly(
            report,
            "value_shape_mismatch",
            f"single-mode value must be a str/int key or None, got {type(value).__name__}",
        )
        return SingleSelection()
    if is_option_key(value):
        configuration_anomaly(
            report,
            "value_shape_mismatch",
            "multiple-mode value should be a sequence of keys; wrapping the scalar",
        )
        return MultipleSelection((value,))  # type: ignore[arg-type]
    if not isinstance(value, Sequence):
        configuration_anomaly(
            report,
            "value_shape_mismatch",
            f"multiple-mode value must be a sequence of keys, got {type(value).__name__}",
        )
        return MultipleSelection()
    keys: list[OptionKey] = []
    for item in value:
        if not is_option_key(item):
            configuration_anomaly(
                report,
                "value_shape_mismatch",
                f"ignoring non-key entry {item!r} in multiple-mode value",
            )
            continue
        if item not in keys:
            keys.append(item)
    return MultipleSelection(tuple(keys))


class SelectionStore:
    """Owns the current selection and its mutation rules."""

    def __init__(
        self,
        mode: SelectionMode,
        report: AnomalyReporter,
        selection: Selection | None = None,
    ) -> None:
        self._mode = mode
        self._report = report
        self._selection = selection if selection is not None else empty_selection(mode)

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def is_empty(self) -> bool:
        return self._selection.is_empty

    def toggle(self, key: OptionKey, catalog: OptionCatalog) -> ToggleOutcome:
        """Toggle key; single mode replaces the scalar and requests close."""
        option = catalog.find(key)
        if option is None:
            usage_anomaly(
                self._report,
                "unknown_key",
                f"toggle of key {key!r} which is not in the option catalog",
                key=key,
            )
            return ToggleOutcome(changed=False, rejected="unknown_key")
        if option.disabled:
            return ToggleOutcome(changed=False, rejected="disabled")

        current = self._selection
        if isinstance(current, SingleSelection):
            if current.key == key:
                return ToggleOutcome(changed=False, close_requested=True, reselected=True)
            self._selection = SingleSelection(key)
            return ToggleOutcome(changed=True, close_requested=True)

        if key in current.keys:
            self._selection = MultipleSelection(tuple(k for k in current.keys if k != key))
        else:
            self._selection = MultipleSelection((*current.keys, key))
        return ToggleOutcome(changed=True)

    def remove(self, key: OptionKey) -> bool:
        """Drop one key from a multiple selection (chip removal)."""
        current = self._selection
        if isinstance(current, SingleSelection):
            if current.key is None or current.key != key:
                return False
            self._selection = SingleSelection()
            return True
        if key not in current.keys:
            return False
        self._selection = MultipleSelection(tuple(k for k in current.keys if k != key))
        return True

    def clear(self) -> bool:
        """Reset to the empty selection; returns whether anything was selected."""
        if self._selection.is_empty:
            return False
        self._selection = empty_selection(self._mode)
        return True

    def replace(self, selection: Selection) -> bool:
        """Adopt a host-supplied selection without emitting."""
        if selection == self._selection:
            return False
        self._selection = selection
        return True

    def reconcile(
        self,
        host_value: HostValue,
        previous_host_value: HostValue,
        *,
        controlled: bool = False,
    ) -> bool:
        """Adopt ``host_value``; uncontrolled hosts only when it changed since last update."""
        if not controlled and host_value == previous_host_value:
            return False
        return self.replace(selection_from_host_value(self._mode, host_value, self._report))

    def describe(self, catalog: OptionCatalog, placeholder: str) -> str:
        current = self._selection
        if isinstance(current, SingleSelection):
            if current.key is None:
                return placeholder
            return catalog.label_for(current.key) or placeholder
        if not current.keys:
            return placeholder
        if len(current.keys) == 1:
            return catalog.label_for(current.keys[0]) or placeholder
        return f"{len(current.keys)} selected"

    def to_host_value(self) -> HostValue:
        return to_host_value(self._selection)
