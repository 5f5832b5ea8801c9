"""Widget UI runtime: the dropdown selection engine and its helpers."""

from widgetkit.ui_runtime.catalog import OptionCatalog, normalize_options
from widgetkit.ui_runtime.controller import InteractionController, KeyOutcome
from widgetkit.ui_runtime.dismissal import DismissalScope
from widgetkit.ui_runtime.dropdown import Dropdown
from widgetkit.ui_runtime.emitter import ChangeEmitter
from widgetkit.ui_runtime.filtering import FilterEngine, filter_options
from widgetkit.ui_runtime.focus import clamp_focus, first_enabled_index, last_enabled_index, step_focus
from widgetkit.ui_runtime.geometry import BoundsDismissalPredicate, Rect
from widgetkit.ui_runtime.keymap import map_key_name
from widgetkit.ui_runtime.selection import (
    SelectionStore,
    ToggleOutcome,
    selection_from_host_value,
    to_host_value,
)
from widgetkit.ui_runtime.view_model import project_view

__all__ = [
    "BoundsDismissalPredicate",
    "ChangeEmitter",
    "DismissalScope",
    "Dropdown",
    "FilterEngine",
    "InteractionController",
    "KeyOutcome",
    "OptionCatalog",
    "Rect",
    "SelectionStore",
    "ToggleOutcome",
    "clamp_focus",
    "filter_options",
    "first_enabled_index",
    "last_enabled_index",
    "map_key_name",
    "normalize_options",
    "project_view",
    "selection_from_host_value",
    "step_focus",
    "to_host_value",
]
