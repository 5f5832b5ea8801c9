"""Reusable interactive UI widget engines."""

from widgetkit.api.dropdown import DropdownProps, OptionRecord, SelectionMode, create_dropdown
from widgetkit.api.events import create_event_bus

__all__ = ["DropdownProps", "OptionRecord", "SelectionMode", "create_dropdown", "create_event_bus"]
