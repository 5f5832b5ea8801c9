"""Public widgetkit API contracts."""

from widgetkit.api.dropdown import (
    ChipView,
    DismissalPredicate,
    DropdownHandlers,
    DropdownProps,
    DropdownView,
    InteractionState,
    ListboxSemantics,
    MultipleSelection,
    OptionRecord,
    OptionView,
    SelectionMode,
    SingleSelection,
    create_dropdown,
)
from widgetkit.api.events import EventBus, Subscription, create_event_bus
from widgetkit.api.flow import FlowContext, FlowMachine, FlowTransition, create_flow_machine
from widgetkit.api.input_events import KeyEvent, PointerEvent
from widgetkit.api.logging import JsonFormatter, LoggingConfig

__all__ = [
    "ChipView",
    "DismissalPredicate",
    "DropdownHandlers",
    "DropdownProps",
    "DropdownView",
    "EventBus",
    "FlowContext",
    "FlowMachine",
    "FlowTransition",
    "InteractionState",
    "JsonFormatter",
    "KeyEvent",
    "ListboxSemantics",
    "LoggingConfig",
    "MultipleSelection",
    "OptionRecord",
    "OptionView",
    "PointerEvent",
    "SelectionMode",
    "SingleSelection",
    "Subscription",
    "create_dropdown",
    "create_event_bus",
    "create_flow_machine",
]
