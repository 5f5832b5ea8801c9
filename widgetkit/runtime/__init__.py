"""Widget runtime modules."""

from widgetkit.runtime.debug_config import DebugConfig, load_debug_config
from widgetkit.runtime.errors import AnomalyKind, AnomalyReporter
from widgetkit.runtime.events import EventBus
from widgetkit.runtime.flow import FlowMachine
from widgetkit.runtime.logging import configure_logging, get_logger, setup_logging

__all__ = [
    "AnomalyKind",
    "AnomalyReporter",
    "DebugConfig",
    "EventBus",
    "FlowMachine",
    "configure_logging",
    "get_logger",
    "load_debug_config",
    "setup_logging",
]
