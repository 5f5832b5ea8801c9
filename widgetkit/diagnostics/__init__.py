"""Developer diagnostics core package."""

from widgetkit.diagnostics.event import DiagnosticEvent
from widgetkit.diagnostics.hub import DiagnosticHub
from widgetkit.diagnostics.ring_buffer import RingBuffer


def create_diagnostic_hub_from_env() -> DiagnosticHub:
    """Build a diagnostics hub from `WIDGETKIT_DEBUG_DIAGNOSTICS*` settings."""
    from widgetkit.runtime.debug_config import load_debug_config

    config = load_debug_config()
    return DiagnosticHub(
        capacity=config.diagnostics_capacity,
        enabled=config.diagnostics_enabled,
        category_allowlist=config.diagnostics_categories,
    )


__all__ = [
    "DiagnosticEvent",
    "DiagnosticHub",
    "RingBuffer",
    "create_diagnostic_hub_from_env",
]
