"""Widget debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _csv(name: str) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return ()
    values = [part.strip() for part in raw.split(",")]
    return tuple(value for value in values if value)


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable debug configuration."""

    diagnostics_enabled: bool
    diagnostics_capacity: int
    log_level: str
    diagnostics_categories: tuple[str, ...] = field(default_factory=tuple)


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("WIDGETKIT_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        diagnostics_enabled=_flag("WIDGETKIT_DEBUG_DIAGNOSTICS", False),
        diagnostics_capacity=max(1, _int("WIDGETKIT_DEBUG_DIAGNOSTICS_CAPACITY", 1000)),
        diagnostics_categories=_csv("WIDGETKIT_DEBUG_DIAGNOSTICS_CATEGORIES"),
        log_level=resolve_log_level_name(),
    )


def enabled_diagnostics() -> bool:
    return load_debug_config().diagnostics_enabled
