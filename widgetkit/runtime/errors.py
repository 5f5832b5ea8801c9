"""Anomaly taxonomy and non-fatal reporting policy.

Widget code never raises for malformed or transient host input. Each tolerated
condition is classified, resolved in place by the caller, and reported here on
the developer channel: the ``widgetkit`` logger plus an optional
:class:`~widgetkit.diagnostics.DiagnosticHub`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from widgetkit.diagnostics.hub import DiagnosticHub


class AnomalyKind(Enum):
    """Classes of tolerated conditions."""

    CONFIGURATION = "configuration"
    OUT_OF_RANGE = "out_of_range"
    USAGE = "usage"


_LEVELS: dict[AnomalyKind, int] = {
    AnomalyKind.CONFIGURATION: logging.WARNING,
    AnomalyKind.OUT_OF_RANGE: logging.DEBUG,
    AnomalyKind.USAGE: logging.WARNING,
}


@dataclass(slots=True)
class AnomalyReporter:
    """Routes anomalies to a logger and an optional diagnostics hub."""

    logger: logging.Logger
    hub: DiagnosticHub | None = None
    category: str = "dropdown"

    def __call__(self, kind: AnomalyKind, name: str, message: str, **metadata: Any) -> None:
        level = _LEVELS[kind]
        self.logger.log(
            level,
            "%s: %s",
            name,
            message,
            extra={"anomaly": kind.value, "anomaly_name": name},
        )
        if self.hub is not None:
            self.hub.record(
                category=self.category,
                name=name,
                level=logging.getLevelName(level).lower(),
                value=message,
                metadata={"kind": kind.value, **metadata},
            )


def configuration_anomaly(report: AnomalyReporter, name: str, message: str, **metadata: Any) -> None:
    report(AnomalyKind.CONFIGURATION, name, message, **metadata)


def out_of_range_anomaly(report: AnomalyReporter, name: str, message: str, **metadata: Any) -> None:
    report(AnomalyKind.OUT_OF_RANGE, name, message, **metadata)


def usage_anomaly(report: AnomalyReporter, name: str, message: str, **metadata: Any) -> None:
    report(AnomalyKind.USAGE, name, message, **metadata)
