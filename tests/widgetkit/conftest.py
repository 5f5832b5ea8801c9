from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import pytest

from widgetkit.api.dropdown import DropdownProps, HostValue, OptionRecord
from widgetkit.api.input_events import PointerEvent
from widgetkit.diagnostics import DiagnosticHub
from widgetkit.runtime.errors import AnomalyReporter
from widgetkit.runtime.events import EventBus
from widgetkit.ui_runtime.dropdown import Dropdown


@dataclass(slots=True)
class ChangeRecorder:
    """Collects ``on_change`` payloads."""

    values: list[HostValue] = field(default_factory=list)

    def __call__(self, value: HostValue) -> None:
        self.values.append(value)


@dataclass(slots=True)
class FakeOutsidePredicate:
    """Treats pointer events with ``target == "outside"`` as outside the control."""

    calls: list[PointerEvent] = field(default_factory=list)

    def __call__(self, event: PointerEvent) -> bool:
        self.calls.append(event)
        return event.target == "outside"


def outside_click() -> PointerEvent:
    return PointerEvent(event_type="pointer_down", x=500.0, y=500.0, button=1, target="outside")


def inside_click() -> PointerEvent:
    return PointerEvent(event_type="pointer_down", x=5.0, y=5.0, button=1, target="menu")


def letters(count: int) -> tuple[OptionRecord, ...]:
    return tuple(OptionRecord(label=chr(ord("A") + i), value=i + 1) for i in range(count))


@pytest.fixture
def fruit_options() -> tuple[OptionRecord, ...]:
    return (
        OptionRecord(label="Apple", value="apple"),
        OptionRecord(label="Banana", value="banana"),
        OptionRecord(label="Grape", value="grape"),
    )


@pytest.fixture
def hub() -> DiagnosticHub:
    return DiagnosticHub(capacity=100, enabled=True)


@pytest.fixture
def report(hub: DiagnosticHub) -> AnomalyReporter:
    return AnomalyReporter(logging.getLogger("tests.widgetkit"), hub)


@pytest.fixture
def environment() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder() -> ChangeRecorder:
    return ChangeRecorder()


@pytest.fixture
def make_dropdown(
    environment: EventBus,
    recorder: ChangeRecorder,
    hub: DiagnosticHub,
) -> Iterator[Callable[..., Dropdown]]:
    created: list[Dropdown] = []

    def _make(**props: object) -> Dropdown:
        dropdown = Dropdown(
            DropdownProps(**props),  # type: ignore[arg-type]
            on_change=recorder,
            environment=environment,
            is_outside=FakeOutsidePredicate(),
            diagnostics=hub,
        )
        created.append(dropdown)
        return dropdown

    yield _make
    for dropdown in created:
        dropdown.dispose()
