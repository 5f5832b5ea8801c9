"""Public interaction-flow contracts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

type FlowPayload = object


@dataclass(frozen=True, slots=True)
class FlowContext[TState]:
    """What a guard or hook sees while a transition runs."""

    trigger: str
    source: TState
    target: TState
    payload: FlowPayload | None = None


type TransitionGuard[TState] = Callable[[FlowContext[TState]], bool]
type TransitionHook[TState] = Callable[[FlowContext[TState]], None]


@dataclass(frozen=True, slots=True)
class FlowTransition[TState]:
    """One row of a transition table; ``source=None`` matches any state."""

    trigger: str
    source: TState | None
    target: TState
    guard: TransitionGuard[TState] | None = None
    before: TransitionHook[TState] | None = None
    after: TransitionHook[TState] | None = None


class FlowMachine[TState](Protocol):
    """Transition-table executor contract."""

    @property
    def state(self) -> TState:
        """Return current state."""

    def add_transition(self, transition: FlowTransition[TState]) -> None:
        """Register one transition."""

    def add_transitions(self, transitions: Iterable[FlowTransition[TState]]) -> None:
        """Register several transitions in priority order."""

    def trigger(self, event: str, *, payload: FlowPayload | None = None) -> bool:
        """Execute first matching transition."""


def create_flow_machine[TState](
    initial_state: TState,
    *,
    name: str = "flow",
    logger: logging.Logger | None = None,
) -> FlowMachine[TState]:
    """Create default flow-machine implementation."""
    from widgetkit.runtime.flow import RuntimeFlowMachine

    return RuntimeFlowMachine(initial_state, name=name, logger=logger)
