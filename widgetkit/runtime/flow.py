"""Transition-table executor for widget interaction states."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from widgetkit.api.flow import FlowContext, FlowPayload, FlowTransition


class RuntimeFlowMachine[TState]:
    """Runs the first transition whose trigger, source and guard all match.

    ``before`` hooks see the old state, ``after`` hooks the new one. When a
    logger is supplied every executed transition is traced at DEBUG.
    """

    def __init__(
        self,
        initial_state: TState,
        *,
        name: str = "flow",
        logger: logging.Logger | None = None,
    ) -> None:
        self._state = initial_state
        self._name = name
        self._logger = logger
        self._transitions: list[FlowTransition[TState]] = []

    @property
    def state(self) -> TState:
        return self._state

    def add_transition(self, transition: FlowTransition[TState]) -> None:
        self._transitions.append(transition)

    def add_transitions(self, transitions: Iterable[FlowTransition[TState]]) -> None:
        """Register a table; earlier entries win on overlapping triggers."""
        for transition in transitions:
            self.add_transition(transition)

    def trigger(self, event: str, *, payload: FlowPayload | None = None) -> bool:
        """Execute the first matching transition. Returns whether one ran."""
        source_state = self._state
        for transition in self._transitions:
            if transition.trigger != event:
                continue
            if transition.source is not None and transition.source != source_state:
                continue
            context = FlowContext(
                trigger=event,
                source=source_state,
                target=transition.target,
                payload=payload,
            )
            if transition.guard is not None and not transition.guard(context):
                continue
            if transition.before is not None:
                transition.before(context)
            self._state = transition.target
            if self._logger is not None:
                self._logger.debug(
                    "%s %s: %s -> %s",
                    self._name,
                    event,
                    source_state,
                    transition.target,
                    extra={"flow": self._name, "trigger": event},
                )
            if transition.after is not None:
                transition.after(context)
            return True
        return False


FlowMachine = RuntimeFlowMachine
