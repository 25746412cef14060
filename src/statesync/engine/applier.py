"""Apply a planned action list to a state."""

from __future__ import annotations

from collections.abc import Iterable

from statesync.contracts.action import Action, ActionKind
from statesync.contracts.state import State
from statesync.engine.trace import LoggingTraceSink, TraceSink


def apply(
    current: State,
    actions: Iterable[Action],
    verbose: bool = False,
    trace: TraceSink | None = None,
) -> None:
    """Dispatch each action to the matching mutator of *current*, in order.

    Errors raised by the state propagate unchanged. Actions before the failing
    one stay applied and the remaining ones are never attempted.
    """
    sink = (trace or LoggingTraceSink()) if verbose else None

    for action in actions:
        if sink is not None:
            sink.record(action)
        if action.kind is ActionKind.CREATE:
            current.add(action.key, action.value)
        elif action.kind is ActionKind.DELETE:
            current.delete(action.key)
        elif action.kind is ActionKind.UPDATE:
            current.update(action.key, action.value)
