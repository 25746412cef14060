"""Drift detection between a current and a desired state."""

from __future__ import annotations

import logging
from typing import Any

from statesync.contracts.action import Action, ActionKind
from statesync.contracts.state import ABSENT, State
from statesync.engine.comparator import Comparator

logger = logging.getLogger(__name__)


def diff(current: State, desired: State, comparator: Comparator | None = None) -> list[Action]:
    """Compute the ordered actions that turn *current* into *desired*.

    Creates and updates come first, in the walk order of *desired*; deletes
    follow, in the walk order of *current*. Neither state is mutated.
    """
    comparator = comparator or Comparator()
    upserts: list[Action] = []
    deletes: list[Action] = []

    def visit_desired(key: str, value: Any) -> None:
        current_value = current.get(key)
        if current_value is ABSENT:
            upserts.append(
                Action(key=key, kind=ActionKind.CREATE, value=value, reason=f"key {key} absent in current")
            )
            return
        mismatch = comparator.compare(current_value, value)
        if mismatch is not None:
            upserts.append(Action(key=key, kind=ActionKind.UPDATE, value=value, reason=mismatch.reason))

    def visit_current(key: str, _value: Any) -> None:
        if desired.get(key) is ABSENT:
            deletes.append(Action(key=key, kind=ActionKind.DELETE, value=None, reason=f"key {key} absent in desired"))

    desired.walk(visit_desired)
    current.walk(visit_current)

    logger.debug("diff: %d create/update action(s), %d delete action(s)", len(upserts), len(deletes))
    return upserts + deletes
