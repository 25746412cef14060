"""Reconciliation action contracts."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ActionKind(StrEnum):
    CREATE = "Create"
    DELETE = "Delete"
    UPDATE = "Update"


class Action(BaseModel):
    """One unit of change required to move current state toward desired state."""

    key: str
    kind: ActionKind
    value: Any = None
    reason: str = Field(min_length=1)

    model_config = {"frozen": True}


class ReconcileResult(BaseModel):
    """Value returned by :meth:`Reconciler.run`."""

    actions: list[Action] = Field(default_factory=list)
    dry_run: bool = False

    def count(self, kind: ActionKind) -> int:
        return sum(1 for action in self.actions if action.kind is kind)

    @property
    def converged(self) -> bool:
        return not self.actions
