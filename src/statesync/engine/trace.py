"""Trace sinks for applied actions.

The applier hands every action to a sink before dispatching it when verbose
tracing is on. Sinks observe only; they never change what gets applied.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from statesync.contracts.action import Action


def format_trace(action: Action) -> str:
    return f"key:{action.key} state:{action.kind} why:{action.reason}"


class TraceSink(ABC):
    """Observer interface for actions about to be applied."""

    @abstractmethod
    def record(self, action: Action) -> None:
        """*action* is about to be dispatched to the current state."""
        ...  # pragma: no cover


class NullTraceSink(TraceSink):
    """No-op implementation used when tracing output is not wanted."""

    def record(self, action: Action) -> None:
        pass


class LoggingTraceSink(TraceSink):
    """Writes one log record per action."""

    def __init__(self, logger: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("statesync.trace")
        self._level = level

    def record(self, action: Action) -> None:
        self._logger.log(self._level, "%s", format_trace(action))
