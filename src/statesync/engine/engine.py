"""Single-pass reconciliation: diff, then apply."""

from __future__ import annotations

import logging

from statesync.contracts.action import Action, ReconcileResult
from statesync.contracts.config import ReconcileConfig
from statesync.contracts.state import State
from statesync.engine.applier import apply
from statesync.engine.comparator import Comparator, equality_for
from statesync.engine.differ import diff
from statesync.engine.trace import TraceSink

logger = logging.getLogger(__name__)


class Reconciler:
    def __init__(
        self,
        config: ReconcileConfig | None = None,
        *,
        comparator: Comparator | None = None,
        trace: TraceSink | None = None,
    ) -> None:
        self._config = config or ReconcileConfig()
        self._comparator = comparator or Comparator(
            equals=equality_for(self._config.equality),
            checksum_prefix=self._config.checksum_prefix,
        )
        self._trace = trace

    @property
    def config(self) -> ReconcileConfig:
        return self._config

    def plan(self, current: State, desired: State) -> list[Action]:
        return diff(current, desired, self._comparator)

    def run(self, current: State, desired: State) -> ReconcileResult:
        actions = self.plan(current, desired)
        if self._config.dry_run:
            logger.debug("dry-run: skipping %d action(s)", len(actions))
            return ReconcileResult(actions=actions, dry_run=True)

        apply(current, actions, verbose=self._config.verbose, trace=self._trace)
        return ReconcileResult(actions=actions, dry_run=False)


def reconcile(current: State, desired: State, verbose: bool = False, *, trace: TraceSink | None = None) -> None:
    """Make *current* match *desired* with one diff pass and one apply pass.

    This is not a convergence loop. A state that does not reflect its own
    mutations immediately may still differ from *desired* afterwards.
    """
    apply(current, diff(current, desired), verbose=verbose, trace=trace)
