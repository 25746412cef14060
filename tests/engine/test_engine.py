import pytest

from statesync.contracts.action import ActionKind
from statesync.contracts.checksum import Blob
from statesync.contracts.config import ReconcileConfig
from statesync.contracts.exceptions import KeyMissingError
from statesync.engine.comparator import Comparator
from statesync.engine.engine import Reconciler, reconcile
from statesync.states.memory import InMemoryState
from tests.fakes.state import ReadOnlyState, RecordingState
from tests.fakes.trace import CollectingTraceSink


@pytest.mark.parametrize(
    ("current", "desired", "expected_actions"),
    [
        ({"a": 1, "c": 3}, {"a": 1, "b": 2}, [("b", ActionKind.CREATE), ("c", ActionKind.DELETE)]),
        ({}, {"x": "v"}, [("x", ActionKind.CREATE)]),
        ({"k": "old"}, {"k": "new"}, [("k", ActionKind.UPDATE)]),
        ({"m": 5}, {"m": 5}, []),
    ],
)
def test_reconcile_converges_current_to_desired(
    current: dict[str, object],
    desired: dict[str, object],
    expected_actions: list[tuple[str, ActionKind]],
) -> None:
    current_state = RecordingState(current)
    desired_state = RecordingState(desired)
    trace = CollectingTraceSink()

    reconcile(current_state, desired_state, verbose=True, trace=trace)

    assert [(action.key, action.kind) for action in trace.actions] == expected_actions
    assert current_state.entries == desired
    assert desired_state.entries == desired
    assert desired_state.calls == []


def test_reconcile_returns_nothing_and_is_quiet_by_default(trace: CollectingTraceSink) -> None:
    current = RecordingState({"k": "old"})

    assert reconcile(current, RecordingState({"k": "new"}), trace=trace) is None
    assert trace.actions == []
    assert current.entries == {"k": "new"}


def test_reconcile_updates_checksummed_values() -> None:
    current = InMemoryState({"k": Blob(b"v1")})
    trace = CollectingTraceSink()

    reconcile(current, InMemoryState({"k": Blob(b"v2")}), verbose=True, trace=trace)

    assert current.get("k") == Blob(b"v2")
    assert [action.kind for action in trace.actions] == [ActionKind.UPDATE]
    assert trace.actions[0].reason.startswith("checksum mismatch")


def test_reconciler_second_run_is_empty() -> None:
    current = InMemoryState({"a": 1, "c": 3, "k": "old"})
    desired = InMemoryState({"a": 1, "b": 2, "k": "new"})
    reconciler = Reconciler()

    first = reconciler.run(current, desired)
    second = reconciler.run(current, desired)

    assert [(a.key, a.kind) for a in first.actions] == [
        ("b", ActionKind.CREATE),
        ("k", ActionKind.UPDATE),
        ("c", ActionKind.DELETE),
    ]
    assert second.converged
    assert current.as_dict() == desired.as_dict()


def test_reconciler_dry_run_plans_without_mutating() -> None:
    current = RecordingState({"c": 3})
    trace = CollectingTraceSink()

    result = Reconciler(ReconcileConfig(dry_run=True, verbose=True), trace=trace).run(
        current, RecordingState({"b": 2})
    )

    assert result.dry_run is True
    assert [(a.key, a.kind) for a in result.actions] == [("b", ActionKind.CREATE), ("c", ActionKind.DELETE)]
    assert current.calls == []
    assert trace.actions == []


def test_reconciler_plan_matches_run_actions() -> None:
    reconciler = Reconciler()
    current = InMemoryState({"a": 1})
    desired = InMemoryState({"a": 2, "b": 3})

    planned = reconciler.plan(current, desired)
    result = reconciler.run(current, desired)

    assert planned == result.actions


def test_reconciler_verbose_config_traces(trace: CollectingTraceSink) -> None:
    Reconciler(ReconcileConfig(verbose=True), trace=trace).run(RecordingState(), RecordingState({"x": 1}))

    assert trace.keys == ["x"]


def test_reconciler_serialized_equality_from_config() -> None:
    current = InMemoryState({"k": [1, 2]})
    desired = InMemoryState({"k": (1, 2)})

    assert Reconciler().plan(current, desired) != []
    assert Reconciler(ReconcileConfig(equality="serialized")).plan(current, desired) == []


def test_reconciler_checksum_prefix_from_config() -> None:
    actions = Reconciler(ReconcileConfig(checksum_prefix=1)).plan(
        InMemoryState({"k": Blob(b"one")}), InMemoryState({"k": Blob(b"two")})
    )

    assert f"current sum={Blob(b'one').sum()[:1].hex()} " in actions[0].reason


def test_reconciler_prefers_explicit_comparator() -> None:
    reconciler = Reconciler(
        ReconcileConfig(equality="structural"),
        comparator=Comparator(equals=lambda a, b: True),
    )

    assert reconciler.plan(InMemoryState({"k": 1}), InMemoryState({"k": 2})) == []
    assert reconciler.config.equality == "structural"


def test_reconcile_against_lagging_state_does_not_converge() -> None:
    current = ReadOnlyState({"c": 3})
    desired = RecordingState({"b": 2})

    reconcile(current, desired)
    reconcile(current, desired)

    assert current.calls == [("add", "b", 2), ("delete", "c", None), ("add", "b", 2), ("delete", "c", None)]


def test_reconcile_propagates_strict_store_failure() -> None:
    class Vanishing(InMemoryState):
        def get(self, key: str) -> object:
            value = super().get(key)
            super().delete(key)
            return value

    current = Vanishing({"k": "old"}, strict=True)

    with pytest.raises(KeyMissingError):
        reconcile(current, InMemoryState({"k": "new"}))
