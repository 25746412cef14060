from statesync.engine.applier import apply
from statesync.engine.comparator import (
    Comparator,
    EqualsFunc,
    Mismatch,
    MismatchKind,
    equality_for,
    serialized_equals,
    structural_equals,
)
from statesync.engine.differ import diff
from statesync.engine.engine import Reconciler, reconcile
from statesync.engine.trace import LoggingTraceSink, NullTraceSink, TraceSink, format_trace

__all__ = [
    "Comparator",
    "EqualsFunc",
    "LoggingTraceSink",
    "Mismatch",
    "MismatchKind",
    "NullTraceSink",
    "Reconciler",
    "TraceSink",
    "apply",
    "diff",
    "equality_for",
    "format_trace",
    "reconcile",
    "serialized_equals",
    "structural_equals",
]
