"""Public API surface for statesync."""

from importlib.metadata import PackageNotFoundError, version

from statesync.config import load_config
from statesync.contracts import (
    ABSENT,
    Action,
    ActionKind,
    Blob,
    Checksummed,
    ConfigError,
    KeyExistsError,
    KeyMissingError,
    ReconcileConfig,
    ReconcileResult,
    State,
    StateError,
    StateLoadError,
    StateSyncError,
)
from statesync.engine import (
    Comparator,
    LoggingTraceSink,
    Mismatch,
    MismatchKind,
    NullTraceSink,
    Reconciler,
    TraceSink,
    apply,
    diff,
    reconcile,
    serialized_equals,
    structural_equals,
)
from statesync.states import InMemoryState, JsonFileState

try:
    __version__ = version("statesync")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ABSENT",
    "Action",
    "ActionKind",
    "Blob",
    "Checksummed",
    "Comparator",
    "ConfigError",
    "InMemoryState",
    "JsonFileState",
    "KeyExistsError",
    "KeyMissingError",
    "LoggingTraceSink",
    "Mismatch",
    "MismatchKind",
    "NullTraceSink",
    "ReconcileConfig",
    "ReconcileResult",
    "Reconciler",
    "State",
    "StateError",
    "StateLoadError",
    "StateSyncError",
    "TraceSink",
    "__version__",
    "apply",
    "diff",
    "load_config",
    "reconcile",
    "serialized_equals",
    "structural_equals",
]
