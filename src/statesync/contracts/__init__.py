"""Public contracts for statesync."""

from statesync.contracts.action import Action, ActionKind, ReconcileResult
from statesync.contracts.checksum import Blob, Checksummed, sha256_sum
from statesync.contracts.config import ReconcileConfig
from statesync.contracts.exceptions import (
    ConfigError,
    KeyExistsError,
    KeyMissingError,
    StateError,
    StateLoadError,
    StateSyncError,
)
from statesync.contracts.state import ABSENT, State, Visitor

__all__ = [
    "ABSENT",
    "Action",
    "ActionKind",
    "Blob",
    "Checksummed",
    "ConfigError",
    "KeyExistsError",
    "KeyMissingError",
    "ReconcileConfig",
    "ReconcileResult",
    "State",
    "StateError",
    "StateLoadError",
    "StateSyncError",
    "Visitor",
    "sha256_sum",
]
