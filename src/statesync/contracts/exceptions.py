"""Exception hierarchy for statesync."""

from __future__ import annotations


class StateSyncError(Exception):
    """Base exception for all statesync errors."""


class ConfigError(StateSyncError):
    """Configuration loading or validation failure."""


class StateError(StateSyncError):
    """A state store rejected a mutation."""


class KeyExistsError(StateError):
    """A strict store was asked to add a key it already holds."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key already exists: {key}")
        self.key = key


class KeyMissingError(StateError):
    """A strict store was asked to update or delete a key it does not hold."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key does not exist: {key}")
        self.key = key


class StateLoadError(StateSyncError):
    """State file loading/parsing failure."""
