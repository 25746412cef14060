from statesync.contracts.exceptions import (
    ConfigError,
    KeyExistsError,
    KeyMissingError,
    StateError,
    StateLoadError,
    StateSyncError,
)


def test_exception_hierarchy() -> None:
    assert issubclass(ConfigError, StateSyncError)
    assert issubclass(StateError, StateSyncError)
    assert issubclass(KeyExistsError, StateError)
    assert issubclass(KeyMissingError, StateError)
    assert issubclass(StateLoadError, StateSyncError)


def test_key_errors_expose_key() -> None:
    exists = KeyExistsError("alpha")
    missing = KeyMissingError("beta")

    assert exists.key == "alpha"
    assert "alpha" in str(exists)
    assert missing.key == "beta"
    assert "beta" in str(missing)
