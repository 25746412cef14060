"""Shared test fixtures for statesync tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests.fakes.state import RecordingState
from tests.fakes.trace import CollectingTraceSink


@pytest.fixture
def current() -> RecordingState:
    """Scenario current state: {a: 1, c: 3}."""
    return RecordingState({"a": 1, "c": 3})


@pytest.fixture
def desired() -> RecordingState:
    """Scenario desired state: {a: 1, b: 2}."""
    return RecordingState({"a": 1, "b": 2})


@pytest.fixture
def trace() -> CollectingTraceSink:
    return CollectingTraceSink()


@pytest.fixture
def write_json(tmp_path: Path):
    """Write *payload* as JSON under tmp_path and return the path."""

    def _write(name: str, payload: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
