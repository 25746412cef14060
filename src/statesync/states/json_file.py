"""State store persisted as a JSON object file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from statesync.contracts.exceptions import StateLoadError
from statesync.states.memory import InMemoryState


class JsonFileState(InMemoryState):
    def __init__(self, path: str | Path, entries: dict[str, Any] | None = None, *, strict: bool = False) -> None:
        super().__init__(entries, strict=strict)
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @classmethod
    def load(cls, path: str | Path, *, strict: bool = False) -> JsonFileState:
        state_path = Path(path).expanduser()
        try:
            raw_payload: Any = json.loads(state_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StateLoadError(f"failed reading state file: {state_path}") from exc
        except UnicodeDecodeError as exc:
            raise StateLoadError(f"state file is not valid UTF-8: {state_path}") from exc
        except json.JSONDecodeError as exc:
            raise StateLoadError(f"invalid JSON in state file: {state_path}") from exc

        if not isinstance(raw_payload, dict):
            raise StateLoadError(f"state file must contain a JSON object: {state_path}")
        return cls(state_path, raw_payload, strict=strict)

    def save(self, path: str | Path | None = None) -> Path:
        """Write the current entries as JSON and return the path written."""
        target = Path(path).expanduser() if path is not None else self._path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.as_dict(), indent=2, sort_keys=True) + "\n", encoding="utf-8")
        return target
