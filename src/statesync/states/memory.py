"""Dict-backed state store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from statesync.contracts.exceptions import KeyExistsError, KeyMissingError
from statesync.contracts.state import ABSENT, State, Visitor


class InMemoryState(State):
    """Insertion-ordered in-memory store.

    A non-strict store upserts on both ``add`` and ``update`` and ignores
    deletes of missing keys. A strict store raises :class:`KeyExistsError` or
    :class:`KeyMissingError` instead.
    """

    def __init__(self, entries: Mapping[str, Any] | None = None, *, strict: bool = False) -> None:
        self._entries: dict[str, Any] = dict(entries or {})
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def add(self, key: str, value: Any) -> None:
        if self._strict and key in self._entries:
            raise KeyExistsError(key)
        self._entries[key] = value

    def update(self, key: str, value: Any) -> None:
        if self._strict and key not in self._entries:
            raise KeyMissingError(key)
        self._entries[key] = value

    def get(self, key: str) -> Any:
        return self._entries.get(key, ABSENT)

    def delete(self, key: str) -> None:
        if key not in self._entries:
            if self._strict:
                raise KeyMissingError(key)
            return
        del self._entries[key]

    def walk(self, visit: Visitor) -> None:
        for key, value in list(self._entries.items()):
            visit(key, value)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"
