"""Keyed state store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Final, TypeAlias

Visitor: TypeAlias = Callable[[str, Any], None]


class _Absent:
    """Marker returned by :meth:`State.get` for keys the store does not hold."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _Absent()


class State(ABC):
    """A keyed, mutable store of opaque values.

    ``get`` must return :data:`ABSENT` for a missing key and nothing else, so
    that keys bound to ``None`` or other falsy values still count as present.

    ``walk`` must visit a snapshot of the store: entries that the visitor
    causes to be added or changed are not visited during the same walk.
    """

    @abstractmethod
    def add(self, key: str, value: Any) -> None: ...  # pragma: no cover

    @abstractmethod
    def update(self, key: str, value: Any) -> None: ...  # pragma: no cover

    @abstractmethod
    def get(self, key: str) -> Any: ...  # pragma: no cover

    @abstractmethod
    def delete(self, key: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def walk(self, visit: Visitor) -> None: ...  # pragma: no cover
