"""Optional checksum capability for state values."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod


class Checksummed(ABC):
    """A value that can supply a content hash for cheap equality checks.

    The capability is opt-in: a value is only compared by checksum when its
    class subclasses or is registered with this ABC, never because it happens
    to have a ``sum`` attribute.
    """

    @abstractmethod
    def sum(self) -> bytes:
        """Return the content hash of this value."""
        ...  # pragma: no cover


def sha256_sum(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


class Blob(Checksummed):
    """Opaque byte payload compared by its SHA-256 digest."""

    __slots__ = ("_data", "_digest")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._digest: bytes | None = None

    @property
    def data(self) -> bytes:
        return self._data

    def sum(self) -> bytes:
        if self._digest is None:
            self._digest = sha256_sum(self._data)
        return self._digest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Blob):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Blob({len(self._data)} bytes, sum={self.sum()[:5].hex()})"
