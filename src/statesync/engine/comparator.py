"""Value comparison for the differ.

Two strategies decide whether the current and desired value bound to a key are
the same. When both values declare the :class:`Checksummed` capability their
sums are compared byte for byte, which keeps large payloads cheap to compare.
Everything else goes through an equality function, structural by default.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from enum import StrEnum
from typing import Any, TypeAlias

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from statesync.contracts.checksum import Checksummed

EqualsFunc: TypeAlias = Callable[[Any, Any], bool]

DEFAULT_CHECKSUM_PREFIX = 5
STRUCTURAL_MISMATCH = "structural mismatch"


class MismatchKind(StrEnum):
    CHECKSUM = "checksum"
    STRUCTURAL = "structural"


class Mismatch(BaseModel):
    """Outcome of comparing two unequal values."""

    kind: MismatchKind
    reason: str

    model_config = {"frozen": True}


def structural_equals(a: Any, b: Any) -> bool:
    """Deep equality that requires matching types at every depth.

    Dicts, lists and tuples are walked element by element, so ``[1]`` and
    ``[1.0]`` differ. Any other value is compared with ``==`` once its type
    matches.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(structural_equals(a[key], b[key]) for key in a)
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(structural_equals(x, y) for x, y in zip(a, b))
    return a == b


def _canonical_bytes(value: Any) -> bytes:
    payload = to_jsonable_python(value)
    return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")


def serialized_equals(a: Any, b: Any) -> bool:
    """Compare the canonical JSON encodings of *a* and *b*.

    Values pydantic cannot serialize are compared with :func:`structural_equals`.
    """
    try:
        return _canonical_bytes(a) == _canonical_bytes(b)
    except (PydanticSerializationError, TypeError, ValueError):
        return structural_equals(a, b)


_EQUALITY: dict[str, EqualsFunc] = {
    "structural": structural_equals,
    "serialized": serialized_equals,
}


def equality_for(name: str) -> EqualsFunc:
    try:
        return _EQUALITY[name]
    except KeyError:
        raise ValueError(f"unknown equality strategy: {name}") from None


class Comparator:
    def __init__(
        self,
        *,
        equals: EqualsFunc | None = None,
        checksum_prefix: int = DEFAULT_CHECKSUM_PREFIX,
    ) -> None:
        if checksum_prefix < 1:
            raise ValueError("checksum_prefix must be positive")
        self._equals = equals or structural_equals
        self._checksum_prefix = checksum_prefix

    def compare(self, current: Any, desired: Any) -> Mismatch | None:
        """Return ``None`` when the values match, else the reason they differ."""
        if isinstance(current, Checksummed) and isinstance(desired, Checksummed):
            current_sum = current.sum()
            desired_sum = desired.sum()
            if current_sum != desired_sum:
                return Mismatch(
                    kind=MismatchKind.CHECKSUM,
                    reason=(
                        "checksum mismatch: "
                        f"current sum={current_sum[: self._checksum_prefix].hex()} != "
                        f"desired sum={desired_sum[: self._checksum_prefix].hex()}"
                    ),
                )
            return None

        if not self._equals(current, desired):
            return Mismatch(kind=MismatchKind.STRUCTURAL, reason=STRUCTURAL_MISMATCH)
        return None
