"""Core data types for AIRS."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Union


class Unbounded(enum.Enum):
    """History retention mode with no eviction."""

    UNBOUNDED = "unbounded"

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Unbounded.UNBOUNDED


@dataclass(frozen=True)
class Bounded:
    """History retention limited to the ``size`` most recent snapshots."""

    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError(f"size must be an int, got {type(self.size).__name__}")
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")


HistoryLimit = Union[Unbounded, Bounded]


def coerce_limit(value: Any) -> HistoryLimit:
    """Normalize a user-supplied history limit.

    Accepts :data:`UNBOUNDED`, :class:`Bounded`, an ``int``, ``None`` or
    the string ``"none"`` (as written in YAML configs).  Integers below 1
    become :data:`UNBOUNDED`.
    """
    if isinstance(value, (Unbounded, Bounded)):
        return value
    if value is None:
        return UNBOUNDED
    if isinstance(value, str):
        if value.strip().lower() in ("none", "unbounded"):
            return UNBOUNDED
        raise TypeError(f"Unsupported history limit: {value!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Unsupported history limit type: {type(value).__name__}")
    if value < 1:
        return UNBOUNDED
    return Bounded(value)


def limit_size(limit: HistoryLimit) -> int | None:
    """Return the bounded size, or *None* when unbounded."""
    if isinstance(limit, Bounded):
        return limit.size
    return None
