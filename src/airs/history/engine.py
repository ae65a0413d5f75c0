"""HistoryEngine — bounded linear undo/redo over a ReactiveCell."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from airs.core.cell import Observer, ReactiveCell, Subscription
from airs.core.types import UNBOUNDED, HistoryLimit, coerce_limit, limit_size

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_steps(times: Any) -> None:
    if isinstance(times, bool) or not isinstance(times, int):
        raise TypeError(f"Step count must be an int, got {type(times).__name__}")


class HistoryEngine(Generic[T]):
    """Linear value history with a movable current position.

    ``values`` holds full snapshots, oldest first, and is never empty.
    ``current_index`` always points into ``values``; the wrapped
    :class:`ReactiveCell` always holds ``values[current_index]``.

    When the limit is :class:`~airs.core.types.Bounded`, the oldest
    snapshots are evicted so that ``len(values) <= size``.  Navigation is
    clamped to the retained range; nothing here raises on out-of-range
    input.
    """

    def __init__(self, seed: T, limit: Any = UNBOUNDED) -> None:
        self._limit: HistoryLimit = coerce_limit(limit)
        self._values: list[T] = [seed]
        self._current_index = 0
        self._cell: ReactiveCell[T] = ReactiveCell(seed)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def can_undo(self) -> bool:
        return self._current_index > 0

    @property
    def can_redo(self) -> bool:
        return self._current_index < len(self._values) - 1

    @property
    def history_limit(self) -> HistoryLimit:
        """Current retention limit.

        Assigning to this property is not a plain store: it runs
        :meth:`set_history_limit`, which may evict snapshots, move the
        current position and notify subscribers.
        """
        return self._limit

    @history_limit.setter
    def history_limit(self, limit: Any) -> None:
        self.set_history_limit(limit)

    def __len__(self) -> int:
        return len(self._values)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def get(self) -> T:
        return self._cell.get()

    def set(self, new_value: T) -> T:
        """Record *new_value* as the newest snapshot and make it current.

        Any snapshots after the current position are discarded first, so a
        write after :meth:`undo` invalidates redo.
        """
        del self._values[self._current_index + 1 :]
        self._values.append(new_value)

        size = limit_size(self._limit)
        if size is not None and len(self._values) > size:
            del self._values[: len(self._values) - size]

        self._move_to(len(self._values) - 1, force=True)
        return new_value

    def undo(self, times: int = 1) -> None:
        """Step back *times* snapshots, stopping at the oldest retained one.

        A negative *times* steps forward, as ``redo(-times)``.
        """
        _check_steps(times)
        if times < 0:
            self.redo(-times)
            return
        self._move_to(max(0, self._current_index - times))

    def redo(self, times: int = 1) -> None:
        """Step forward *times* snapshots, stopping at the newest one.

        A negative *times* steps back, as ``undo(-times)``.
        """
        _check_steps(times)
        if times < 0:
            self.undo(-times)
            return
        self._move_to(min(len(self._values) - 1, self._current_index + times))

    def set_history_limit(self, limit: Any) -> None:
        """Change the retention limit and reconcile stored snapshots.

        Values below 1 mean unbounded.  Shrinking below the current length
        evicts the oldest snapshots; the current position moves back by the
        number evicted, clamped at 0.  Subscribers are notified only if the
        current snapshot itself was evicted.
        """
        previous = self._limit
        self._limit = coerce_limit(limit)
        size = limit_size(self._limit)
        logger.debug("History limit changed: %r -> %r", previous, self._limit)

        if size is None or len(self._values) <= size:
            return

        evicted = len(self._values) - size
        del self._values[:evicted]
        logger.debug(
            "Evicted %d snapshot(s) after limit change, %d retained",
            evicted,
            len(self._values),
        )

        current_evicted = self._current_index < evicted
        self._current_index = max(0, self._current_index - evicted)
        if current_evicted:
            self._cell.replace(self._values[self._current_index])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_values(self) -> list[T]:
        """Return a copy of all retained snapshots, oldest first."""
        return list(self._values)

    def get_previous_values(self, limit: int | None = None) -> list[T]:
        """Return up to *limit* snapshots before the current one, oldest first.

        ``None`` or a value below 1 returns all of them.
        """
        if limit is None or limit < 1:
            limit = self._current_index
        else:
            limit = min(limit, self._current_index)
        return self._values[self._current_index - limit : self._current_index]

    def subscribe(self, observer: Observer) -> Subscription:
        """Subscribe to the current value (replay-latest, then live)."""
        return self._cell.subscribe(observer)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _move_to(self, index: int, force: bool = False) -> None:
        if index == self._current_index and not force:
            return
        value = self._values[index]
        self._current_index = index
        self._cell.replace(value)
