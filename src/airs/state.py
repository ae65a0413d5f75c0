"""Callable state handles built on ReactiveCell and HistoryEngine.

Usage::

    counter = state(1)
    counter()            # 1
    counter.set(2)       # 2
    sub = counter.subscribe(print)   # prints 2
    counter.set(lambda v: v + 1)     # prints 3
    sub.unsubscribe()

    nav = history("homepage", limit=10)
    nav.set("about")
    nav.undo()
    nav()                # "homepage"
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar, Union

from airs.core.cell import Observer, ReactiveCell, Subscription
from airs.core.predicates import is_literal_object
from airs.core.types import UNBOUNDED, HistoryLimit
from airs.history.engine import HistoryEngine

T = TypeVar("T")

StateUpdater = Callable[[Any], Any]
ValueOrUpdater = Union[T, StateUpdater]


def _resolve(new_value: Any, current: Any) -> Any:
    # Updaters run before any mutation so a raising updater leaves state intact.
    if callable(new_value):
        return new_value(current)
    return new_value


class State(Generic[T]):
    """Callable handle around a :class:`ReactiveCell`."""

    def __init__(self, initial: T) -> None:
        self._cell: ReactiveCell[T] = ReactiveCell(initial)

    def __call__(self) -> T:
        return self._cell.get()

    @property
    def value(self) -> T:
        return self._cell.get()

    def set(self, new_value: ValueOrUpdater) -> T:
        """Replace the value, or apply an updater to it.  Returns the new value."""
        self._cell.replace(_resolve(new_value, self._cell.get()))
        return self._cell.get()

    def subscribe(self, observer: Observer) -> Subscription:
        return self._cell.subscribe(observer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cell.get()!r})"


class LiteralObjectState(State[dict]):
    """State over a plain dict, with shallow-merge :meth:`patch`."""

    def patch(self, partial: dict | StateUpdater) -> dict:
        """Merge *partial* (or the dict an updater returns) into the value.

        A non-dict partial leaves the value untouched.
        """
        current = self._cell.get()
        partial = _resolve(partial, current)
        if not is_literal_object(partial):
            return current
        self._cell.replace({**current, **partial})
        return self._cell.get()


class HistoryState(Generic[T]):
    """Callable handle around a :class:`HistoryEngine`."""

    def __init__(self, seed: T, limit: Any = UNBOUNDED) -> None:
        self._engine: HistoryEngine[T] = HistoryEngine(seed, limit)

    def __call__(self) -> T:
        return self._engine.get()

    def get(self) -> T:
        return self._engine.get()

    @property
    def engine(self) -> HistoryEngine[T]:
        return self._engine

    def set(self, new_value: ValueOrUpdater) -> T:
        """Record a value, or the result of an updater, as the new current value."""
        self._engine.set(_resolve(new_value, self._engine.get()))
        return self._engine.get()

    def undo(self, times: int = 1) -> None:
        self._engine.undo(times)

    def redo(self, times: int = 1) -> None:
        self._engine.redo(times)

    @property
    def history_limit(self) -> HistoryLimit:
        """Retention limit.  Assigning reconciles history (see
        :meth:`HistoryEngine.set_history_limit`)."""
        return self._engine.history_limit

    @history_limit.setter
    def history_limit(self, limit: Any) -> None:
        self._engine.set_history_limit(limit)

    def set_history_limit(self, limit: Any) -> None:
        self._engine.set_history_limit(limit)

    def get_all_values(self) -> list[T]:
        return self._engine.get_all_values()

    def get_previous_values(self, limit: int | None = None) -> list[T]:
        return self._engine.get_previous_values(limit)

    def subscribe(self, observer: Observer) -> Subscription:
        return self._engine.subscribe(observer)

    def __repr__(self) -> str:
        return (
            f"HistoryState({self._engine.get()!r}, index={self._engine.current_index}, "
            f"size={len(self._engine)}, limit={self._engine.history_limit!r})"
        )


def state(initial: T) -> State[T]:
    """Create a state handle.  Plain dicts get a :class:`LiteralObjectState`."""
    if is_literal_object(initial):
        return LiteralObjectState(initial)
    return State(initial)


def history(seed: T, limit: Any = UNBOUNDED) -> HistoryState[T]:
    """Create a history-tracking state handle seeded with *seed*.

    *limit* may be :data:`~airs.core.types.UNBOUNDED`, a
    :class:`~airs.core.types.Bounded`, a positive int, or ``None``.
    Values below 1 mean unbounded.
    """
    return HistoryState(seed, limit)


create_history = history
