"""ReactiveCell — a current-value holder with push subscriptions."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Observer = Callable[[Any], Any]


class Subscription:
    """Disposable handle returned by :meth:`ReactiveCell.subscribe`.

    ``unsubscribe()`` is idempotent.  Also usable as a context manager.
    """

    def __init__(self, cell: ReactiveCell[Any], observer: Observer) -> None:
        self._cell = cell
        self._observer = observer
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._cell._remove(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.unsubscribe()


class ReactiveCell(Generic[T]):
    """Holds one current value and notifies subscribers on every change.

    New subscribers immediately receive the current value (replay-latest),
    then every later value until they unsubscribe.  Delivery is synchronous
    and in subscription order.

    The subscriber list is guarded by ``self._lock``; callbacks run outside
    the lock on a snapshot of the list, so subscribing or unsubscribing from
    inside a callback is safe.  Value mutation itself assumes a single
    logical writer.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._lock = threading.Lock()
        self._subscriptions: list[Subscription] = []

    @property
    def value(self) -> T:
        return self._value

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def get(self) -> T:
        """Return the current value."""
        return self._value

    def replace(self, value: T) -> None:
        """Store *value* and deliver it to every active subscriber."""
        self._value = value
        with self._lock:
            subscriptions = list(self._subscriptions)
        for sub in subscriptions:
            if sub.closed:
                continue
            self._deliver(sub, value)

    def subscribe(self, observer: Observer) -> Subscription:
        """Register *observer* and immediately deliver the current value."""
        sub = Subscription(self, observer)
        with self._lock:
            self._subscriptions.append(sub)
        self._deliver(sub, self._value)
        return sub

    def _remove(self, sub: Subscription) -> None:
        with self._lock:
            if sub in self._subscriptions:
                self._subscriptions.remove(sub)

    @staticmethod
    def _deliver(sub: Subscription, value: Any) -> None:
        try:
            sub._observer(value)
        except Exception:
            logger.exception("ReactiveCell observer error")
