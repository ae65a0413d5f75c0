"""AIRS — Accessible Intuitive Reactive State."""

from airs.core.cell import ReactiveCell, Subscription
from airs.core.predicates import is_literal_object, is_number, is_object, is_string
from airs.core.types import UNBOUNDED, Bounded, HistoryLimit, Unbounded, coerce_limit
from airs.history.engine import HistoryEngine
from airs.state import (
    HistoryState,
    LiteralObjectState,
    State,
    create_history,
    history,
    state,
)

__all__ = [
    "UNBOUNDED",
    "Bounded",
    "HistoryEngine",
    "HistoryLimit",
    "HistoryState",
    "LiteralObjectState",
    "ReactiveCell",
    "State",
    "Subscription",
    "Unbounded",
    "coerce_limit",
    "create_history",
    "history",
    "is_literal_object",
    "is_number",
    "is_object",
    "is_string",
    "state",
]
