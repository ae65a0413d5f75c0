"""Value history with bounded linear undo/redo."""

from airs.history.config import HistoryConfig
from airs.history.engine import HistoryEngine

__all__ = [
    "HistoryConfig",
    "HistoryEngine",
]
