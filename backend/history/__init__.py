# backend/history/__init__.py

"""Summary history: storage, record building, search and statistics."""

from .storage import (
    HistoryStore,
    InMemoryHistoryStore,
    PineconeHistoryStore,
    get_history_store,
)
from .records import (
    build_history_record,
    save_history_record,
    filter_history,
    compute_stats,
)

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "PineconeHistoryStore",
    "get_history_store",
    "build_history_record",
    "save_history_record",
    "filter_history",
    "compute_stats",
]
