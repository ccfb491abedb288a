"""Bounded, optionally persisted history of finished walks."""

from .session_history import (
    DEFAULT_MAX_SESSIONS,
    BoundedQueue,
    HistoryStorageError,
    SessionHistory,
    SessionRecord,
)

__all__ = [
    "DEFAULT_MAX_SESSIONS",
    "BoundedQueue",
    "HistoryStorageError",
    "SessionHistory",
    "SessionRecord",
]
