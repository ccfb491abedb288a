"""Bounded history of finished recommendation walks.

Each finished walk is packaged as a :class:`SessionRecord` and appended to a
:class:`BoundedQueue`; once the queue is full the oldest record is evicted.
When a path is configured the queue is mirrored to a JSON array on disk after
every change so the history survives restarts.
"""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import asdict, dataclass, fields
from datetime import datetime, timezone
import json
import logging
from pathlib import Path
from typing import Any, Deque, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from ..catalog.genre_query import genre_names
from ..decision_tree.metrics import TreeMetrics
from ..decision_tree.traversal import TraversalResult

logger = logging.getLogger(__name__)

__all__ = [
    "BoundedQueue",
    "DEFAULT_MAX_SESSIONS",
    "HistoryStorageError",
    "SessionHistory",
    "SessionRecord",
]

DEFAULT_MAX_SESSIONS = 10

T = TypeVar("T")


class HistoryStorageError(RuntimeError):
    """Raised when the history file cannot be read, parsed or written."""


@dataclass(frozen=True)
class SessionRecord:
    """A finished walk as stored in the history."""

    session_id: str
    timestamp: int
    tags: Tuple[int, ...]
    movie_count: int
    visited_nodes: int
    depth: int
    elapsed_ms: float
    tree_height: int
    theoretical_depth: int

    @classmethod
    def from_walk(
        cls,
        result: TraversalResult,
        metrics: TreeMetrics,
        *,
        movie_count: int = 0,
        now: Optional[datetime] = None,
        session_id: Optional[str] = None,
    ) -> "SessionRecord":
        """Package a finished walk; *session_id* defaults to ``session_<ms>``."""

        moment = now if now is not None else datetime.now(tz=timezone.utc)
        timestamp = int(moment.timestamp() * 1000)
        return cls(
            session_id=session_id if session_id is not None else f"session_{timestamp}",
            timestamp=timestamp,
            tags=tuple(result.tags),
            movie_count=movie_count,
            visited_nodes=result.visited_nodes,
            depth=result.depth,
            elapsed_ms=result.elapsed_ms,
            tree_height=metrics.height,
            theoretical_depth=metrics.theoretical_depth,
        )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SessionRecord":
        if not isinstance(payload, Mapping):
            raise HistoryStorageError("Session entries must be JSON objects")
        expected = {field.name for field in fields(cls)}
        missing = expected - set(payload)
        unknown = set(payload) - expected
        if missing or unknown:
            raise HistoryStorageError(
                "Session entry fields mismatch: "
                f"missing={sorted(missing)} unknown={sorted(unknown)}"
            )
        try:
            return cls(
                session_id=str(payload["session_id"]),
                timestamp=int(payload["timestamp"]),
                tags=tuple(int(tag) for tag in payload["tags"]),
                movie_count=int(payload["movie_count"]),
                visited_nodes=int(payload["visited_nodes"]),
                depth=int(payload["depth"]),
                elapsed_ms=float(payload["elapsed_ms"]),
                tree_height=int(payload["tree_height"]),
                theoretical_depth=int(payload["theoretical_depth"]),
            )
        except (TypeError, ValueError) as exc:
            raise HistoryStorageError(f"Invalid session entry: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["tags"] = list(self.tags)
        return payload

    @property
    def recorded_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)


class BoundedQueue(Generic[T]):
    """First-in, first-out queue that evicts its oldest item when full."""

    __slots__ = ("_items", "_max_size")

    def __init__(self, max_size: int = DEFAULT_MAX_SESSIONS) -> None:
        if not isinstance(max_size, int) or isinstance(max_size, bool):
            raise TypeError("max_size must be an integer")
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self._max_size = max_size
        self._items: Deque[T] = deque()

    @property
    def max_size(self) -> int:
        return self._max_size

    def enqueue(self, item: T) -> Optional[T]:
        """Append *item* and return the evicted oldest item, if any."""

        self._items.append(item)
        if len(self._items) > self._max_size:
            return self._items.popleft()
        return None

    def dequeue(self) -> Optional[T]:
        return self._items.popleft() if self._items else None

    def front(self) -> Optional[T]:
        return self._items[0] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def to_list(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class SessionHistory:
    """Most recent finished walks, optionally persisted as JSON."""

    def __init__(
        self,
        path: Optional[Path] = None,
        *,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._queue: BoundedQueue[SessionRecord] = BoundedQueue(max_sessions)
        if self._path is not None and self._path.exists():
            try:
                records = self._read(self._path)
            except HistoryStorageError as error:
                logger.warning("Discarding unreadable session history: %s", error)
            else:
                for record in records:
                    self._queue.enqueue(record)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def save(self, record: SessionRecord) -> None:
        evicted = self._queue.enqueue(record)
        if evicted is not None:
            logger.debug("Evicted oldest session %s", evicted.session_id)
        self._persist()

    def sessions(self) -> List[SessionRecord]:
        """Return stored records, oldest first."""

        return self._queue.to_list()

    def most_recent(self) -> Optional[SessionRecord]:
        records = self._queue.to_list()
        return records[-1] if records else None

    def remove(self, session_id: str) -> bool:
        """Drop the record with *session_id*; return whether one was removed."""

        records = self._queue.to_list()
        kept = [record for record in records if record.session_id != session_id]
        if len(kept) == len(records):
            return False
        self._queue.clear()
        for record in kept:
            self._queue.enqueue(record)
        self._persist()
        return True

    def clear(self) -> None:
        self._queue.clear()
        if self._path is not None:
            try:
                self._path.unlink(missing_ok=True)
            except OSError as exc:
                raise HistoryStorageError(
                    f"Unable to delete session history {self._path}: {exc}"
                ) from exc

    def by_genre(self, tag: int) -> List[SessionRecord]:
        return [record for record in self._queue.to_list() if tag in record.tags]

    def statistics(self) -> Dict[str, Any]:
        records = self._queue.to_list()
        total_movies = sum(record.movie_count for record in records)
        counts: Counter[str] = Counter()
        for record in records:
            counts.update(genre_names(record.tags))
        average = round(total_movies / len(records)) if records else 0
        return {
            "total_sessions": len(records),
            "total_movies": total_movies,
            "average_movies_per_session": average,
            "most_used_genres": [
                {"genre": genre, "count": count} for genre, count in counts.most_common(5)
            ],
        }

    def export_json(self, *, now: Optional[datetime] = None) -> str:
        """Serialise the history and its statistics for backup or analysis."""

        moment = now if now is not None else datetime.now(tz=timezone.utc)
        sessions = []
        for record in self._queue.to_list():
            entry = record.to_dict()
            entry["genre_names"] = genre_names(record.tags)
            entry["recorded_at"] = record.recorded_at.isoformat()
            sessions.append(entry)
        payload = {
            "export_date": moment.isoformat(),
            "session_count": len(sessions),
            "statistics": self.statistics(),
            "sessions": sessions,
        }
        return json.dumps(payload, indent=2)

    def __len__(self) -> int:
        return len(self._queue)

    def _persist(self) -> None:
        if self._path is None:
            return
        payload = [record.to_dict() for record in self._queue.to_list()]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload), encoding="utf-8")
        except OSError as exc:
            raise HistoryStorageError(
                f"Unable to write session history {self._path}: {exc}"
            ) from exc
        logger.debug("Persisted %s sessions to %s", len(payload), self._path)

    @staticmethod
    def _read(path: Path) -> List[SessionRecord]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise HistoryStorageError(f"Unable to read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise HistoryStorageError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, list):
            raise HistoryStorageError("Session history must be a JSON array")
        return [SessionRecord.from_dict(entry) for entry in data]
