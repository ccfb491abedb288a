from __future__ import annotations

from datetime import datetime, timedelta, timezone
import json
import logging
from pathlib import Path

import pytest

from cinepath.decision_tree import DecisionTree
from cinepath.history import (
    BoundedQueue,
    HistoryStorageError,
    SessionHistory,
    SessionRecord,
)

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _record(offset: int, tags=(35,), movie_count: int = 20) -> SessionRecord:
    engine = DecisionTree()
    result = engine.traverse([False, True, True, True, False, False])
    record = SessionRecord.from_walk(
        result,
        engine.metrics(),
        movie_count=movie_count,
        now=BASE_TIME + timedelta(seconds=offset),
    )
    if tuple(tags) != record.tags:
        record = SessionRecord.from_dict({**record.to_dict(), "tags": list(tags)})
    return record


def test_bounded_queue_evicts_oldest() -> None:
    queue: BoundedQueue[int] = BoundedQueue(3)
    assert queue.enqueue(1) is None
    queue.enqueue(2)
    queue.enqueue(3)

    assert queue.enqueue(4) == 1
    assert queue.to_list() == [2, 3, 4]
    assert queue.front() == 2
    assert queue.dequeue() == 2
    assert len(queue) == 2
    queue.clear()
    assert queue.is_empty()
    assert queue.dequeue() is None
    assert queue.front() is None


@pytest.mark.parametrize("size", [0, -1])
def test_bounded_queue_rejects_non_positive_size(size: int) -> None:
    with pytest.raises(ValueError):
        BoundedQueue(size)


def test_bounded_queue_rejects_non_integer_size() -> None:
    with pytest.raises(TypeError):
        BoundedQueue(2.5)  # type: ignore[arg-type]


def test_record_from_walk_packages_engine_output() -> None:
    record = _record(0)

    assert record.tags == (35,)
    assert record.visited_nodes == 6
    assert record.depth == 6
    assert record.tree_height == 12
    assert record.theoretical_depth == 9
    assert record.timestamp == int(BASE_TIME.timestamp() * 1000)
    assert record.session_id == f"session_{record.timestamp}"
    assert record.recorded_at == BASE_TIME


def test_record_from_dict_rejects_unknown_fields() -> None:
    payload = _record(0).to_dict()
    payload["extra"] = True
    with pytest.raises(HistoryStorageError, match="unknown"):
        SessionRecord.from_dict(payload)


def test_record_from_dict_rejects_bad_values() -> None:
    payload = _record(0).to_dict()
    payload["depth"] = "deep"
    with pytest.raises(HistoryStorageError):
        SessionRecord.from_dict(payload)


def test_history_caps_length(tmp_path: Path) -> None:
    history = SessionHistory(tmp_path / "history.json", max_sessions=3)
    for offset in range(5):
        history.save(_record(offset))

    stored = history.sessions()
    assert len(history) == 3
    assert [record.timestamp for record in stored] == [
        _record(offset).timestamp for offset in (2, 3, 4)
    ]
    assert history.most_recent() == stored[-1]


def test_history_round_trips_through_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "history.json"
    history = SessionHistory(path)
    history.save(_record(0))
    history.save(_record(1, tags=(28, 878)))

    reloaded = SessionHistory(path)

    assert reloaded.sessions() == history.sessions()
    assert isinstance(json.loads(path.read_text(encoding="utf-8")), list)


def test_history_without_path_stays_in_memory() -> None:
    history = SessionHistory()
    history.save(_record(0))
    assert history.path is None
    assert len(history) == 1


def test_corrupt_history_file_starts_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    caplog.set_level(logging.WARNING, logger="cinepath.history.session_history")

    history = SessionHistory(path)

    assert len(history) == 0
    assert any("Discarding unreadable session history" in rec.message for rec in caplog.records)


def test_history_file_must_hold_an_array(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    path.write_text(json.dumps({"sessions": []}), encoding="utf-8")
    assert len(SessionHistory(path)) == 0


def test_remove_and_clear(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    history = SessionHistory(path)
    first, second = _record(0), _record(1)
    history.save(first)
    history.save(second)

    assert history.remove(first.session_id) is True
    assert history.remove("session_missing") is False
    assert history.sessions() == [second]

    history.clear()
    assert len(history) == 0
    assert history.most_recent() is None
    assert not path.exists()


def test_by_genre_and_statistics() -> None:
    history = SessionHistory()
    history.save(_record(0, tags=(35,), movie_count=10))
    history.save(_record(1, tags=(28, 878), movie_count=20))
    history.save(_record(2, tags=(35, 18), movie_count=15))

    assert [record.tags for record in history.by_genre(35)] == [(35,), (35, 18)]

    stats = history.statistics()
    assert stats["total_sessions"] == 3
    assert stats["total_movies"] == 45
    assert stats["average_movies_per_session"] == 15
    assert stats["most_used_genres"][0] == {"genre": "Comedy", "count": 2}
    assert len(stats["most_used_genres"]) == 4


def test_statistics_of_empty_history() -> None:
    stats = SessionHistory().statistics()
    assert stats == {
        "total_sessions": 0,
        "total_movies": 0,
        "average_movies_per_session": 0,
        "most_used_genres": [],
    }


def test_export_json_includes_genre_names() -> None:
    history = SessionHistory()
    history.save(_record(0, tags=(28, 878)))

    exported = json.loads(history.export_json(now=BASE_TIME))

    assert exported["export_date"] == BASE_TIME.isoformat()
    assert exported["session_count"] == 1
    assert exported["sessions"][0]["genre_names"] == ["Action", "Sci-Fi"]
    assert exported["statistics"]["total_sessions"] == 1


def test_write_failures_surface_as_storage_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "occupied"
    blocker.write_text("", encoding="utf-8")
    history = SessionHistory(blocker / "history.json")

    with pytest.raises(HistoryStorageError):
        history.save(_record(0))


def test_same_instant_records_keep_distinct_ids(tmp_path: Path) -> None:
    engine = DecisionTree()
    history = SessionHistory(tmp_path / "history.json")
    comedy = SessionRecord.from_walk(
        engine.traverse([False, True, True, True, False, False]),
        engine.metrics(),
        now=BASE_TIME,
        session_id="comedy",
    )
    sci_fi = SessionRecord.from_walk(
        engine.traverse([True] * 10),
        engine.metrics(),
        now=BASE_TIME,
        session_id="sci-fi",
    )
    history.save(comedy)
    history.save(sci_fi)

    assert comedy.timestamp == sci_fi.timestamp
    assert history.remove(comedy.session_id) is True
    assert len(history) == 1
    assert history.sessions() == [sci_fi]
