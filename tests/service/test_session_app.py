from __future__ import annotations

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from cinepath.config import Settings
from cinepath.history import HistoryStorageError, SessionHistory
from cinepath.service import create_app

PURE_COMEDY = [False, True, True, True, False, False]


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.asyncio
async def test_full_session_flow_records_history(tmp_path: Path) -> None:
    history = SessionHistory(tmp_path / "history.json")
    app = create_app(Settings(), history=history)

    async with _client(app) as client:
        created = await client.post("/sessions")
        assert created.status_code == 201
        state = created.json()
        session_id = state["session_id"]
        assert state["phase"] == "answering"
        assert state["progress"] == {"question_number": 1, "total_questions": 12, "percent": 8}

        early_query = await client.get(f"/sessions/{session_id}/query")
        assert early_query.status_code == 409

        for answer in PURE_COMEDY:
            response = await client.post(
                f"/sessions/{session_id}/answers", json={"answer": answer}
            )
            assert response.status_code == 200
        state = response.json()

        query = await client.get(f"/sessions/{session_id}/query")

    assert state["phase"] == "finished"
    assert state["result"]["tags"] == [35]
    assert state["genres"] == ["Comedy"]
    assert len(state["path"]) == 6
    assert query.json() == {
        "with_genres": "35",
        "without_genres": "18,10749",
        "sort_by": "popularity.desc",
    }
    assert [record.tags for record in history.sessions()] == [(35,)]
    assert history.sessions()[0].session_id == session_id


@pytest.mark.asyncio
async def test_undo_endpoint_steps_back() -> None:
    app = create_app(history=SessionHistory())

    async with _client(app) as client:
        session_id = (await client.post("/sessions")).json()["session_id"]

        empty_undo = await client.post(f"/sessions/{session_id}/undo")
        await client.post(f"/sessions/{session_id}/answers", json={"answer": False})
        undo = await client.post(f"/sessions/{session_id}/undo")
        await client.post(f"/sessions/{session_id}/answers", json={"answer": True})
        state = (await client.get(f"/sessions/{session_id}")).json()

    assert empty_undo.json()["undone"] is False
    assert undo.json()["undone"] is True
    assert undo.json()["answers"] == []
    assert state["answers"] == [True]
    assert state["question"] == "Do you want high-energy action"


@pytest.mark.asyncio
async def test_sessions_are_isolated_by_id() -> None:
    app = create_app(history=SessionHistory())

    async with _client(app) as client:
        first = (await client.post("/sessions")).json()["session_id"]
        second = (await client.post("/sessions")).json()["session_id"]
        await client.post(f"/sessions/{first}/answers", json={"answer": True})
        second_state = (await client.get(f"/sessions/{second}")).json()

    assert first != second
    assert second_state["answers"] == []


@pytest.mark.asyncio
async def test_unknown_and_deleted_sessions_return_404() -> None:
    app = create_app(history=SessionHistory())

    async with _client(app) as client:
        missing = await client.get("/sessions/nope")
        session_id = (await client.post("/sessions")).json()["session_id"]
        deleted = await client.delete(f"/sessions/{session_id}")
        after = await client.post(f"/sessions/{session_id}/undo")

    assert missing.status_code == 404
    assert deleted.status_code == 204
    assert after.status_code == 404


@pytest.mark.asyncio
async def test_invalid_answer_payload_is_rejected() -> None:
    app = create_app(history=SessionHistory())

    async with _client(app) as client:
        session_id = (await client.post("/sessions")).json()["session_id"]
        response = await client.post(f"/sessions/{session_id}/answers", json={})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_tree_metrics_and_prometheus_endpoints() -> None:
    app = create_app(history=SessionHistory())

    async with _client(app) as client:
        live = await client.get("/health/live")
        metrics = await client.get("/tree/metrics")
        session_id = (await client.post("/sessions")).json()["session_id"]
        for answer in PURE_COMEDY:
            await client.post(f"/sessions/{session_id}/answers", json={"answer": answer})
        exposition = await client.get("/metrics")

    assert live.json() == {"status": "alive"}
    assert metrics.json() == {
        "height": 12,
        "total_nodes": 409,
        "leaf_count": 205,
        "question_count": 204,
        "theoretical_depth": 9,
    }
    body = exposition.text
    assert "cinepath_walk_latency_seconds_bucket" in body
    assert "cinepath_walks_completed_total" in body


@pytest.mark.asyncio
async def test_live_sessions_are_capped() -> None:
    app = create_app(Settings(max_live_sessions=3), history=SessionHistory())

    async with _client(app) as client:
        session_ids = [(await client.post("/sessions")).json()["session_id"] for _ in range(5)]
        for session_id in session_ids[-3:]:
            for answer in PURE_COMEDY:
                await client.post(f"/sessions/{session_id}/answers", json={"answer": answer})
        evicted = await client.get(f"/sessions/{session_ids[0]}")
        newest = await client.get(f"/sessions/{session_ids[-1]}")

    assert len(app.state.sessions) == 3
    assert evicted.status_code == 404
    assert newest.json()["phase"] == "finished"


@pytest.mark.asyncio
async def test_history_failure_still_returns_finished_state(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    history = SessionHistory()

    def failing_save(record) -> None:
        raise HistoryStorageError("disk full")

    monkeypatch.setattr(history, "save", failing_save)
    app = create_app(history=history)

    with caplog.at_level("WARNING", logger="cinepath.service.app"):
        async with _client(app) as client:
            session_id = (await client.post("/sessions")).json()["session_id"]
            for answer in PURE_COMEDY:
                response = await client.post(
                    f"/sessions/{session_id}/answers", json={"answer": answer}
                )

    assert response.status_code == 200
    assert response.json()["result"]["tags"] == [35]
    assert "Could not record session" in caplog.text
