"""FastAPI service exposing isolated question sessions over HTTP.

Every ``POST /sessions`` call creates a fresh :class:`QuestionSession`; clients
then answer, undo and inspect it by id.  All sessions share one read-only
:class:`DecisionTree`.  Finished walks are appended to the configured
:class:`SessionHistory` and their traversal latency is exported in Prometheus
format on ``/metrics``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
import uuid

from fastapi import FastAPI, HTTPException, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)
from pydantic import BaseModel
from starlette.responses import Response

from ..catalog.genre_query import build_query_from_genres, genre_names
from ..config import Settings
from ..decision_tree.session import QuestionSession
from ..decision_tree.traversal import DecisionTree
from ..history.session_history import HistoryStorageError, SessionHistory, SessionRecord

logger = logging.getLogger(__name__)

__all__ = ["METRICS_REGISTRY", "SessionRegistry", "create_app"]

METRICS_REGISTRY = CollectorRegistry()
WALK_LATENCY = Histogram(
    "cinepath_walk_latency_seconds",
    "Time spent traversing the question tree for a finished walk",
    buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05),
    registry=METRICS_REGISTRY,
)
WALKS_COMPLETED = Counter(
    "cinepath_walks_completed",
    "Question sessions that reached a recommendation",
    registry=METRICS_REGISTRY,
)


class AnswerPayload(BaseModel):
    answer: bool


class SessionRegistry:
    """In-memory mapping of session ids to their isolated state.

    At most *max_sessions* sessions are kept; creating one more evicts the
    session that was created first.
    """

    def __init__(self, engine: DecisionTree, max_sessions: int = 1000) -> None:
        if max_sessions <= 0:
            raise ValueError("max_sessions must be positive")
        self._engine = engine
        self._max_sessions = max_sessions
        self._sessions: Dict[str, QuestionSession] = {}

    def create(self) -> tuple[str, QuestionSession]:
        while len(self._sessions) >= self._max_sessions:
            evicted = next(iter(self._sessions))
            del self._sessions[evicted]
            logger.debug("Evicted oldest live session %s", evicted)
        session_id = uuid.uuid4().hex
        session = QuestionSession(self._engine)
        self._sessions[session_id] = session
        return session_id, session

    def get(self, session_id: str) -> QuestionSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise HTTPException(status_code=404, detail="Unknown session") from None

    def discard(self, session_id: str) -> None:
        self.get(session_id)
        del self._sessions[session_id]

    def __len__(self) -> int:
        return len(self._sessions)


def _session_state(session_id: str, session: QuestionSession) -> Dict[str, Any]:
    result = session.result
    return {
        "session_id": session_id,
        "question": session.current_question,
        "path": list(session.path),
        "answers": list(session.answers),
        "phase": session.phase.value,
        "can_undo": session.can_undo,
        "progress": session.progress().to_dict(),
        "result": result.to_dict() if result is not None else None,
        "genres": genre_names(result.tags) if result is not None else [],
    }


def create_app(
    settings: Optional[Settings] = None,
    *,
    engine: Optional[DecisionTree] = None,
    history: Optional[SessionHistory] = None,
) -> FastAPI:
    """Build the service; pass *engine* or *history* to share existing instances."""

    settings = settings if settings is not None else Settings()
    engine = engine if engine is not None else DecisionTree()
    if history is None:
        history = SessionHistory(settings.history_path, max_sessions=settings.max_sessions)

    app = FastAPI(title="CinePath sessions")
    app.state.settings = settings
    app.state.engine = engine
    app.state.history = history
    app.state.sessions = SessionRegistry(engine, settings.max_live_sessions)

    def _registry(request: Request) -> SessionRegistry:
        return request.app.state.sessions

    @app.get("/health/live")
    async def live() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/tree/metrics")
    async def tree_metrics() -> Dict[str, int]:
        return engine.metrics().to_dict()

    @app.post("/sessions", status_code=201)
    async def create_session(request: Request) -> Dict[str, Any]:
        session_id, session = _registry(request).create()
        logger.info("Created session %s", session_id)
        return _session_state(session_id, session)

    @app.get("/sessions/{session_id}")
    async def read_session(session_id: str, request: Request) -> Dict[str, Any]:
        return _session_state(session_id, _registry(request).get(session_id))

    @app.post("/sessions/{session_id}/answers")
    async def answer(
        session_id: str, payload: AnswerPayload, request: Request
    ) -> Dict[str, Any]:
        session = _registry(request).get(session_id)
        was_finished = session.is_finished
        result = session.answer(payload.answer)
        if result is not None and not was_finished:
            WALK_LATENCY.observe(result.elapsed_ms / 1000)
            WALKS_COMPLETED.inc()
            logger.info("Session %s finished with tags %s", session_id, list(result.tags))
            record = SessionRecord.from_walk(result, engine.metrics(), session_id=session_id)
            try:
                history.save(record)
            except HistoryStorageError as exc:
                logger.warning("Could not record session %s: %s", session_id, exc)
        return _session_state(session_id, session)

    @app.post("/sessions/{session_id}/undo")
    async def undo(session_id: str, request: Request) -> Dict[str, Any]:
        session = _registry(request).get(session_id)
        undone = session.undo()
        state = _session_state(session_id, session)
        state["undone"] = undone
        return state

    @app.get("/sessions/{session_id}/query")
    async def catalogue_query(session_id: str, request: Request) -> Dict[str, str]:
        session = _registry(request).get(session_id)
        if session.result is None:
            raise HTTPException(status_code=409, detail="Session has not finished yet")
        return build_query_from_genres(session.result.tags, sort_by=settings.sort_by)

    @app.delete("/sessions/{session_id}", status_code=204)
    async def delete_session(session_id: str, request: Request) -> Response:
        _registry(request).discard(session_id)
        return Response(status_code=204)

    @app.get("/metrics")
    async def metrics() -> Response:
        return Response(generate_latest(METRICS_REGISTRY), media_type=CONTENT_TYPE_LATEST)

    return app
