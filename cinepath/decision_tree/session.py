"""Interactive question sessions with single-step undo.

A :class:`QuestionSession` answers one question at a time.  Before every
advance the node being left is pushed onto an :class:`UndoStack`, so undo pops
exactly one node and restores it without replaying the walk.  The restored
state always matches what :meth:`DecisionTree.traverse` produces for the
shortened answer sequence.

Sessions are cheap and own all of their mutable state; the underlying tree is
shared read-only between them.
"""

from __future__ import annotations

from dataclasses import dataclass
import enum
import logging
import time
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from .question_tree import QuestionNode
from .traversal import DecisionTree, TraversalResult

logger = logging.getLogger(__name__)

__all__ = [
    "QuestionProgress",
    "QuestionSession",
    "SessionNotFinishedError",
    "SessionPhase",
    "UndoStack",
]

T = TypeVar("T")


class SessionNotFinishedError(RuntimeError):
    """Raised when a summary is requested before a leaf has been reached."""


class SessionPhase(str, enum.Enum):
    ANSWERING = "answering"
    FINISHED = "finished"


class UndoStack(Generic[T]):
    """Last-in, first-out store of previously current nodes."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the newest item, or ``None`` when empty."""

        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def to_list(self) -> List[T]:
        """Return a copy ordered from oldest to newest."""

        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class QuestionProgress:
    """Read-only progress figures for a "question N of M" display."""

    question_number: int
    total_questions: int

    @property
    def percent(self) -> int:
        if self.total_questions <= 0:
            return 0
        return round(self.question_number / self.total_questions * 100)

    def to_dict(self) -> Dict[str, int]:
        return {
            "question_number": self.question_number,
            "total_questions": self.total_questions,
            "percent": self.percent,
        }


class QuestionSession:
    """Per-user traversal state: current node, answered path and undo history."""

    def __init__(self, engine: Optional[DecisionTree] = None) -> None:
        self._engine = engine if engine is not None else DecisionTree()
        self._height = self._engine.height()
        self._undo: UndoStack[QuestionNode] = UndoStack()
        self._current = self._engine.root()
        self._path: List[str] = []
        self._answers: List[bool] = []
        self._result: Optional[TraversalResult] = None
        self._started_at = time.perf_counter()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def engine(self) -> DecisionTree:
        return self._engine

    @property
    def current_node(self) -> QuestionNode:
        return self._current

    @property
    def current_question(self) -> Optional[str]:
        return self._current.question

    @property
    def path(self) -> Tuple[str, ...]:
        return tuple(self._path)

    @property
    def answers(self) -> Tuple[bool, ...]:
        return tuple(self._answers)

    @property
    def phase(self) -> SessionPhase:
        if self._current.is_leaf:
            return SessionPhase.FINISHED
        return SessionPhase.ANSWERING

    @property
    def is_finished(self) -> bool:
        return self.phase is SessionPhase.FINISHED

    @property
    def result(self) -> Optional[TraversalResult]:
        return self._result

    @property
    def can_undo(self) -> bool:
        return not self._undo.is_empty()

    @property
    def elapsed_seconds(self) -> float:
        """Wall-clock time since the session started or was last reset."""

        return time.perf_counter() - self._started_at

    def progress(self) -> QuestionProgress:
        """Question being asked; a finished session reports its last question."""

        answered = len(self._answers)
        return QuestionProgress(
            question_number=answered if self.is_finished else answered + 1,
            total_questions=self._height,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def answer(self, value: bool) -> Optional[TraversalResult]:
        """Apply one answer and return the walk result once a leaf is reached.

        Answers given after the session finished, or that select a missing
        branch, leave the session unchanged.
        """

        node = self._current
        if node.question is None:
            logger.debug("Ignoring answer %s: session already finished", value)
            return self._result

        child = node.child(value)
        if child is None:
            logger.debug("Ignoring answer %s: no branch below %r", value, node.question)
            return None

        self._undo.push(node)
        self._path.append(node.question)
        self._answers.append(bool(value))
        self._current = child

        if child.is_leaf:
            self._result = self._engine.traverse(self._answers)
            logger.debug(
                "Session finished after %s answers with tags %s",
                len(self._answers),
                list(self._result.tags),
            )
        return self._result

    def undo(self) -> bool:
        """Step back one question; return ``False`` when there is nothing to undo."""

        previous = self._undo.pop()
        if previous is None:
            return False

        self._current = previous
        self._path.pop()
        self._answers.pop()
        self._result = None
        logger.debug("Undo restored question %r", previous.question)
        return True

    def reset(self) -> None:
        self._undo.clear()
        self._current = self._engine.root()
        self._path.clear()
        self._answers.clear()
        self._result = None
        self._started_at = time.perf_counter()

    def summary(self) -> Dict[str, Any]:
        """Return the fields the session history stores for a finished walk."""

        if self._result is None:
            raise SessionNotFinishedError("The session has not reached a recommendation yet")

        tree_metrics = self._engine.metrics()
        return {
            "tags": list(self._result.tags),
            "path": list(self._result.path),
            "visited_nodes": self._result.visited_nodes,
            "depth": self._result.depth,
            "elapsed_ms": self._result.elapsed_ms,
            "tree_height": tree_metrics.height,
            "theoretical_depth": tree_metrics.theoretical_depth,
        }
