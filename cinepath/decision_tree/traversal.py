"""Answer-driven depth-first walk over the question tree.

``DecisionTree`` owns one immutable :class:`QuestionTree` and turns a sequence
of boolean answers into a :class:`TraversalResult`.  The walk descends one level
per answer, stops as soon as a leaf is reached or the selected branch is
missing, and never mutates the tree, so identical answer prefixes always land
on the same node.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from . import metrics as tree_metrics
from .question_tree import QuestionNode, QuestionTree

logger = logging.getLogger(__name__)

__all__ = ["DecisionTree", "TraversalResult"]


@dataclass(frozen=True)
class TraversalResult:
    """Outcome of applying an answer sequence to the tree."""

    tags: Tuple[int, ...]
    path: Tuple[str, ...]
    visited_nodes: int
    elapsed_ms: float
    depth: int

    @property
    def reached_leaf(self) -> bool:
        return bool(self.tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tags": list(self.tags),
            "path": list(self.path),
            "visited_nodes": self.visited_nodes,
            "elapsed_ms": self.elapsed_ms,
            "depth": self.depth,
        }


class DecisionTree:
    """Traversal engine bound to a single question tree."""

    __slots__ = ("_tree",)

    def __init__(self, tree: Optional[QuestionTree] = None) -> None:
        self._tree = tree if tree is not None else QuestionTree.default()

    @property
    def tree(self) -> QuestionTree:
        return self._tree

    def root(self) -> QuestionNode:
        return self._tree.root()

    def traverse(self, answers: Iterable[object]) -> TraversalResult:
        """Walk from the root following *answers* (truthy means "yes").

        Excess answers are ignored once a leaf is reached.  A missing branch
        ends the walk on the last node that exists; no error is raised.
        """

        start = time.perf_counter()
        node, path = self._walk(answers)
        elapsed_ms = (time.perf_counter() - start) * 1000

        tags = node.tags if node.is_leaf else ()
        logger.debug(
            "Walk finished after %s questions with tags %s", len(path), list(tags)
        )
        return TraversalResult(
            tags=tags,
            path=tuple(path),
            visited_nodes=len(path),
            elapsed_ms=elapsed_ms,
            depth=len(path),
        )

    def locate(self, answers: Iterable[object]) -> QuestionNode:
        """Return the node a walk over *answers* finishes on."""

        node, _ = self._walk(answers)
        return node

    def _walk(self, answers: Iterable[object]) -> Tuple[QuestionNode, List[str]]:
        node = self._tree.root()
        path: List[str] = []
        for answer in answers:
            if node.question is None:
                break
            path.append(node.question)
            child = node.child(answer)
            if child is None:
                logger.debug("Branch missing below %r; stopping walk", node.question)
                break
            node = child
        return node, path

    # ------------------------------------------------------------------
    # Tree statistics
    # ------------------------------------------------------------------
    def height(self) -> int:
        return tree_metrics.height(self.root())

    def total_nodes(self) -> int:
        return tree_metrics.total_nodes(self.root())

    def theoretical_balanced_depth(self) -> int:
        return tree_metrics.theoretical_balanced_depth(self.root())

    def all_questions(self) -> List[str]:
        return tree_metrics.all_questions(self.root())

    def metrics(self) -> tree_metrics.TreeMetrics:
        return tree_metrics.collect_metrics(self.root())
