"""Whole-tree statistics used to put a single walk into context.

All helpers are stateless functions over a root :class:`QuestionNode` so they
can be evaluated for any subtree.  ``theoretical_balanced_depth`` is a reference
figure (the depth a perfectly balanced tree with the same node count would
need) and is not a bound for the shipped, deliberately unbalanced tree.

``to_networkx`` imports NetworkX lazily so the core calculator stays usable in
minimal environments.
"""

from __future__ import annotations

from collections import deque
from dataclasses import asdict, dataclass
import math
from typing import TYPE_CHECKING, Any, Deque, Dict, List, Optional, Set, TypeAlias

from .question_tree import QuestionNode, iter_nodes

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    from .traversal import TraversalResult
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxDiGraph: TypeAlias = nx.DiGraph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxDiGraph: TypeAlias = Any

__all__ = [
    "TreeMetrics",
    "WalkComparison",
    "all_questions",
    "collect_metrics",
    "compare_walk",
    "height",
    "leaf_count",
    "theoretical_balanced_depth",
    "to_networkx",
    "total_nodes",
]


@dataclass(frozen=True)
class TreeMetrics:
    """Snapshot of the structural statistics of a tree."""

    height: int
    total_nodes: int
    leaf_count: int
    question_count: int
    theoretical_depth: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class WalkComparison:
    """How a finished walk compares with the tree it was taken on."""

    depth: int
    visited_nodes: int
    elapsed_ms: float
    tree_height: int
    total_nodes: int
    theoretical_depth: int
    efficiency_percent: float
    time_complexity: str
    space_complexity: str

    @property
    def depth_delta(self) -> int:
        """Questions asked beyond the balanced-tree reference depth."""

        return self.depth - self.theoretical_depth

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["depth_delta"] = self.depth_delta
        return payload


def height(node: Optional[QuestionNode]) -> int:
    """Return the number of levels below and including *node* (``0`` for ``None``)."""

    if node is None:
        return 0
    return 1 + max(height(node.yes), height(node.no))


def total_nodes(node: Optional[QuestionNode]) -> int:
    """Count every reachable node, questions and leaves alike."""

    return sum(1 for _ in iter_nodes(node))


def leaf_count(node: Optional[QuestionNode]) -> int:
    return sum(1 for candidate in iter_nodes(node) if candidate.is_leaf)


def theoretical_balanced_depth(node: Optional[QuestionNode]) -> int:
    """Return ``ceil(log2(total_nodes + 1))`` for the tree rooted at *node*."""

    return math.ceil(math.log2(total_nodes(node) + 1))


def all_questions(node: Optional[QuestionNode]) -> List[str]:
    """Return every question text in breadth-first order.

    Nodes are tracked by identity so a shared subtree is only reported once.
    The list is rebuilt on every call.
    """

    if node is None:
        return []

    questions: List[str] = []
    queue: Deque[QuestionNode] = deque([node])
    visited: Set[int] = set()

    while queue:
        current = queue.popleft()
        if id(current) in visited:
            continue
        visited.add(id(current))

        if current.question is not None:
            questions.append(current.question)
        if current.yes is not None:
            queue.append(current.yes)
        if current.no is not None:
            queue.append(current.no)

    return questions


def collect_metrics(node: Optional[QuestionNode]) -> TreeMetrics:
    nodes = total_nodes(node)
    leaves = leaf_count(node)
    return TreeMetrics(
        height=height(node),
        total_nodes=nodes,
        leaf_count=leaves,
        question_count=nodes - leaves,
        theoretical_depth=math.ceil(math.log2(nodes + 1)),
    )


def compare_walk(result: "TraversalResult", metrics: TreeMetrics) -> WalkComparison:
    """Relate *result* to the tree statistics shown next to a recommendation.

    ``efficiency_percent`` is the share of the tree height the walk needed,
    rounded to one decimal place.
    """

    if metrics.height > 0:
        efficiency = round(result.depth / metrics.height * 100, 1)
    else:
        efficiency = 0.0
    return WalkComparison(
        depth=result.depth,
        visited_nodes=result.visited_nodes,
        elapsed_ms=result.elapsed_ms,
        tree_height=metrics.height,
        total_nodes=metrics.total_nodes,
        theoretical_depth=metrics.theoretical_depth,
        efficiency_percent=efficiency,
        time_complexity=f"O({metrics.height})",
        space_complexity=f"O({result.depth})",
    )


def to_networkx(node: Optional[QuestionNode]) -> NxDiGraph:
    """Export the tree as a directed NetworkX graph.

    Node identifiers are pre-order indices; question nodes carry a ``question``
    attribute, leaves carry ``tags``.  Every edge records the ``answer`` that
    selects it.
    """

    try:
        import networkx as nx  # type: ignore[import-not-found,import-untyped]
    except ModuleNotFoundError as exc:  # pragma: no cover - depends on environment
        raise ModuleNotFoundError(
            "networkx is required for graph export. Install it with 'pip install networkx'."
        ) from exc

    graph = nx.DiGraph()
    indices: Dict[int, int] = {}
    for index, current in enumerate(iter_nodes(node)):
        indices[id(current)] = index
        if current.is_leaf:
            graph.add_node(index, tags=list(current.tags))
        else:
            graph.add_node(index, question=current.question)

    for current in iter_nodes(node):
        for answer, child in ((True, current.yes), (False, current.no)):
            if child is not None:
                graph.add_edge(indices[id(current)], indices[id(child)], answer=answer)
    return graph
