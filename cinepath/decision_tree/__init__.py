"""Question tree model, traversal engine, undo sessions and tree metrics."""

from .metrics import (
    TreeMetrics,
    WalkComparison,
    all_questions,
    collect_metrics,
    compare_walk,
    height,
    leaf_count,
    theoretical_balanced_depth,
    to_networkx,
    total_nodes,
)
from .question_tree import (
    QuestionNode,
    QuestionTree,
    TreeStructureError,
    iter_nodes,
    validate_structure,
)
from .session import (
    QuestionProgress,
    QuestionSession,
    SessionNotFinishedError,
    SessionPhase,
    UndoStack,
)
from .traversal import DecisionTree, TraversalResult

__all__ = [
    "DecisionTree",
    "QuestionNode",
    "QuestionProgress",
    "QuestionSession",
    "QuestionTree",
    "SessionNotFinishedError",
    "SessionPhase",
    "TraversalResult",
    "TreeMetrics",
    "TreeStructureError",
    "UndoStack",
    "WalkComparison",
    "all_questions",
    "collect_metrics",
    "compare_walk",
    "height",
    "iter_nodes",
    "leaf_count",
    "theoretical_balanced_depth",
    "to_networkx",
    "total_nodes",
    "validate_structure",
]
