"""CinePath recommendation engine.

The package walks a fixed yes/no questionnaire to pick catalogue genres.  The
traversal core lives in :mod:`cinepath.decision_tree`; the catalogue query
builder, the bounded session history and the HTTP session service sit around
it and only consume the engine's results.
"""

from __future__ import annotations

from .decision_tree import (
    DecisionTree,
    QuestionSession,
    QuestionTree,
    TraversalResult,
    TreeMetrics,
)

__all__ = [
    "DecisionTree",
    "QuestionSession",
    "QuestionTree",
    "TraversalResult",
    "TreeMetrics",
]

__version__ = "0.1.0"
