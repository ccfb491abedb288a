"""Immutable binary question tree.

The recommendation questionnaire is a strict binary tree: every internal node
asks a yes/no question and every leaf carries the ordered genre tags that the
catalogue query builder consumes.  This module provides:

* ``QuestionNode`` – a frozen ``@dataclass`` holding either a question with its
  two branches or a tuple of tags.
* ``QuestionTree`` – a thin owner of the root node with constructors for the
  shipped questionnaire and for arbitrary nested mappings.
* ``iter_nodes`` / ``validate_structure`` – helpers for scanning the whole tree,
  used by the metrics calculator and by the structural regression tests.

Malformed definitions are rejected while the tree is being built so traversal
code never has to deal with invalid nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from .tree_data import TREE_DEFINITION

__all__ = [
    "QuestionNode",
    "QuestionTree",
    "TreeStructureError",
    "iter_nodes",
    "validate_structure",
]

_ALLOWED_KEYS = frozenset({"question", "yes", "no", "tags"})


class TreeStructureError(ValueError):
    """Raised when a tree definition violates the question/leaf invariant."""


@dataclass(frozen=True, slots=True)
class QuestionNode:
    """A question with yes/no branches, or a leaf carrying genre tags."""

    question: Optional[str] = None
    yes: Optional["QuestionNode"] = None
    no: Optional["QuestionNode"] = None
    tags: Tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return self.question is None

    def child(self, answer: object) -> Optional["QuestionNode"]:
        """Return the branch selected by *answer* (truthy means "yes")."""

        return self.yes if answer else self.no


class QuestionTree:
    """Owner of an immutable question hierarchy."""

    __slots__ = ("_root",)

    def __init__(self, root: QuestionNode) -> None:
        if not isinstance(root, QuestionNode):
            raise TypeError("root must be a QuestionNode")
        self._root = root

    @classmethod
    def default(cls) -> "QuestionTree":
        """Build the shipped movie questionnaire."""

        return cls.from_definition(TREE_DEFINITION)

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> "QuestionTree":
        """Build a tree from nested ``question``/``yes``/``no``/``tags`` mappings."""

        return cls(_build_node(definition, "root"))

    def root(self) -> QuestionNode:
        return self._root

    def __iter__(self) -> Iterator[QuestionNode]:
        return iter_nodes(self._root)


def _build_node(definition: Mapping[str, Any], location: str) -> QuestionNode:
    if not isinstance(definition, Mapping):
        raise TreeStructureError(f"{location}: node definition must be a mapping")

    unknown = set(definition) - _ALLOWED_KEYS
    if unknown:
        raise TreeStructureError(
            f"{location}: unknown node keys {', '.join(sorted(unknown))}"
        )

    question = definition.get("question")
    raw_tags = definition.get("tags")

    if question is None:
        if "yes" in definition or "no" in definition:
            raise TreeStructureError(f"{location}: leaf nodes cannot have branches")
        tags = _normalise_tags(raw_tags, location)
        if not tags:
            raise TreeStructureError(f"{location}: leaf nodes require at least one tag")
        return QuestionNode(tags=tags)

    if not isinstance(question, str) or not question.strip():
        raise TreeStructureError(f"{location}: question must be a non-empty string")
    if raw_tags:
        raise TreeStructureError(f"{location}: question nodes cannot carry tags")

    yes = _build_optional_child(definition, "yes", location)
    no = _build_optional_child(definition, "no", location)
    if yes is None and no is None:
        raise TreeStructureError(f"{location}: question nodes need at least one branch")
    return QuestionNode(question=question, yes=yes, no=no)


def _build_optional_child(
    definition: Mapping[str, Any], key: str, location: str
) -> Optional[QuestionNode]:
    child = definition.get(key)
    if child is None:
        return None
    return _build_node(child, f"{location}.{key}")


def _normalise_tags(raw_tags: Any, location: str) -> Tuple[int, ...]:
    if raw_tags is None:
        return ()
    if isinstance(raw_tags, (str, bytes)):
        raise TreeStructureError(f"{location}: tags must be a sequence of integers")
    try:
        tags = tuple(raw_tags)
    except TypeError as exc:
        raise TreeStructureError(
            f"{location}: tags must be a sequence of integers"
        ) from exc
    for tag in tags:
        if not isinstance(tag, int) or isinstance(tag, bool):
            raise TreeStructureError(f"{location}: tag {tag!r} is not an integer")
    return tags


def iter_nodes(root: Optional[QuestionNode]) -> Iterator[QuestionNode]:
    """Yield every reachable node in pre-order, "yes" branches first."""

    stack: List[QuestionNode] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.no is not None:
            stack.append(node.no)
        if node.yes is not None:
            stack.append(node.yes)


def validate_structure(root: Optional[QuestionNode]) -> Tuple[str, ...]:
    """Scan the whole tree and describe every node breaking the leaf invariant.

    Nodes built through :meth:`QuestionTree.from_definition` always pass; the
    scan exists for trees assembled by hand from ``QuestionNode`` instances.
    """

    violations: List[str] = []
    for index, node in enumerate(iter_nodes(root)):
        if node.is_leaf:
            if not node.tags:
                violations.append(f"node {index}: leaf without tags")
            if node.yes is not None or node.no is not None:
                violations.append(f"node {index}: leaf with branches")
        else:
            if node.tags:
                violations.append(f"node {index}: question carries tags")
            if node.yes is None and node.no is None:
                violations.append(f"node {index}: question without branches")
    return tuple(violations)
