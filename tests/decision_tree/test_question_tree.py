from __future__ import annotations

import pytest

from cinepath.decision_tree import (
    QuestionNode,
    QuestionTree,
    TreeStructureError,
    iter_nodes,
    validate_structure,
)
from cinepath.decision_tree.tree_data import TREE_DEFINITION


def test_default_tree_root_question() -> None:
    tree = QuestionTree.default()
    root = tree.root()
    assert root.question == "Are you in the mood for something energized and exciting?"
    assert root.yes is not None and root.no is not None
    assert root.tags == ()
    assert not root.is_leaf


def test_root_is_stable_between_calls() -> None:
    tree = QuestionTree.default()
    assert tree.root() is tree.root()


def test_default_tree_satisfies_leaf_invariant() -> None:
    root = QuestionTree.default().root()
    assert validate_structure(root) == ()
    for node in iter_nodes(root):
        if node.question is None:
            assert node.tags
            assert node.yes is None and node.no is None
        else:
            assert not node.tags
            assert node.yes is not None and node.no is not None


def test_default_tree_tags_are_integers() -> None:
    for node in QuestionTree.default():
        assert all(isinstance(tag, int) and not isinstance(tag, bool) for tag in node.tags)


def test_first_leaf_of_shipped_definition() -> None:
    node = TREE_DEFINITION
    for _ in range(9):
        node = node["yes"]
    assert node["question"] == "Should it have action sequences?"
    assert node["yes"] == {"tags": [28, 878]}
    assert node["no"] == {"tags": [878, 18]}


def test_iter_nodes_is_preorder_yes_first() -> None:
    leaf_a = QuestionNode(tags=(1,))
    leaf_b = QuestionNode(tags=(2,))
    leaf_c = QuestionNode(tags=(3,))
    inner = QuestionNode(question="inner?", yes=leaf_a, no=leaf_b)
    root = QuestionNode(question="root?", yes=inner, no=leaf_c)

    assert list(iter_nodes(root)) == [root, inner, leaf_a, leaf_b, leaf_c]
    assert list(iter_nodes(None)) == []


def test_from_definition_tolerates_single_branch() -> None:
    tree = QuestionTree.from_definition({"question": "Only yes?", "yes": {"tags": [7]}})
    root = tree.root()
    assert root.no is None
    assert root.yes is not None and root.yes.tags == (7,)


@pytest.mark.parametrize(
    ("definition", "fragment"),
    [
        ({"tags": []}, "root: leaf nodes require at least one tag"),
        ({"question": "Lonely?"}, "root: question nodes need at least one branch"),
        (
            {"question": "Both?", "yes": {"tags": [1]}, "tags": [2]},
            "root: question nodes cannot carry tags",
        ),
        ({"tags": [1], "yes": {"tags": [2]}}, "root: leaf nodes cannot have branches"),
        ({"question": "  ", "yes": {"tags": [1]}}, "non-empty string"),
        ({"question": "Q?", "yes": {"tags": ["28"]}}, "root.yes: tag '28' is not an integer"),
        ({"question": "Q?", "yes": {"tags": [True]}}, "not an integer"),
        ({"question": "Q?", "no": {"tags": "28"}}, "root.no: tags must be a sequence"),
        ({"question": "Q?", "yes": {"tags": [1]}, "maybe": {}}, "unknown node keys maybe"),
        ({"question": "Q?", "yes": ["not", "a", "mapping"]}, "root.yes: node definition"),
    ],
)
def test_from_definition_rejects_malformed_nodes(definition, fragment: str) -> None:
    with pytest.raises(TreeStructureError) as exc:
        QuestionTree.from_definition(definition)
    assert fragment in str(exc.value)


def test_error_location_points_at_nested_branch() -> None:
    definition = {
        "question": "Q1?",
        "yes": {"tags": [1]},
        "no": {"question": "Q2?", "yes": {"tags": [2]}, "no": {"tags": []}},
    }
    with pytest.raises(TreeStructureError, match=r"root\.no\.no"):
        QuestionTree.from_definition(definition)


def test_validate_structure_reports_hand_built_defects() -> None:
    bad_leaf = QuestionNode()
    tagged_question = QuestionNode(question="Tagged?", yes=QuestionNode(tags=(1,)), tags=(5,))
    root = QuestionNode(question="Root?", yes=bad_leaf, no=tagged_question)

    violations = validate_structure(root)

    assert "node 1: leaf without tags" in violations
    assert "node 2: question carries tags" in violations


def test_question_tree_requires_node_root() -> None:
    with pytest.raises(TypeError):
        QuestionTree({"question": "dict root"})  # type: ignore[arg-type]


def test_nodes_are_immutable() -> None:
    node = QuestionNode(tags=(35,))
    with pytest.raises(AttributeError):
        node.tags = (18,)  # type: ignore[misc]
