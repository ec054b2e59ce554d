"""Tests for recursive and iterative tree inversion."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarytreelib import BinaryTree
from binarytreelib.testing import populate_balanced_binary_tree, populate_balanced_binary_search_tree

EXPECTED_INORDER = [
    "n7", "n3", "n8", "n1", "n9", "n4", "n10", "n0",
    "n11", "n5", "n12", "n2", "n13", "n6", "n14",
]

EXPECTED_INVERTED = [
    "n14", "n6", "n13", "n2", "n12", "n5", "n11", "n0",
    "n10", "n4", "n9", "n1", "n8", "n3", "n7",
]

INVERTERS = [
    pytest.param(BinaryTree.invert_recursive, id="recursive"),
    pytest.param(BinaryTree.invert_iterative, id="iterative"),
]


def inorder_names(root):
    return [node.name for node in BinaryTree.flatten_inorder(root)]


@pytest.mark.parametrize("invert", INVERTERS)
def test_invert_reverses_inorder(invert):
    root = populate_balanced_binary_tree()
    invert(root)

    assert inorder_names(root) == EXPECTED_INVERTED


@pytest.mark.parametrize("invert", INVERTERS)
def test_invert_twice_restores_tree(invert):
    root = populate_balanced_binary_tree()
    invert(root)
    invert(root)

    assert inorder_names(root) == EXPECTED_INORDER
    assert [n.name for n in BinaryTree.flatten_top_down(root)] == [f"n{i}" for i in range(15)]


@pytest.mark.parametrize("nodes_count", [1, 2, 6, 11])
def test_recursive_and_iterative_agree(nodes_count):
    first = populate_balanced_binary_tree(nodes_count=nodes_count)
    second = populate_balanced_binary_tree(nodes_count=nodes_count)

    BinaryTree.invert_recursive(first)
    BinaryTree.invert_iterative(second)

    assert inorder_names(first) == inorder_names(second)
    assert ([n.name for n in BinaryTree.flatten_top_down(first)]
            == [n.name for n in BinaryTree.flatten_top_down(second)])


@pytest.mark.parametrize("invert", INVERTERS)
def test_invert_mirrors_every_node(invert):
    root = populate_balanced_binary_tree(nodes_count=10)
    before = {
        node.name: (
            node.left.name if node.left else None,
            node.right.name if node.right else None,
        )
        for node in BinaryTree.flatten_top_down(root)
    }

    invert(root)

    for node in BinaryTree.flatten_top_down(root):
        left, right = before[node.name]
        assert (node.left.name if node.left else None) == right
        assert (node.right.name if node.right else None) == left


@pytest.mark.parametrize("invert", INVERTERS)
def test_invert_keeps_parent_links(invert):
    root = populate_balanced_binary_tree()
    parents = {node.name: node.parent for node in BinaryTree.flatten_top_down(root)}

    invert(root)

    for node in BinaryTree.flatten_top_down(root):
        assert node.parent is parents[node.name]
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node


@pytest.mark.parametrize("invert", INVERTERS)
def test_invert_search_tree_reverses_keys(invert):
    root = populate_balanced_binary_search_tree()
    invert(root)

    keys = [node.data for node in BinaryTree.flatten_inorder(root)]
    assert keys == list(range(15, 0, -1))


@pytest.mark.parametrize("invert", INVERTERS)
def test_invert_none_is_noop(invert):
    invert(None)


@pytest.mark.parametrize("invert", INVERTERS)
def test_invert_single_node(invert):
    node = BinaryTree.new_node()
    invert(node)
    assert node.left is None and node.right is None
