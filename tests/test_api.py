"""Tests for the high-level functional API."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarytreelib import (
    ConfigurationError,
    DepthConfig,
    MirroredBinaryTreeAdapter,
    TraversalConfig,
    TraversalStrategy,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
    is_binary_search_tree,
    traverse_tree,
)
from binarytreelib.testing import populate_balanced_binary_tree, populate_balanced_binary_search_tree


@pytest.fixture
def root():
    return populate_balanced_binary_tree()


def names(nodes):
    return [node.name for node in nodes]


def test_traverse_tree_defaults_to_breadth_first(root):
    assert names(traverse_tree(root)) == [f"n{i}" for i in range(15)]


@pytest.mark.parametrize("strategy", ["inorder", "in_order", TraversalStrategy.IN_ORDER])
def test_traverse_tree_inorder(root, strategy):
    result = names(traverse_tree(root, strategy=strategy))
    assert result[:3] == ["n7", "n3", "n8"]
    assert result[7] == "n0"


def test_traverse_tree_mirrored(root):
    plain = names(traverse_tree(root, strategy="inorder"))
    mirrored = names(traverse_tree(root, strategy="inorder", mirrored=True))
    assert mirrored == list(reversed(plain))


def test_traverse_tree_explicit_adapter(root):
    result = names(traverse_tree(root, adapter=MirroredBinaryTreeAdapter(), max_depth=1))
    assert result == ["n0", "n2", "n1"]


def test_traverse_tree_with_config(root):
    config = TraversalConfig(
        strategy=TraversalStrategy.DEPTH_FIRST_PRE,
        depth=DepthConfig(max_depth=2),
    )
    assert names(traverse_tree(root, config=config)) == ["n0", "n1", "n3", "n4", "n2", "n5", "n6"]


def test_traverse_tree_unknown_strategy(root):
    with pytest.raises(ValueError):
        list(traverse_tree(root, strategy="spiral"))


def test_traverse_tree_invalid_depth(root):
    with pytest.raises(ConfigurationError) as excinfo:
        list(traverse_tree(root, min_depth=3, max_depth=1))
    assert "max_depth cannot be less than min_depth" in excinfo.value.errors


def test_count_nodes(root):
    assert count_nodes(root) == 15
    assert count_nodes(root, max_depth=2) == 7
    assert count_nodes(root, min_depth=3) == 8


def test_find_nodes(root):
    evens = names(find_nodes(root, lambda node: node.data % 2 == 0))
    assert evens == ["n0", "n2", "n4", "n6", "n8", "n10", "n12", "n14"]


def test_get_leaf_nodes(root):
    assert names(get_leaf_nodes(root)) == [f"n{i}" for i in range(7, 15)]


def test_get_tree_stats(root):
    stats = get_tree_stats(root)
    assert stats['total_nodes'] == 15
    assert stats['leaf_nodes'] == 8
    assert stats['internal_nodes'] == 7
    assert stats['max_depth'] == 3
    assert stats['depths'] == {0: 1, 1: 2, 2: 4, 3: 8}


def test_get_tree_stats_uneven():
    stats = get_tree_stats(populate_balanced_binary_tree(nodes_count=6))
    assert stats['total_nodes'] == 6
    assert stats['leaf_nodes'] == 3
    assert stats['depths'] == {0: 1, 1: 2, 2: 3}


def test_is_binary_search_tree():
    assert is_binary_search_tree(populate_balanced_binary_search_tree())
    assert not is_binary_search_tree(populate_balanced_binary_tree())
