"""Testing utilities for BinaryTreeLib consumers."""

from .fixtures import (
    NODES_COUNT,
    BALANCED_SEARCH_TREE_KEYS,
    populate_node_list,
    populate_balanced_binary_tree,
    populate_balanced_binary_search_tree,
)

__all__ = [
    'NODES_COUNT',
    'BALANCED_SEARCH_TREE_KEYS',
    'populate_node_list',
    'populate_balanced_binary_tree',
    'populate_balanced_binary_search_tree',
]
