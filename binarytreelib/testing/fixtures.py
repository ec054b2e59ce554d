"""Fixture trees for BinaryTreeLib tests and demos.

All fixtures are complete binary trees wired with array-heap indexing over
a list of nodes labelled n0..n{N-1}:

                 n0
            /           \\
          n1              n2
        /    \\          /     \\
      n3      n4       n5      n6
     /   \\   /   \\   /   \\    /   \\
    n7   n8 n9  n10 n11  n12 n13  n14

    left_child  = parent * 2 + 1
    right_child = parent * 2 + 2
"""

from typing import List, Optional

from loguru import logger

from ..config import FixtureConfig
from ..core.node import BinaryTreeNode
from ..core.tree import BinaryTree
from ..errors import ConfigurationError

NODES_COUNT = 15

# Level-order keys turning the 15-node fixture into a search tree:
#
#                8
#          /           \
#        4              12
#      /   \          /    \
#     2     6       10      14
#    / \   / \     /  \    /  \
#   1   3 5   7   9   11  13   15
BALANCED_SEARCH_TREE_KEYS = [8, 4, 12, 2, 6, 10, 14, 1, 3, 5, 7, 9, 11, 13, 15]


def _fixture_config(nodes_count: int, config: Optional[FixtureConfig]) -> FixtureConfig:
    if config is None:
        config = FixtureConfig(nodes_count=nodes_count)
    errors = config.validate()
    if errors:
        raise ConfigurationError(errors)
    return config


def populate_node_list(nodes_count: int = NODES_COUNT,
                       config: Optional[FixtureConfig] = None) -> List[BinaryTreeNode]:
    """Allocate unlinked nodes labelled by index, with key equal to the index.

    Args:
        nodes_count: Number of nodes (ignored when config is given)
        config: Full fixture configuration

    Returns:
        List of nodes; position i holds node "n{i}"
    """
    config = _fixture_config(nodes_count, config)
    nodes = []
    for index in range(config.nodes_count):
        node = BinaryTree.new_node()
        node.name = config.label(index)
        node.data = index
        nodes.append(node)
    return nodes


def populate_balanced_binary_tree(nodes_count: int = NODES_COUNT,
                                  config: Optional[FixtureConfig] = None) -> BinaryTreeNode:
    """Wire a complete binary tree over populate_node_list() and return n0.

    Each child slot is guarded by its own index bound, so even node counts
    leave the last parent with a left child only. Parent links are assigned
    before returning.
    """
    nodes = populate_node_list(nodes_count, config)
    total = len(nodes)

    for index, node in enumerate(nodes):
        left_child = index * 2 + 1
        if left_child < total:
            node.left = nodes[left_child]
        right_child = left_child + 1
        if right_child < total:
            node.right = nodes[right_child]

    root = nodes[0]
    BinaryTree.assign_parents(root)
    logger.debug("Built balanced binary tree with {} nodes", total)
    return root


def _search_tree_keys(nodes_count: int) -> List[int]:
    """Level-order keys that make a heap-indexed tree a search tree.

    Keys are inorder ranks starting at 1, computed on heap indices.
    """
    keys = [0] * nodes_count
    rank = 0
    stack: List[int] = []
    index = 0
    while stack or index < nodes_count:
        while index < nodes_count:
            stack.append(index)
            index = index * 2 + 1
        index = stack.pop()
        rank += 1
        keys[index] = rank
        index = index * 2 + 2
    return keys


def populate_balanced_binary_search_tree(nodes_count: int = NODES_COUNT,
                                         config: Optional[FixtureConfig] = None) -> BinaryTreeNode:
    """Build the balanced fixture and overwrite keys to satisfy BST ordering.

    Keys are written in level order. The canonical 15-node tree uses
    BALANCED_SEARCH_TREE_KEYS (root key 8); other sizes get keys 1..N laid
    out the same way.
    """
    root = populate_balanced_binary_tree(nodes_count, config)
    nodes = BinaryTree.flatten_top_down(root)

    if len(nodes) == NODES_COUNT:
        keys = BALANCED_SEARCH_TREE_KEYS
    else:
        keys = _search_tree_keys(len(nodes))

    for node, key in zip(nodes, keys):
        node.data = key

    logger.debug("Assigned search-tree keys to {} nodes", len(nodes))
    return root
