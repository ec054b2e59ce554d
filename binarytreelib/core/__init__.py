"""Core node model, algorithms, adapters and traversers."""

from .node import BinaryTreeNode
from .tree import (
    BinaryTree,
    CycleGuard,
    new_node,
    assign_parents,
    count,
    flatten_top_down,
    flatten_inorder,
    leftmost,
    get_root,
    is_same,
    verify_parent_links,
    invert_recursive,
    invert_iterative,
)
from .adapter import TreeAdapter, BinaryTreeAdapter, MirroredBinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    InOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    'BinaryTreeNode',
    'BinaryTree',
    'CycleGuard',
    'new_node',
    'assign_parents',
    'count',
    'flatten_top_down',
    'flatten_inorder',
    'leftmost',
    'get_root',
    'is_same',
    'verify_parent_links',
    'invert_recursive',
    'invert_iterative',
    'TreeAdapter',
    'BinaryTreeAdapter',
    'MirroredBinaryTreeAdapter',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'InOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
]
