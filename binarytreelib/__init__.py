"""BinaryTreeLib - Parent-Linked Binary Tree Library.

BinaryTreeLib provides an in-memory binary tree whose nodes own their
children and keep weak back-links to their parents, together with the
classic algorithms over it:

    from binarytreelib import BinaryTree
    from binarytreelib.testing import populate_balanced_binary_tree

    root = populate_balanced_binary_tree()
    BinaryTree.invert_iterative(root)
    names = [n.name for n in BinaryTree.flatten_inorder(root)]

The library logs through loguru and is silent by default; call
``logger.enable("binarytreelib")`` to see its debug records.
"""

from loguru import logger

__version__ = "0.1.0"

from .core import (
    BinaryTreeNode,
    BinaryTree,
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
    TreeAdapter,
    BinaryTreeAdapter,
    MirroredBinaryTreeAdapter,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    InOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import (
    TreeConfig,
    DepthConfig,
    TraversalConfig,
    TraversalStrategy,
    FixtureConfig,
)
from .errors import (
    TreeError,
    CycleDetectedError,
    ParentLinkError,
    ConfigurationError,
)
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
    is_binary_search_tree,
)

logger.disable(__name__)

__all__ = [
    "__version__",
    # Core
    'BinaryTreeNode',
    'BinaryTree',
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
    # Adapters and traversers
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
    # Config
    'TreeConfig',
    'DepthConfig',
    'TraversalConfig',
    'TraversalStrategy',
    'FixtureConfig',
    # Errors
    'TreeError',
    'CycleDetectedError',
    'ParentLinkError',
    'ConfigurationError',
    # API
    'traverse_tree',
    'count_nodes',
    'find_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
    'is_binary_search_tree',
]
