"""High-level API for BinaryTreeLib.

This module provides simple, functional interfaces for common traversal
questions. These functions wrap the adapter/traverser machinery for ease of
use in simple cases.
"""

from typing import Iterator, Optional, Callable, Any, Union, Dict

from .core.node import BinaryTreeNode
from .core.adapter import TreeAdapter, BinaryTreeAdapter, MirroredBinaryTreeAdapter
from .core.traverser import create_traverser
from .core.tree import flatten_inorder
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
    TreeConfig,
)
from .errors import ConfigurationError


def traverse_tree(
    root: BinaryTreeNode,
    adapter: Optional[TreeAdapter] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[BinaryTreeNode], bool]] = None,
    mirrored: bool = False,
    tree_config: Optional[TreeConfig] = None,
    config: Optional[TraversalConfig] = None,
) -> Iterator[BinaryTreeNode]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        adapter: Adapter to navigate with (default chosen from ``mirrored``)
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, inorder, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be yielded
        mirrored: Walk the tree as its mirror image
        tree_config: Optional structural checks
        config: Complete configuration; overrides the keyword options

    Yields:
        Nodes that match the criteria

    Raises:
        ConfigurationError: If the configuration fails validation

    Example:
        >>> root = populate_balanced_binary_tree()
        >>> [n.name for n in traverse_tree(root, max_depth=1)]
        ['n0', 'n1', 'n2']
    """
    if config is None:
        config = TraversalConfig(
            strategy=_parse_strategy(strategy),
            depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
            include_filter=include_filter,
            mirrored=mirrored,
            tree=tree_config or TreeConfig(),
        )

    errors = config.validate()
    if errors:
        raise ConfigurationError(errors)

    if adapter is None:
        adapter = MirroredBinaryTreeAdapter() if config.mirrored else BinaryTreeAdapter()

    traverser = create_traverser(config.strategy.value, adapter, config.tree)

    for node, _depth in traverser.traverse(
        root,
        max_depth=config.depth.max_depth,
        min_depth=config.depth.min_depth,
    ):
        if config.include_filter is None or config.include_filter(node):
            yield node


def count_nodes(root: BinaryTreeNode, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: BinaryTreeNode,
    predicate: Callable[[BinaryTreeNode], bool],
    **kwargs
) -> Iterator[BinaryTreeNode]:
    """Find nodes that match a predicate.

    Example:
        >>> evens = find_nodes(root, lambda n: n.data % 2 == 0)
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_leaf_nodes(root: BinaryTreeNode, **kwargs) -> Iterator[BinaryTreeNode]:
    """Get all leaf nodes in a tree."""
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(root: BinaryTreeNode,
                   tree_config: Optional[TreeConfig] = None) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Root of the tree
        tree_config: Optional structural checks

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth
        and a depth -> node count mapping under 'depths'

    Example:
        >>> stats = get_tree_stats(populate_balanced_binary_tree())
        >>> stats['max_depth']
        3
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    traverser = create_traverser('bfs', BinaryTreeAdapter(), tree_config or TreeConfig())
    for node, depth in traverser.traverse(root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


def is_binary_search_tree(root: BinaryTreeNode,
                          tree_config: Optional[TreeConfig] = None) -> bool:
    """Check that inorder keys strictly increase.

    Uses the parent-link inorder walk, so parent links must be assigned.
    """
    nodes = flatten_inorder(root, tree_config or TreeConfig())
    return all(earlier.data < later.data for earlier, later in zip(nodes, nodes[1:]))


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'inorder': TraversalStrategy.IN_ORDER,
        'in_order': TraversalStrategy.IN_ORDER,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
