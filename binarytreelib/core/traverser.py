"""Tree traversal strategies for BinaryTreeLib.

Traversers implement different orders for walking a binary tree. They
navigate only through a TreeAdapter, so the same traverser walks a tree as
built (BinaryTreeAdapter) or mirrored (MirroredBinaryTreeAdapter).
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterator, Optional, Deque, List, Tuple

from .adapter import TreeAdapter
from .node import BinaryTreeNode
from .tree import CycleGuard
from ..config import TreeConfig, DEFAULT_TREE_CONFIG


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: TreeAdapter,
                 config: TreeConfig = DEFAULT_TREE_CONFIG):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
            config: Optional structural checks (cycle detection)
        """
        self.adapter = adapter
        self.config = config

    @abstractmethod
    def traverse(self,
                 root: BinaryTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal: every node at depth N before depth N+1."""

    def traverse(self,
                 root: BinaryTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTreeNode, int]]:
        guard = CycleGuard(self.config.detect_cycles)
        queue: Deque[Tuple[BinaryTreeNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            guard.visit(node)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: node, then first child, then second."""

    def traverse(self,
                 root: BinaryTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTreeNode, int]]:
        guard = CycleGuard(self.config.detect_cycles)

        def _traverse_recursive(node: BinaryTreeNode, depth: int) -> Iterator[Tuple[BinaryTreeNode, int]]:
            guard.visit(node)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: both children before the node.

    Good for bottom-up aggregation such as subtree sizes.
    """

    def traverse(self,
                 root: BinaryTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTreeNode, int]]:
        guard = CycleGuard(self.config.detect_cycles)

        def _traverse_recursive(node: BinaryTreeNode, depth: int) -> Iterator[Tuple[BinaryTreeNode, int]]:
            guard.visit(node)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _traverse_recursive(child, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


class InOrderTraverser(TreeTraverser):
    """Depth-first inorder traversal: first subtree, node, second subtree.

    Unlike flatten_inorder() this walk does not need parent links, and it
    follows the adapter's notion of left and right.
    """

    def traverse(self,
                 root: BinaryTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTreeNode, int]]:
        guard = CycleGuard(self.config.detect_cycles)

        def _traverse_recursive(node: BinaryTreeNode, depth: int) -> Iterator[Tuple[BinaryTreeNode, int]]:
            guard.visit(node)
            explore = self._should_explore(depth, max_depth)

            left = self.adapter.get_left(node)
            if explore and left is not None:
                yield from _traverse_recursive(left, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            right = self.adapter.get_right(node)
            if explore and right is not None:
                yield from _traverse_recursive(right, depth + 1)

        yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal that finishes each level before the next.

    Yields the same sequence as BreadthFirstTraverser, but stops building
    levels as soon as max_depth is passed.
    """

    def traverse(self,
                 root: BinaryTreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BinaryTreeNode, int]]:
        guard = CycleGuard(self.config.detect_cycles)
        current_level: List[BinaryTreeNode] = [root]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[BinaryTreeNode] = []

            for node in current_level:
                guard.visit(node)

                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)

                if self._should_explore(current_depth, max_depth):
                    next_level.extend(self.adapter.get_children(node))

            current_level = next_level
            current_depth += 1


def create_traverser(strategy: str, adapter: TreeAdapter,
                     config: TreeConfig = DEFAULT_TREE_CONFIG) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post, inorder, level)
        adapter: TreeAdapter for the tree orientation
        config: Optional structural checks

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'inorder': InOrderTraverser,
        'in_order': InOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter, config)
