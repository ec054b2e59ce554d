"""TreeAdapter abstraction for BinaryTreeLib.

Adapters decide how a traverser navigates the tree: which child counts as
left, which as right, and how to reach a parent. This keeps the traversal
strategies independent of the tree's orientation, so the same traverser
can walk a tree as built or as its mirror image without mutating it.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .node import BinaryTreeNode
from . import tree


class TreeAdapter(ABC):
    """Abstract adapter for navigating binary trees.

    Subclasses provide the first (left) and second (right) child of a node
    and its parent; everything else is derived from those three.
    """

    @abstractmethod
    def get_left(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        """Return the child visited first, or None."""
        pass

    @abstractmethod
    def get_right(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        """Return the child visited second, or None."""
        pass

    @abstractmethod
    def get_parent(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is root (or links are unassigned)
        """
        pass

    def get_children(self, node: BinaryTreeNode) -> Iterator[BinaryTreeNode]:
        """Yield the present children, first child first.

        Args:
            node: The parent node

        Yields:
            Child nodes in adapter order
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right

    def get_depth(self, node: BinaryTreeNode) -> int:
        """Calculate the depth of a node by walking parent links.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: BinaryTreeNode) -> Iterator[BinaryTreeNode]:
        """Get the sibling of the given node, if it has one.

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding at most one sibling
        """
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings

        return (child for child in self.get_children(parent)
                if not tree.is_same(child, node))

    def estimated_size(self, node: BinaryTreeNode) -> Optional[int]:
        """Number of nodes in the subtree under node."""
        return tree.count(node)


class BinaryTreeAdapter(TreeAdapter):
    """Navigates a tree in its natural orientation."""

    def get_left(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        return node.left

    def get_right(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        return node.right

    def get_parent(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        return node.parent


class MirroredBinaryTreeAdapter(BinaryTreeAdapter):
    """Navigates a tree as if it had been inverted.

    Left and right are swapped on every read, so traversing through this
    adapter gives the same sequences as traversing an inverted copy, while
    the tree itself stays untouched.
    """

    def get_left(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        return node.right

    def get_right(self, node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        return node.left
