"""Core binary tree algorithms for BinaryTreeLib.

Every algorithm works directly on node references; the BinaryTree wrapper
only exposes them as static methods next to an optional root.

Breadth-first walks use a deque as the work queue. The inorder walk is
stackless: it relies on parent back-links instead, which is why
assign_parents() must run after a tree shape is built.
"""

from collections import deque
from typing import Deque, List, Optional, Set
import uuid

from loguru import logger

from .node import BinaryTreeNode
from ..config import TreeConfig, DEFAULT_TREE_CONFIG
from ..errors import CycleDetectedError, ParentLinkError


class CycleGuard:
    """Tracks visited identifiers when cycle detection is enabled.

    With detection disabled, visit() does nothing and a cyclic structure
    makes breadth-first walks run forever.
    """

    def __init__(self, enabled: bool):
        self.enabled = enabled
        self._seen: Set[uuid.UUID] = set()

    def visit(self, node: BinaryTreeNode) -> None:
        """Record a visit, raising CycleDetectedError on a repeat."""
        if not self.enabled:
            return
        if node.id in self._seen:
            logger.debug("Cycle detected at node {!r}", node)
            raise CycleDetectedError(node)
        self._seen.add(node.id)


def _children(node: BinaryTreeNode) -> List[BinaryTreeNode]:
    """Present children, left first."""
    return [child for child in (node.left, node.right) if child is not None]


def new_node() -> BinaryTreeNode:
    """Allocate a fresh node: new identifier, empty label, key 0, no links."""
    return BinaryTreeNode()


def assign_parents(root: BinaryTreeNode,
                   config: TreeConfig = DEFAULT_TREE_CONFIG) -> None:
    """Back-fill parent links breadth-first from root.

    Every present child gets its parent link pointed at the node that holds
    it. The root's own link is left untouched.

    Args:
        root: Node to start from
        config: Optional structural checks
    """
    guard = CycleGuard(config.detect_cycles)
    queue: Deque[BinaryTreeNode] = deque([root])
    assigned = 0

    while queue:
        node = queue.popleft()
        guard.visit(node)
        for child in _children(node):
            child.parent = node
            queue.append(child)
            assigned += 1

    logger.debug("Assigned {} parent links under {!r}", assigned, root)


def count(node: BinaryTreeNode,
          config: TreeConfig = DEFAULT_TREE_CONFIG) -> int:
    """Count every node reachable from node, node itself included.

    Args:
        node: Node to start from
        config: Optional structural checks

    Returns:
        Number of visited nodes
    """
    guard = CycleGuard(config.detect_cycles)
    queue: Deque[BinaryTreeNode] = deque([node])
    total = 0

    while queue:
        current = queue.popleft()
        guard.visit(current)
        total += 1
        queue.extend(_children(current))

    return total


def flatten_top_down(node: BinaryTreeNode,
                     config: TreeConfig = DEFAULT_TREE_CONFIG) -> List[BinaryTreeNode]:
    """List nodes in level order, left child before right child.

    Args:
        node: Node to start from
        config: Optional structural checks

    Returns:
        Visited nodes in breadth-first order
    """
    guard = CycleGuard(config.detect_cycles)
    queue: Deque[BinaryTreeNode] = deque([node])
    nodes: List[BinaryTreeNode] = []

    while queue:
        current = queue.popleft()
        guard.visit(current)
        nodes.append(current)
        queue.extend(_children(current))

    return nodes


def leftmost(node: BinaryTreeNode) -> Optional[BinaryTreeNode]:
    """Follow left links from node down to the last left descendant.

    Returns:
        The deepest node reached by at least one left step, or None if node
        has no left child. Never returns node itself.
    """
    found = None
    current = node.left
    while current is not None:
        found = current
        current = current.left
    return found


def get_root(node: BinaryTreeNode) -> BinaryTreeNode:
    """Climb parent links to the topmost ancestor."""
    current = node
    parent = current.parent
    while parent is not None:
        current = parent
        parent = current.parent
    return current


def is_same(first: Optional[BinaryTreeNode],
            second: Optional[BinaryTreeNode]) -> bool:
    """Compare two optional nodes by identifier.

    Two absent nodes are the same; an absent node never matches a present one.
    """
    first_id = first.id if first is not None else None
    second_id = second.id if second is not None else None
    return first_id == second_id


def verify_parent_links(root: BinaryTreeNode,
                        config: TreeConfig = DEFAULT_TREE_CONFIG) -> None:
    """Check that every child's back-link resolves to the node holding it.

    Raises:
        ParentLinkError: On the first stale or missing link found
    """
    guard = CycleGuard(config.detect_cycles)
    queue: Deque[BinaryTreeNode] = deque([root])

    while queue:
        node = queue.popleft()
        guard.visit(node)
        for child in _children(node):
            actual = child.parent
            if not is_same(actual, node):
                logger.debug("Stale parent link on {!r}", child)
                raise ParentLinkError(child, node, actual)
            queue.append(child)


def flatten_inorder(root: BinaryTreeNode,
                    config: TreeConfig = DEFAULT_TREE_CONFIG) -> List[BinaryTreeNode]:
    """List nodes in inorder (left, node, right) without an auxiliary stack.

    The walk descends to the leftmost node of the current subtree and emits
    it. From there it moves into the right subtree if there is one;
    otherwise it climbs parent links past every ancestor whose right child
    is the node just departed, and resumes at the first ancestor reached
    from its left side. Reaching the top from a right side ends the walk.

    Parent links must already be assigned (see assign_parents). With
    config.verify_parent_links set, this is checked up front. Pass the tree
    root: climbing from a subtree whose top has a parent of its own carries
    the walk on into the enclosing tree.

    Args:
        root: Root of the subtree to walk
        config: Optional structural checks

    Returns:
        Nodes in inorder sequence

    Raises:
        ParentLinkError: If verification is enabled and a link is stale
    """
    if config.verify_parent_links:
        verify_parent_links(root, config)

    nodes: List[BinaryTreeNode] = []
    current: Optional[BinaryTreeNode] = root
    left_done = False

    while current is not None:
        if not left_done:
            descendant = leftmost(current)
            if descendant is not None:
                current = descendant

        left_done = True
        nodes.append(current)

        if current.right is not None:
            left_done = False
            current = current.right
            continue

        # Climb while we are coming up from a right subtree
        parent = current.parent
        while parent is not None and is_same(current, parent.right):
            current = parent
            parent = current.parent
        current = parent

    return nodes


def invert_recursive(node: Optional[BinaryTreeNode]) -> None:
    """Mirror the subtree under node, post-order.

    The right subtree is inverted first, then the left, then the two
    children of node are swapped. Parent links stay valid and are not
    touched.
    """
    if node is None:
        return

    if node.right is not None:
        invert_recursive(node.right)
    if node.left is not None:
        invert_recursive(node.left)

    node.left, node.right = node.right, node.left


def invert_iterative(root: Optional[BinaryTreeNode],
                     config: TreeConfig = DEFAULT_TREE_CONFIG) -> None:
    """Mirror the tree under root breadth-first.

    Children are enqueued right then left, then swapped together in one
    step. Produces the same tree as invert_recursive().
    """
    if root is None:
        return

    guard = CycleGuard(config.detect_cycles)
    queue: Deque[BinaryTreeNode] = deque([root])
    swapped = 0

    while queue:
        node = queue.popleft()
        guard.visit(node)
        if node.right is not None:
            queue.append(node.right)
        if node.left is not None:
            queue.append(node.left)

        node.left, node.right = node.right, node.left
        swapped += 1

    logger.debug("Inverted {} nodes under {!r}", swapped, root)


class BinaryTree:
    """Thin wrapper around an optional root node.

    The algorithms are exposed as static methods so callers can work with
    bare node references:

        >>> root = BinaryTree.new_node()
        >>> BinaryTree.count(root)
        1
    """

    def __init__(self, root: Optional[BinaryTreeNode] = None):
        self.root = root

    @classmethod
    def with_root(cls, root: BinaryTreeNode) -> "BinaryTree":
        """Create a tree around an existing root node."""
        return cls(root)

    def is_empty(self) -> bool:
        return self.root is None

    def count_nodes(self) -> int:
        """Count nodes under the root (0 for an empty tree)."""
        if self.root is None:
            return 0
        return count(self.root)

    def __repr__(self) -> str:
        return f"BinaryTree(root={self.root!r})"

    new_node = staticmethod(new_node)
    assign_parents = staticmethod(assign_parents)
    count = staticmethod(count)
    flatten_top_down = staticmethod(flatten_top_down)
    flatten_inorder = staticmethod(flatten_inorder)
    leftmost = staticmethod(leftmost)
    get_root = staticmethod(get_root)
    is_same = staticmethod(is_same)
    verify_parent_links = staticmethod(verify_parent_links)
    invert_recursive = staticmethod(invert_recursive)
    invert_iterative = staticmethod(invert_iterative)
