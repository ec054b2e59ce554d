"""Configuration system for BinaryTreeLib.

This module defines how users specify traversal requirements and which
optional structural checks the core algorithms should perform.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Node before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before node
    IN_ORDER = "inorder"            # Left subtree, node, right subtree
    LEVEL_ORDER = "level"           # Grouped by level


@dataclass
class TreeConfig:
    """Optional structural checks for the core algorithms.

    Both checks are off by default. With the defaults the algorithms behave
    exactly like a plain data-structure primitive: a cyclic structure or a
    missing assign_parents() call yields undefined behaviour rather than an
    error.
    """

    detect_cycles: bool = False        # Raise CycleDetectedError on revisit
    verify_parent_links: bool = False  # Check back-links before inorder walks

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.detect_cycles, bool):
            errors.append("detect_cycles must be a bool")
        if not isinstance(self.verify_parent_links, bool):
            errors.append("verify_parent_links must be a bool")
        return errors


DEFAULT_TREE_CONFIG = TreeConfig()


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                # Minimum depth to yield
    max_depth: Optional[int] = None   # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children at this depth should be explored.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a high-level traversal.

    Built by binarytreelib.api from keyword arguments, or passed in directly.
    """

    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    depth: DepthConfig = field(default_factory=DepthConfig)
    include_filter: Optional[Callable[[Any], bool]] = None
    mirrored: bool = False  # Walk through MirroredBinaryTreeAdapter
    tree: TreeConfig = field(default_factory=TreeConfig)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.include_filter is not None and not callable(self.include_filter):
            errors.append("include_filter must be callable")

        errors.extend(self.tree.validate())
        return errors


@dataclass
class FixtureConfig:
    """Shape of the canonical fixture trees."""

    nodes_count: int = 15
    label_prefix: str = "n"

    def label(self, index: int) -> str:
        """Return the display label for the node at a heap index."""
        return f"{self.label_prefix}{index}"

    def validate(self) -> List[str]:
        errors = []
        if self.nodes_count < 1:
            errors.append("nodes_count must be at least 1")
        if not self.label_prefix:
            errors.append("label_prefix cannot be empty")
        return errors
