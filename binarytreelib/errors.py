"""Exceptions raised by BinaryTreeLib.

The core algorithms assume well-formed trees (finite, acyclic, parent links
consistent with child links) and do not report violations on their own.
These exceptions are only raised when the matching defensive check is
switched on through TreeConfig, or when a configuration fails validation.
"""

from typing import Any, List, Optional


class TreeError(Exception):
    """Base class for all BinaryTreeLib errors."""
    pass


class CycleDetectedError(TreeError):
    """Raised when a traversal reaches the same node twice.

    Attributes:
        node: The node that was reached a second time
    """

    def __init__(self, node: Any):
        self.node = node
        super().__init__(
            f"Node {node!r} was reached twice; the structure is not a tree"
        )


class ParentLinkError(TreeError):
    """Raised when a child's parent link does not resolve to its parent.

    Attributes:
        child: Node whose back-link is stale or missing
        expected: Node that actually holds the child
        actual: Node the back-link resolved to (None if unset)
    """

    def __init__(self, child: Any, expected: Any, actual: Optional[Any]):
        self.child = child
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Parent link of {child!r} resolves to {actual!r}, "
            f"expected {expected!r}; call assign_parents() first"
        )


class ConfigurationError(TreeError):
    """Raised when a configuration object fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
