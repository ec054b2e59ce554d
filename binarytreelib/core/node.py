"""BinaryTreeNode for BinaryTreeLib.

A node owns up to two children and keeps a non-owning back-link to its
parent. The back-link is a weak reference: it never keeps the parent alive,
so releasing the root releases the whole tree.
"""

import uuid
import weakref
from typing import Any, Dict, Optional


class BinaryTreeNode:
    """A binary tree node holding a label and an integer key.

    Equality and hashing are by identifier, never by content. Ordering
    compares the integer key only, so two distinct nodes with the same key
    are neither less nor greater than each other yet still unequal.

    Attaching a child through ``left`` or ``right`` does not touch the
    child's parent link; call assign_parents() once the shape is built.
    """

    def __init__(self, name: str = "", data: int = 0):
        """Initialize an unlinked node.

        Args:
            name: Display label
            data: Integer key used for ordering
        """
        self.id: uuid.UUID = uuid.uuid4()
        self.name = name
        self.data = data
        self.left: Optional["BinaryTreeNode"] = None
        self.right: Optional["BinaryTreeNode"] = None
        self._parent: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional["BinaryTreeNode"]:
        """Resolve the parent back-link (None for a root or a stale link)."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional["BinaryTreeNode"]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def identifier(self) -> str:
        """Return the process-unique identifier as a string."""
        return str(self.id)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        return {
            'name': self.name,
            'data': self.data,
            'is_leaf': self.is_leaf(),
        }

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, data={self.data!r})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal only if they share the same identifier."""
        if not isinstance(other, BinaryTreeNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # Ordering looks at the key alone

    def __lt__(self, other: "BinaryTreeNode") -> bool:
        if not isinstance(other, BinaryTreeNode):
            return NotImplemented
        return self.data < other.data

    def __le__(self, other: "BinaryTreeNode") -> bool:
        if not isinstance(other, BinaryTreeNode):
            return NotImplemented
        return self.data <= other.data

    def __gt__(self, other: "BinaryTreeNode") -> bool:
        if not isinstance(other, BinaryTreeNode):
            return NotImplemented
        return self.data > other.data

    def __ge__(self, other: "BinaryTreeNode") -> bool:
        if not isinstance(other, BinaryTreeNode):
            return NotImplemented
        return self.data >= other.data
