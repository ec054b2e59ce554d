#!/usr/bin/env python3
"""
Basic BinaryTreeLib usage.

This example demonstrates:
- Building a tree by hand and back-filling parent links
- Level-order and stackless inorder flattening
- Mirroring a tree in place and through an adapter
- Turning on the library's debug logging
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from binarytreelib import (
    BinaryTree,
    get_tree_stats,
    traverse_tree,
)
from binarytreelib.testing import populate_balanced_binary_search_tree


def names(nodes):
    return " ".join(node.name for node in nodes)


def build_by_hand():
    """Build a three-node tree one node at a time."""
    root = BinaryTree.new_node()
    root.name, root.data = "root", 2

    left = BinaryTree.new_node()
    left.name, left.data = "left", 1
    right = BinaryTree.new_node()
    right.name, right.data = "right", 3

    root.left, root.right = left, right
    BinaryTree.assign_parents(root)  # Required before flatten_inorder
    return root


def main():
    logger.enable("binarytreelib")

    small = build_by_hand()
    print(f"Hand-built tree: {BinaryTree.count(small)} nodes")
    print(f"  inorder:   {names(BinaryTree.flatten_inorder(small))}")

    root = populate_balanced_binary_search_tree()
    print(f"\nSearch tree stats: {get_tree_stats(root)}")
    print(f"  level order: {names(BinaryTree.flatten_top_down(root))}")
    print(f"  inorder:     {names(BinaryTree.flatten_inorder(root))}")
    print(f"  keys:        {[n.data for n in BinaryTree.flatten_inorder(root)]}")

    mirrored = traverse_tree(root, strategy="inorder", mirrored=True)
    print(f"  mirrored view (tree untouched): {names(mirrored)}")

    BinaryTree.invert_iterative(root)
    print(f"  after invert: {names(BinaryTree.flatten_inorder(root))}")


if __name__ == "__main__":
    main()
