"""Binary search trees: insertion, validation, common ancestors and heap conversion."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from algocollection.binary_tree import TreeNode, inorder


def bst_insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` and return the root; a value already present is ignored."""
    new = TreeNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.val:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        elif value > node.val:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            return root


def is_valid_bst(root: TreeNode | None) -> bool:
    """True when every left descendant is smaller and every right one larger."""
    stack: list[tuple[TreeNode | None, Any, Any]] = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if high is not None and node.val >= high.val:
            return False
        if low is not None and node.val <= low.val:
            return False
        stack.append((node.left, low, node))
        stack.append((node.right, node, high))
    return True


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """The deepest node having both ``p`` and ``q`` (by identity) in its subtree.

    A node counts as its own descendant. Returns None unless both are found.
    """
    answer: TreeNode | None = None

    def found(node: TreeNode | None) -> bool:
        nonlocal answer
        if node is None:
            return False
        hits = int(found(node.left)) + int(found(node.right))
        hits += int(node is p or node is q)
        if hits >= 2:
            answer = node
        return hits > 0

    found(root)
    return answer


def _preorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def bst_to_min_heap(root: TreeNode | None) -> TreeNode | None:
    """Rewrite a BST's values in place so it becomes a min-heap; return the root.

    The sorted values are laid out in preorder, so every node is smaller than
    all of its descendants and every left subtree is smaller than the right.
    """
    ordered = inorder(root)
    for node, value in zip(list(_preorder_nodes(root)), ordered):
        node.val = value
    return root