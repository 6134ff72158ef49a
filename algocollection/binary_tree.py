"""Binary trees: traversals, views, inversion and reconstruction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree. Nodes compare by identity."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _postorder_nodes(root: TreeNode | None) -> list[TreeNode]:
    # Root, right, left order reversed gives left, right, root.
    stack = [root] if root is not None else []
    order: list[TreeNode] = []
    while stack:
        node = stack.pop()
        order.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    order.reverse()
    return order


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, node, right order."""
    return [node.val for node in _inorder_nodes(root)]


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in node, left, right order."""
    return [node.val for node in _preorder_nodes(root)]


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, node order."""
    return [node.val for node in _postorder_nodes(root)]


def levels(root: TreeNode | None) -> list[list[Any]]:
    """Values level by level from the root down, each level left to right."""
    result: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        result.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def height(root: TreeNode | None) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    return len(levels(root))


def level_order(root: TreeNode | None) -> list[Any]:
    """Values level by level from the root down."""
    return [value for level in levels(root) for value in level]


def reverse_level_order(root: TreeNode | None) -> list[Any]:
    """Values level by level from the deepest up, each level left to right."""
    return [value for level in reversed(levels(root)) for value in level]


def right_side_view(root: TreeNode | None) -> list[Any]:
    """The rightmost value of each level, from the root down."""
    return [level[-1] for level in levels(root)]


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    for node in list(_preorder_nodes(root)):
        node.left, node.right = node.right, node.left
    return root


def _first_positions(values: Sequence[Any]) -> dict[Any, int]:
    positions: dict[Any, int] = {}
    for index, value in enumerate(values):
        positions.setdefault(value, index)
    return positions


def _position(positions: dict[Any, int], value: Any) -> int:
    try:
        return positions[value]
    except KeyError:
        raise ValueError(f"value {value!r} is missing from the inorder sequence") from None


def build_from_inorder_postorder(
    inorder_values: Iterable[Any], postorder_values: Iterable[Any]
) -> TreeNode | None:
    """Rebuild a tree from its inorder and postorder values."""
    in_values = list(inorder_values)
    post_values = list(postorder_values)
    if len(in_values) != len(post_values):
        raise ValueError("inorder and postorder sequences differ in length")
    positions = _first_positions(in_values)
    roots = iter(reversed(post_values))

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        value = next(roots)
        split = _position(positions, value)
        node = TreeNode(value)
        node.right = build(split + 1, high)
        node.left = build(low, split - 1)
        return node

    return build(0, len(in_values) - 1)


def build_from_preorder_inorder(
    preorder_values: Iterable[Any], inorder_values: Iterable[Any]
) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder values."""
    pre_values = list(preorder_values)
    in_values = list(inorder_values)
    if len(in_values) != len(pre_values):
        raise ValueError("preorder and inorder sequences differ in length")
    positions = _first_positions(in_values)
    roots = iter(pre_values)

    def build(low: int, high: int) -> TreeNode | None:
        if low >= high:
            return None
        value = next(roots)
        split = _position(positions, value)
        node = TreeNode(value)
        node.left = build(low, split)
        node.right = build(split + 1, high)
        return node

    return build(0, len(in_values))


def nth_inorder(root: TreeNode | None, n: int) -> Any | None:
    """Value of the ``n``-th node (counting from 1) in inorder, or None."""
    if n < 1:
        return None
    for position, node in enumerate(_inorder_nodes(root), start=1):
        if position == n:
            return node.val
    return None


def nth_postorder(root: TreeNode | None, n: int) -> Any | None:
    """Value of the ``n``-th node (counting from 1) in postorder, or None."""
    nodes = _postorder_nodes(root)
    if 1 <= n <= len(nodes):
        return nodes[n - 1].val
    return None