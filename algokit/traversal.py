"""Iterative depth-first traversals of binary trees."""

from __future__ import annotations

from typing import Optional

from algokit.nodes import TreeNode


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in left, right, root order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return values in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result