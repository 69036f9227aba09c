"""Binary search tree construction, validation and repair."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Optional

from algokit.nodes import TreeNode


def bst_from_preorder(preorder: Sequence[int]) -> Optional[TreeNode]:
    """Build the search tree whose preorder traversal is ``preorder``."""
    values = list(preorder)
    index = 0

    def build(upper: float) -> Optional[TreeNode]:
        nonlocal index
        if index == len(values) or values[index] > upper:
            return None
        node = TreeNode(values[index])
        index += 1
        node.left = build(node.val)
        node.right = build(upper)
        return node

    return build(math.inf)


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end) // 2
        return TreeNode(nums[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(nums) - 1)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node of the search tree that has both p and q below it."""
    if p.val > q.val:
        p, q = q, p
    node = root
    while node is not None:
        if p.val <= node.val <= q.val:
            return node
        node = node.left if q.val < node.val else node.right
    return None


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if every node lies strictly between its ancestors' bounds."""

    def check(node: Optional[TreeNode], low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, -math.inf, math.inf)


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def recover_tree(root: Optional[TreeNode]) -> None:
    """Swap back the values of the two nodes that were exchanged, in place."""
    first = mid = last = prev = None
    for node in _inorder_nodes(root):
        if prev is not None and prev.val > node.val:
            if first is None:
                first, mid = prev, node
            else:
                last = node
        prev = node
    if first is not None and last is not None:
        first.val, last.val = last.val, first.val
    elif mid is not None:
        first.val, mid.val = mid.val, first.val