"""Assorted algorithms on binary trees."""

from __future__ import annotations

import math
import re
from typing import Optional

from algokit.nodes import TreeNode

_NODE_PATTERN = re.compile(r"(-*)(\d+)")


def recover_from_preorder(traversal: str) -> Optional[TreeNode]:
    """Rebuild a tree from a preorder string where dashes give each node's depth.

    A node with one child always has it on the left.
    """
    root: Optional[TreeNode] = None
    ancestors: list[tuple[TreeNode, int]] = []
    for match in _NODE_PATTERN.finditer(traversal):
        depth = len(match.group(1)) if ancestors else 0
        node = TreeNode(int(match.group(2)))
        while ancestors and ancestors[-1][1] >= depth:
            ancestors.pop()
        if ancestors:
            parent = ancestors[-1][0]
            if parent.left is None:
                parent.left = node
            else:
                parent.right = node
        else:
            root = node
        ancestors.append((node, depth))
    return root


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if no node's subtrees differ in height by more than one."""
    balanced = True

    def height(node: Optional[TreeNode]) -> int:
        nonlocal balanced
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if abs(left - right) >= 2:
            balanced = False
        return max(left, right) + 1

    height(root)
    return balanced


def flatten(root: Optional[TreeNode]) -> None:
    """Turn the tree, in place, into a right-leaning chain in preorder."""
    following: Optional[TreeNode] = None

    def walk(node: Optional[TreeNode]) -> None:
        nonlocal following
        if node is None:
            return
        walk(node.right)
        walk(node.left)
        node.right = following
        node.left = None
        following = node

    walk(root)


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values along any path; 0 for an empty tree."""
    if root is None:
        return 0
    best = -math.inf

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = gain(node.left)
        right = gain(node.right)
        downward = max(max(left, right) + node.val, node.val)
        best = max(best, downward, node.val + left + right)
        return downward

    gain(root)
    return int(best)


def reverse_odd_levels(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Reverse, in place, the order of values on every odd-numbered level."""
    level = [root] if root is not None else []
    depth = 0
    while level:
        if depth % 2 == 1:
            values = [node.val for node in level]
            for node, value in zip(level, reversed(values)):
                node.val = value
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        depth += 1
    return root


def rob(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values with no two chosen nodes adjacent."""

    def best(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_take, left_skip = best(node.left)
        right_take, right_skip = best(node.right)
        skip = left_take + right_take
        take = max(node.val + left_skip + right_skip, skip)
        return take, skip

    return best(root)[0]


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    longest = 0

    def depth(node: TreeNode) -> int:
        nonlocal longest
        left = 1 + depth(node.left) if node.left is not None else 0
        right = 1 + depth(node.right) if node.right is not None else 0
        longest = max(longest, left + right)
        return max(left, right)

    if root is not None:
        depth(root)
    return longest


def longest_univalue_path(root: Optional[TreeNode]) -> int:
    """Return the edge count of the longest path whose nodes share one value."""
    longest_nodes = 1

    def arm(node: Optional[TreeNode]) -> int:
        nonlocal longest_nodes
        if node is None:
            return 0
        left = arm(node.left)
        right = arm(node.right)
        through = 0
        longest_arm = 0
        if node.left is not None and node.left.val == node.val:
            through += left
            longest_arm = max(longest_arm, left)
        if node.right is not None and node.right.val == node.val:
            through += right
            longest_arm = max(longest_arm, right)
        longest_nodes = max(longest_nodes, through + 1)
        return longest_arm + 1

    arm(root)
    return longest_nodes - 1