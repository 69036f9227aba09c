"""Node types for binary trees and singly linked lists, plus conversions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class ListNode:
    """A singly linked list node. Nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None


def tree_from_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    children = iter(items[1:])
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(children, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(children, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[Any]:
    """Return the level-order values of a tree, None for missing children."""
    if root is None:
        return []
    result: list[Any] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def list_from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding the given values in order."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of a linked list; raise ValueError if it has a cycle."""
    seen: set[int] = set()
    result: list[Any] = []
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("linked list contains a cycle")
        seen.add(id(node))
        result.append(node.val)
        node = node.next
    return result