"""Algorithms on singly linked lists."""

from __future__ import annotations

from typing import Optional

from algokit.nodes import ListNode


def delete_node(node: ListNode) -> None:
    """Remove the value held by ``node`` by shifting later values forward.

    The node must not be the tail; a tail node is left untouched.
    """
    current = node
    previous: Optional[ListNode] = None
    while current.next is not None:
        current.val, current.next.val = current.next.val, current.val
        previous = current
        current = current.next
    if previous is not None:
        previous.next = None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return True if the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Return True if the list reads the same forwards and backwards."""
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values == values[::-1]


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in groups of ``k`` nodes; a short tail stays as is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        prev, current = group_next, group_prev.next
        while current is not group_next:
            current.next, prev, current = prev, current, current.next
        first = group_prev.next
        group_prev.next = kth
        group_prev = first