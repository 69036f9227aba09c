"""Array algorithms: pair and quadruple sums, searches, windows and selections."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections import deque
from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of two elements adding up to ``target``, or [] if none do.

    The index of the smaller value comes first.
    """
    ordered = sorted((value, index) for index, value in enumerate(nums))
    low, high = 0, len(ordered) - 1
    while low < high:
        total = ordered[low][0] + ordered[high][0]
        if total == target:
            return [ordered[low][1], ordered[high][1]]
        if total < target:
            low += 1
        else:
            high -= 1
    return []


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return True if two equal elements lie at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or [-1, -1]."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest element (1-based)."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of elements")
    return heapq.nlargest(k, nums)[-1]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of elements")
    window: deque[int] = deque()
    result = []
    for index, value in enumerate(nums):
        while window and value > nums[window[-1]]:
            window.pop()
        while window and index - window[0] >= k:
            window.popleft()
        window.append(index)
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each element of ``nums1``, return the next larger element after it in ``nums2``.

    -1 marks elements with nothing larger to their right.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    missing = [value for value in nums1 if value not in greater]
    if missing:
        raise ValueError(f"elements not found in nums2: {missing}")
    return [greater[value] for value in nums1]


def find_closest_elements(arr: Sequence[int], k: int, x: int) -> list[int]:
    """Return the ``k`` elements of sorted ``arr`` closest to ``x``, in ascending order.

    Ties in distance favour the smaller element.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    return sorted(heapq.nsmallest(k, arr, key=lambda value: (abs(value - x), value)))


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruple of elements summing to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            needed = target - values[i] - values[j]
            low, high = j + 1, size - 1
            while low < high:
                total = values[low] + values[high]
                if total == needed:
                    result.append([values[i], values[j], values[low], values[high]])
                    while low + 1 < size and values[low] == values[low + 1]:
                        low += 1
                    low += 1
                    while high > low and values[high - 1] == values[high]:
                        high -= 1
                    high -= 1
                elif total > needed:
                    high -= 1
                else:
                    low += 1
    return result