"""Greedy and stack-based algorithms on arrays."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence

from algokit.dynamic_programming import MOD


def min_taps(n: int, ranges: Sequence[int]) -> int:
    """Return the fewest taps that water the whole garden [0, n], or -1.

    Tap i waters [i - ranges[i], i + ranges[i]].
    """
    if len(ranges) != n + 1:
        raise ValueError("ranges must have n + 1 entries")
    intervals = sorted(
        (max(0, position - reach), min(n, position + reach))
        for position, reach in enumerate(ranges)
    )
    covered = 0
    taps = 0
    index = 0
    while covered < n:
        furthest = covered
        while index < len(intervals) and intervals[index][0] <= covered:
            furthest = max(furthest, intervals[index][1])
            index += 1
        if furthest == covered:
            return -1
        covered = furthest
        taps += 1
    return taps


def min_set_size(arr: Sequence[int]) -> int:
    """Return the fewest distinct values whose removal drops at least half the array."""
    remaining = len(arr)
    removed = 0
    for count in sorted(Counter(arr).values(), reverse=True):
        if remaining <= len(arr) // 2:
            break
        remaining -= count
        removed += 1
    return removed


def max_performance(
    n: int, speed: Sequence[int], efficiency: Sequence[int], k: int
) -> int:
    """Return the best (sum of speeds) x (minimum efficiency) of at most k engineers.

    The result is taken modulo 10**9 + 7.
    """
    if len(speed) != n or len(efficiency) != n:
        raise ValueError("speed and efficiency must have n entries")
    if k < 1:
        raise ValueError("k must be at least 1")
    chosen: list[int] = []
    total = 0
    best = 0
    for eff, spd in sorted(zip(efficiency, speed), reverse=True):
        heapq.heappush(chosen, spd)
        total += spd
        if len(chosen) > k:
            total -= heapq.heappop(chosen)
        best = max(best, total * eff)
    return best % MOD


def minimum_replacement(nums: Sequence[int]) -> int:
    """Return the fewest splits of elements into two summands that sort the array."""
    if any(value <= 0 for value in nums):
        raise ValueError("all numbers must be positive")
    if not nums:
        return 0
    operations = 0
    limit = nums[-1]
    for value in reversed(nums[:-1]):
        if value > limit:
            parts = -(-value // limit)
            operations += parts - 1
            limit = value // parts
        else:
            limit = value
    return operations


def min_refuel_stops(
    target: int, start_fuel: int, stations: Sequence[Sequence[int]]
) -> int:
    """Return the fewest refuelling stops needed to reach ``target``, or -1.

    Stations are [position, fuel]; one unit of fuel covers one unit of distance.
    """
    stops = sorted((position, fuel) for position, fuel in stations if position < target)
    fuel = start_fuel
    position = 0
    available: list[int] = []
    count = 0
    for location, gas in [*stops, (target, 0)]:
        fuel -= location - position
        while fuel < 0 and available:
            fuel -= heapq.heappop(available)
            count += 1
        if fuel < 0:
            return -1
        heapq.heappush(available, -gas)
        position = location
    return count


def min_k_bit_flips(nums: Sequence[int], k: int) -> int:
    """Return the fewest flips of k consecutive bits that make every bit 1, or -1."""
    if k < 1:
        raise ValueError("k must be at least 1")
    size = len(nums)
    expiring = [0] * (size + 1)
    active = 0
    flips = 0
    for index, bit in enumerate(nums):
        active -= expiring[index]
        if (bit ^ active) & 1:
            continue
        if index + k > size:
            return -1
        expiring[index + k] += 1
        active += 1
        flips += 1
    return flips


def maximum_score(nums: Sequence[int], k: int) -> int:
    """Return the best min(subarray) x length over subarrays that contain index k."""
    size = len(nums)
    if not 0 <= k < size:
        raise ValueError("k must be a valid index")
    left = [-1] * size
    stack: list[int] = []
    for index, value in enumerate(nums):
        while stack and value <= nums[stack[-1]]:
            stack.pop()
        left[index] = stack[-1] if stack else -1
        stack.append(index)
    right = [size] * size
    stack = []
    for index in reversed(range(size)):
        while stack and nums[index] <= nums[stack[-1]]:
            stack.pop()
        right[index] = stack[-1] if stack else size
        stack.append(index)
    return max(
        value * (high - low - 1)
        for value, low, high in zip(nums, left, right)
        if low < k < high
    )