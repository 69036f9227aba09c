"""Dynamic programming: scheduling, counting, subsequences and partitions."""

from __future__ import annotations

from bisect import bisect_left
from collections import defaultdict
from collections.abc import Sequence
from functools import cache
from itertools import product
from math import isqrt

MOD = 10**9 + 7

_ROW_PATTERNS = [
    row for row in product(range(3), repeat=3) if row[0] != row[1] and row[1] != row[2]
]
_COMPATIBLE = {
    row: [prev for prev in _ROW_PATTERNS if all(a != b for a, b in zip(prev, row))]
    for row in _ROW_PATTERNS
}


def job_scheduling(
    start_time: Sequence[int], end_time: Sequence[int], profit: Sequence[int]
) -> int:
    """Return the largest total profit of jobs whose time ranges do not overlap.

    A job ending at time t may be followed by one starting at t.
    """
    if not len(start_time) == len(end_time) == len(profit):
        raise ValueError("start_time, end_time and profit must have the same length")
    jobs = sorted(zip(start_time, end_time, profit))
    if any(end <= start for start, end, _ in jobs):
        raise ValueError("every job must end after it starts")
    starts = [start for start, _, _ in jobs]
    best = [0] * (len(jobs) + 1)
    for index in range(len(jobs) - 1, -1, -1):
        _, end, gain = jobs[index]
        following = bisect_left(starts, end)
        best[index] = max(best[index + 1], gain + best[following])
    return best[0]


def paint_grid_ways(n: int) -> int:
    """Count colourings of an n x 3 grid with three colours, neighbours differing.

    The count is taken modulo 10**9 + 7; an empty grid has one colouring.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 1
    ways = dict.fromkeys(_ROW_PATTERNS, 1)
    for _ in range(n - 1):
        ways = {
            row: sum(ways[prev] for prev in _COMPATIBLE[row]) % MOD
            for row in _ROW_PATTERNS
        }
    return sum(ways.values()) % MOD


def best_team_score(scores: Sequence[int], ages: Sequence[int]) -> int:
    """Return the best total score of a team where no younger player outscores an older one."""
    if len(scores) != len(ages):
        raise ValueError("scores and ages must have the same length")
    players = sorted(zip(ages, scores))
    best: list[int] = []
    for _, score in players:
        earlier = (
            total for total, (_, other) in zip(best, players) if other <= score
        )
        best.append(score + max(earlier, default=0))
    return max(best, default=0)


def valid_partition(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` splits into runs of two or three equal values,
    or of three consecutive increasing values."""
    size = len(nums)
    ok = [False] * (size + 1)
    ok[size] = True
    for i in range(size - 1, -1, -1):
        result = False
        if i + 1 < size and nums[i] == nums[i + 1]:
            result = ok[i + 2]
            if i + 2 < size and nums[i + 1] == nums[i + 2]:
                result = result or ok[i + 3]
        if (
            i + 2 < size
            and nums[i + 1] - nums[i] == 1
            and nums[i + 2] - nums[i + 1] == 1
        ):
            result = result or ok[i + 3]
        ok[i] = result
    return ok[0]


def count_special_numbers(n: int) -> int:
    """Count the integers in [1, n] whose decimal digits are all distinct."""
    if n < 1:
        return 0
    digits = str(n)
    length = len(digits)

    @cache
    def count(pos: int, used: int, tight: bool, leading: bool) -> int:
        if pos == length:
            return 0 if leading else 1
        total = 0
        if leading:
            total += count(pos + 1, used, tight and digits[pos] == "0", True)
        limit = int(digits[pos]) if tight else 9
        for digit in range(limit + 1):
            if leading and digit == 0:
                continue
            if used >> digit & 1:
                continue
            total += count(pos + 1, used | 1 << digit, tight and digit == limit, False)
        return total

    return count(0, 0, True, True)


def _strict_lis(values: Sequence[int]) -> int:
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    return _strict_lis(nums)


def max_envelopes(envelopes: Sequence[Sequence[int]]) -> int:
    """Return how many envelopes can be nested, each strictly inside the next."""
    ordered = sorted(envelopes, key=lambda envelope: (envelope[0], -envelope[1]))
    return _strict_lis([height for _, height in ordered])


def combination_sum4(nums: Sequence[int], target: int) -> int:
    """Count the ordered sequences of elements of ``nums`` that add up to ``target``."""
    if any(value <= 0 for value in nums):
        raise ValueError("all numbers must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - value] for value in nums if value <= total)
    return ways[target]


def count_arrangement(n: int) -> int:
    """Count permutations of 1..n where each value divides, or is divided by, its position."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways: dict[int, int] = {0: 1}
    for position in range(1, n + 1):
        following: defaultdict[int, int] = defaultdict(int)
        for mask, count in ways.items():
            for value in range(1, n + 1):
                bit = 1 << value
                if mask & bit:
                    continue
                if position % value == 0 or value % position == 0:
                    following[mask | bit] += count
        ways = following
    return sum(ways.values())


def num_factored_binary_trees(arr: Sequence[int]) -> int:
    """Count binary trees whose inner nodes are the product of their children.

    Every node value comes from ``arr``; the count is modulo 10**9 + 7.
    """
    if any(value < 1 for value in arr):
        raise ValueError("all values must be positive")
    trees: dict[int, int] = {}
    total = 0
    for num in sorted(arr):
        count = 1
        for small in range(1, isqrt(num) + 1):
            if num % small:
                continue
            large = num // small
            pair = trees.get(small, 0) * trees.get(large, 0) % MOD
            count += pair if small == large else 2 * pair
        trees[num] = count % MOD
        total = (total + trees[num]) % MOD
    return total


def max_two_events(events: Sequence[Sequence[int]]) -> int:
    """Return the best total value of at most two events that do not overlap.

    Events are [start, end, value] with both ends inclusive.
    """
    ordered = sorted(tuple(event) for event in events)
    starts = [start for start, _, _ in ordered]
    best_after = [0] * (len(ordered) + 1)
    for index in range(len(ordered) - 1, -1, -1):
        best_after[index] = max(best_after[index + 1], ordered[index][2])
    best = 0
    for _, end, value in ordered:
        following = bisect_left(starts, end + 1)
        best = max(best, value + best_after[following])
    return best