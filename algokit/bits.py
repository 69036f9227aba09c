"""Bitwise algorithms: XOR maximisation, AND ranges and power checks."""

from __future__ import annotations

from collections.abc import Sequence

_BITS = 32


def _check_word(value: int) -> None:
    if not 0 <= value < 1 << _BITS:
        raise ValueError(f"{value} is not a non-negative {_BITS}-bit number")


class _BitTrie:
    """A binary trie over fixed-width non-negative integers."""

    def __init__(self) -> None:
        self._root: list = [None, None]
        self.empty = True

    def insert(self, num: int) -> None:
        _check_word(num)
        node = self._root
        for shift in range(_BITS - 1, -1, -1):
            bit = num >> shift & 1
            if node[bit] is None:
                node[bit] = [None, None]
            node = node[bit]
        self.empty = False

    def best_xor(self, num: int) -> int:
        if self.empty:
            raise ValueError("trie is empty")
        node = self._root
        result = 0
        for shift in range(_BITS - 1, -1, -1):
            bit = num >> shift & 1
            if node[bit ^ 1] is not None:
                result |= 1 << shift
                node = node[bit ^ 1]
            else:
                node = node[bit]
        return result


def maximize_xor(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> list[int]:
    """For each query [x, m], return the largest x XOR n over nums n <= m, or -1."""
    values = sorted(nums)
    order = sorted(range(len(queries)), key=lambda index: queries[index][1])
    trie = _BitTrie()
    answers = [-1] * len(queries)
    added = 0
    for index in order:
        x, limit = queries[index]
        _check_word(x)
        while added < len(values) and values[added] <= limit:
            trie.insert(values[added])
            added += 1
        if not trie.empty:
            answers[index] = trie.best_xor(x)
    return answers


def find_maximum_xor(nums: Sequence[int]) -> int:
    """Return the largest XOR of two elements; 0 for fewer than two."""
    trie = _BitTrie()
    best = 0
    for num in nums:
        _check_word(num)
        if not trie.empty:
            best = max(best, trie.best_xor(num))
        trie.insert(num)
    return best


def closest_to_target(arr: Sequence[int], target: int) -> int:
    """Return the smallest |AND of a subarray - target|."""
    if not arr:
        raise ValueError("arr must not be empty")
    best = None
    ending_here: set[int] = set()
    for value in arr:
        ending_here = {value} | {previous & value for previous in ending_here}
        closest = min(abs(result - target) for result in ending_here)
        best = closest if best is None else min(best, closest)
    return best


def check_powers_of_three(n: int) -> bool:
    """Return True if n is a sum of distinct powers of three."""
    if n < 0:
        raise ValueError("n must not be negative")
    while n:
        n, digit = divmod(n, 3)
        if digit == 2:
            return False
    return True


def is_power_of_four(n: int) -> bool:
    """Return True if n is 4 to some non-negative integer power."""
    return n > 0 and n & (n - 1) == 0 and (n - 1) % 3 == 0