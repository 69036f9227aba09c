"""Orderings: permutations and relative ranks."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of the distinct numbers; [] if any value repeats."""
    if len(set(nums)) != len(nums):
        return []
    return [list(order) for order in permutations(nums)]


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Return each athlete's placing; the top three get medals, others their rank."""
    order = sorted(range(len(score)), key=lambda index: (score[index], index), reverse=True)
    ranks = [""] * len(score)
    for place, index in enumerate(order, start=1):
        ranks[index] = _MEDALS[place - 1] if place <= len(_MEDALS) else str(place)
    return ranks