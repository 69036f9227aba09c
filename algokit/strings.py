"""String algorithms: sequences, anagrams, palindromes, edit distance and more."""

from __future__ import annotations

import re
import string
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, product

MOD = 10**9 + 7

_MAX_PIECE_DIGITS = 10
_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}
_WORD = re.compile(r"[A-Za-z]+")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _next_term(term: str) -> str:
    return "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))


def count_and_say(n: int) -> str:
    """Return the n-th term (1-based) of the count-and-say sequence."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = _next_term(term)
    return term


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups are ordered by their sorted letters; words within a group are sorted.
    """
    keyed = sorted(("".join(sorted(word)), word) for word in strs)
    return [[word for _, word in group] for _, group in groupby(keyed, key=lambda pair: pair[0])]


def smallest_equivalent_string(s1: str, s2: str, base_str: str) -> str:
    """Replace each character of ``base_str`` by the smallest one equivalent to it.

    ``s1[i]`` and ``s2[i]`` are equivalent for every i, and equivalence is
    reflexive, symmetric and transitive.
    """
    if len(s1) != len(s2):
        raise ValueError("s1 and s2 must have the same length")
    parent: dict[str, str] = {}

    def find(char: str) -> str:
        root = char
        while parent.get(root, root) != root:
            root = parent[root]
        while char != root:
            parent[char], char = root, parent[char]
        return root

    for a, b in zip(s1, s2):
        root_a, root_b = find(a), find(b)
        if root_a < root_b:
            parent[root_b] = root_a
        else:
            parent[root_a] = root_b

    return "".join(find(char) for char in base_str)


def _one_apart(first: str, second: str) -> bool:
    return len(first) == len(second) and sum(a != b for a, b in zip(first, second)) == 1


def ladder_length(begin_word: str, end_word: str, word_list: Sequence[str]) -> int:
    """Return the number of words on the shortest ladder to ``end_word``, or 0.

    Each step changes exactly one letter and every word after the first must
    come from ``word_list``.
    """
    words = list(word_list)
    if end_word not in words:
        return 0
    visited = [False] * len(words)
    frontier = [begin_word]
    level = 1
    while frontier:
        if end_word in frontier:
            return level
        following = []
        for current in frontier:
            for index, word in enumerate(words):
                if not visited[index] and _one_apart(current, word):
                    visited[index] = True
                    following.append(word)
        frontier = following
        level += 1
    return 0


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string that the phone-keypad digits could spell."""
    if not digits:
        return []
    letters = [_KEYPAD.get(digit, "") for digit in digits]
    return ["".join(choice) for choice in product(*letters)]


def longest_palindrome_from_words(word1: str, word2: str) -> int:
    """Return the longest palindrome made from a non-empty subsequence of each word.

    The palindrome is a subsequence of ``word1 + word2`` that starts inside
    ``word1`` and ends inside ``word2``; 0 if there is none.
    """
    text = word1 + word2
    half = len(word1)
    size = len(text)
    best = 0
    below = [0] * size
    for i in range(size - 1, -1, -1):
        row = [0] * size
        row[i] = 1
        for j in range(i + 1, size):
            if text[i] == text[j]:
                row[j] = below[j - 1] + 2
                if i < half <= j:
                    best = max(best, row[j])
            else:
                row[j] = max(below[j], row[j - 1])
        below = row
    return best


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring."""
    stack = [-1]
    best = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
            continue
        stack.pop()
        if stack:
            best = max(best, index - stack[-1])
        else:
            stack.append(index)
    return best


def longest_palindromic_substring(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one on ties."""
    best_start, best_length = 0, 0
    size = len(s)
    for center in range(2 * size - 1):
        low = center // 2
        high = low + center % 2
        while low >= 0 and high < size and s[low] == s[high]:
            low -= 1
            high += 1
        length = high - low - 1
        start = low + 1
        if length > best_length or (length == best_length and start < best_start):
            best_start, best_length = start, length
    return s[best_start:best_start + best_length]


def find_rotate_steps(ring: str, key: str) -> int:
    """Return the fewest rotations plus button presses needed to spell ``key``.

    The ring starts with ``ring[0]`` at the top; every key character must occur
    on the ring.
    """
    size = len(ring)
    positions: dict[str, list[int]] = {}
    for index, char in enumerate(ring):
        positions.setdefault(char, []).append(index)
    missing = set(key) - positions.keys()
    if missing:
        raise ValueError(f"characters not on the ring: {''.join(sorted(missing))}")

    costs = {0: 0}
    for char in key:
        costs = {
            target: min(
                cost + min(abs(position - target), size - abs(position - target)) + 1
                for position, cost in costs.items()
            )
            for target in positions[char]
        }
    return min(costs.values())


def edit_distance(word1: str, word2: str) -> int:
    """Return the fewest insertions, deletions and replacements turning word1 into word2."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def most_common_word(paragraph: str, banned: Iterable[str]) -> str:
    """Return the most frequent non-banned word, case-insensitively.

    Ties go to the alphabetically smallest word; "" if no word remains.
    """
    counts = Counter(word.lower() for word in _WORD.findall(paragraph))
    for word in banned:
        counts.pop(word.translate(_ASCII_LOWER), None)
    if not counts:
        return ""
    return min(counts.items(), key=lambda item: (-item[1], item[0]))[0]


def number_of_arrays(s: str, k: int) -> int:
    """Count ways to split the digit string into numbers in [1, k], modulo 10**9 + 7.

    Pieces have no leading zeros and at most ten digits.
    """
    size = len(s)
    ways = [0] * (size + 1)
    ways[size] = 1
    for i in range(size - 1, -1, -1):
        if s[i] == "0":
            continue
        value = 0
        total = 0
        for j in range(i, min(size, i + _MAX_PIECE_DIGITS)):
            value = value * 10 + int(s[j])
            if value > k:
                break
            total += ways[j + 1]
        ways[i] = total % MOD
    return ways[0]