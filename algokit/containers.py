"""Small container types: LRU cache, min stack, trie, running median, encrypter."""

from __future__ import annotations

import heapq
from collections import Counter, OrderedDict
from collections.abc import Iterable, Sequence
from typing import Any


class LRUCache:
    """A key-value cache that evicts the least recently used entry when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Any, Any] = OrderedDict()

    def get(self, key: Any) -> Any:
        """Return the value for ``key``, or -1 if it is not cached."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if needed."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        """Push ``val`` on top."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


class _TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """Return True if some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


class MedianFinder:
    """Keeps the median of a growing stream of numbers."""

    def __init__(self) -> None:
        self._low: list[float] = []  # max-heap of negated values
        self._high: list[float] = []  # min-heap

    def add_num(self, num: float) -> None:
        """Add ``num`` to the stream."""
        if self._low and num > -self._low[0]:
            heapq.heappush(self._high, num)
        else:
            heapq.heappush(self._low, -num)
        if len(self._low) > len(self._high) + 1:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) > len(self._low) + 1:
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Return the median of the numbers added so far."""
        if not self._low and not self._high:
            raise ValueError("no numbers have been added")
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        if len(self._high) > len(self._low):
            return float(self._high[0])
        return (-self._low[0] + self._high[0]) / 2.0


class Encrypter:
    """Maps characters to two-letter codes and counts dictionary words per code."""

    def __init__(
        self, keys: Sequence[str], values: Sequence[str], dictionary: Iterable[str]
    ) -> None:
        self._codes = dict(zip(keys, values))
        self._counts: Counter[str] = Counter()
        for word in dictionary:
            if all(char in self._codes for char in word):
                self._counts[self.encrypt(word)] += 1

    def encrypt(self, word: str) -> str:
        """Return the encoding of ``word``, or "" if it has an unknown character."""
        if any(char not in self._codes for char in word):
            return ""
        return "".join(self._codes[char] for char in word)

    def decrypt(self, word: str) -> int:
        """Return how many dictionary words encrypt to ``word``."""
        return self._counts[word]