"""Graph algorithms: colouring, trios, cycles, water trapping and union-find."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from math import isqrt

_COLOURS = frozenset({1, 2, 3, 4})


def garden_no_adj(n: int, paths: Sequence[Sequence[int]]) -> list[int]:
    """Give each of gardens 1..n a flower type 1-4 so no two joined gardens match.

    Gardens are painted depth first from the lowest unpainted one, each taking
    the smallest type not used by an already painted neighbour.
    """
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in paths:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"path ({u}, {v}) names a garden outside 1..{n}")
        graph[u].append(v)
        graph[v].append(u)
    colour = [0] * (n + 1)

    def paint(vertex: int) -> None:
        free = _COLOURS - {colour[nbr] for nbr in graph[vertex]}
        if not free:
            raise ValueError(f"garden {vertex} has no flower type left")
        colour[vertex] = min(free)

    for start in range(1, n + 1):
        if colour[start]:
            continue
        paint(start)
        stack = [iter(graph[start])]
        while stack:
            for nbr in stack[-1]:
                if not colour[nbr]:
                    paint(nbr)
                    stack.append(iter(graph[nbr]))
                    break
            else:
                stack.pop()
    return colour[1:]


def min_trio_degree(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Return the smallest number of edges leaving a connected trio, or -1 if none."""
    neighbours: list[set[int]] = [set() for _ in range(n + 1)]
    degree = [0] * (n + 1)
    for u, v in edges:
        neighbours[u].add(v)
        neighbours[v].add(u)
        degree[u] += 1
        degree[v] += 1
    best = None
    for i in range(1, n + 1):
        for j in neighbours[i]:
            if j <= i:
                continue
            for k in neighbours[i] & neighbours[j]:
                if k <= j:
                    continue
                total = degree[i] + degree[j] + degree[k] - 6
                if best is None or total < best:
                    best = total
    return -1 if best is None else best


def longest_cycle(edges: Sequence[int]) -> int:
    """Return the length of the longest cycle where node i points to edges[i].

    -1 marks a missing edge. Returns -1 if no cycle of two or more nodes exists,
    and 0 for an empty graph.
    """
    if not edges:
        return 0
    visited = [False] * len(edges)
    best = 1
    for start in range(len(edges)):
        positions: dict[int, int] = {}
        node = start
        step = 0
        while node != -1 and not visited[node]:
            visited[node] = True
            positions[node] = step
            step += 1
            node = edges[node]
        if node != -1 and node in positions:
            best = max(best, step - positions[node])
    return -1 if best == 1 else best


def trap_rain_water(height_map: Sequence[Sequence[int]]) -> int:
    """Return the volume of water held by the elevation map after rain."""
    rows = len(height_map)
    if rows == 0 or not height_map[0]:
        return 0
    cols = len(height_map[0])
    visited = [[False] * cols for _ in range(rows)]
    heap: list[tuple[int, int, int]] = []
    for r in range(rows):
        for c in range(cols):
            if r in (0, rows - 1) or c in (0, cols - 1):
                heapq.heappush(heap, (height_map[r][c], r, c))
                visited[r][c] = True
    water = 0
    level = 0
    while heap:
        height, r, c = heapq.heappop(heap)
        level = max(level, height)
        for nr, nc in ((r + 1, c), (r, c + 1), (r, c - 1), (r - 1, c)):
            if not (0 <= nr < rows and 0 <= nc < cols) or visited[nr][nc]:
                continue
            cell = height_map[nr][nc]
            if cell < level:
                water += level - cell
            heapq.heappush(heap, (cell, nr, nc))
            visited[nr][nc] = True
    return water


class _DisjointSets:
    def __init__(self) -> None:
        self._parent: dict[int, int] = {}
        self._size: dict[int, int] = {}

    def find(self, item: int) -> int:
        root = item
        while self._parent.get(root, root) != root:
            root = self._parent[root]
        while item != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> None:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return
        size_a = self._size.get(root_a, 1)
        size_b = self._size.get(root_b, 1)
        if size_a < size_b:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] = size_a + size_b


def largest_component_size(nums: Sequence[int]) -> int:
    """Return the size of the largest group of numbers linked by common factors > 1."""
    sets = _DisjointSets()
    for num in nums:
        for factor in range(2, isqrt(num) + 1):
            if num % factor == 0:
                sets.union(num, factor)
                sets.union(num, num // factor)
    counts = Counter(sets.find(num) for num in nums)
    return max(counts.values(), default=0)


def find_latest_step(arr: Sequence[int], m: int) -> int:
    """Return the last step (1-based) at which a run of exactly m ones exists, or -1.

    ``arr`` is a permutation of 1..n; step i sets bit arr[i-1] of an all-zero string.
    """
    size = len(arr)
    run_length = [0] * (size + 2)
    runs: Counter[int] = Counter()
    latest = -1
    for step, position in enumerate(arr, start=1):
        if not 1 <= position <= size:
            raise ValueError(f"position {position} outside 1..{size}")
        if run_length[position]:
            raise ValueError(f"position {position} set twice")
        left = run_length[position - 1]
        right = run_length[position + 1]
        total = left + right + 1
        runs[left] -= 1
        runs[right] -= 1
        runs[total] += 1
        run_length[position] = total
        run_length[position - left] = total
        run_length[position + right] = total
        if runs[m] > 0:
            latest = step
    return latest