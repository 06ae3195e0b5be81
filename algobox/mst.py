"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


class DisjointSets:
    """Union-find over the elements 0..n with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def find(self, u: int) -> int:
        """Representative of the set holding u."""
        if not 0 <= u < len(self._parent):
            raise ValueError(f"element {u} is out of range")
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already one."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
        else:
            self._parent[x] = y
            if self._rank[x] == self._rank[y]:
                self._rank[y] += 1
        return True


def kruskal_mst(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[int, list[tuple[int, int, int]]]:
    """Minimum spanning forest by Kruskal's algorithm.

    Edges are (u, v, weight) triples over vertices 0..vertex_count. Returns
    the total weight and the chosen edges in the order they were taken.
    """
    sets = DisjointSets(vertex_count)
    ordered = sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1]))
    total = 0
    chosen: list[tuple[int, int, int]] = []
    for u, v, weight in ordered:
        if len(chosen) >= vertex_count - 1:
            break
        if sets.union(u, v):
            total += weight
            chosen.append((u, v, weight))
    return total, chosen


def prim_mst(matrix: Iterable[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Minimum spanning tree of a connected graph by Prim's algorithm.

    The graph is a square adjacency matrix in which 0 means no edge. Returns
    (parent, vertex, weight) for every vertex but the root 0, ordered by vertex.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    keys = [math.inf] * size
    keys[0] = 0
    parents: list[int | None] = [None] * size
    in_tree = [False] * size
    for _ in range(size):
        candidates = [v for v in range(size) if not in_tree[v] and keys[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=keys.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < keys[v]:
                parents[v] = u
                keys[v] = weight
    return [(parents[v], v, rows[parents[v]][v]) for v in range(1, size)]