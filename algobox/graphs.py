"""Adjacency lists and bipartiteness checks for small graphs."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Sequence


def _check_vertex(vertex: int, upper: int) -> None:
    if not 0 <= vertex < upper:
        raise ValueError(f"vertex {vertex} is out of range 0..{upper - 1}")


def directed_adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]]
) -> list[list[tuple[int, Any]]]:
    """Weighted directed adjacency list for vertices numbered 0..vertex_count.

    Each edge is a (source, target, weight) triple; the list at index
    ``source`` receives ``(target, weight)`` in the order the edges are given.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    size = vertex_count + 1
    adjacency: list[list[tuple[int, Any]]] = [[] for _ in range(size)]
    for source, target, weight in edges:
        _check_vertex(source, size)
        _check_vertex(target, size)
        adjacency[source].append((target, weight))
    return adjacency


def undirected_adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Unweighted undirected adjacency list for vertices 0..vertex_count - 1."""
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _format_entry(entry: Any) -> str:
    if isinstance(entry, tuple) and len(entry) == 2:
        target, weight = entry
        return f"{target}({weight})"
    return str(entry)


def format_adjacency_list(adjacency: Iterable[Iterable[Any]]) -> str:
    """Render an adjacency list, one vertex per line.

    Weighted entries ``(target, weight)`` appear as ``target(weight)``.
    """
    return "\n".join(
        f"[{vertex}]" + "".join(f" -> {_format_entry(entry)}" for entry in neighbours)
        for vertex, neighbours in enumerate(adjacency)
    )


def is_bipartite(matrix: Iterable[Sequence[int]], source: int) -> bool:
    """Whether the component reachable from source can be two-coloured.

    The graph is given as a square adjacency matrix; a self loop makes it
    non-bipartite.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    _check_vertex(source, size)
    colours: list[int | None] = [None] * size
    colours[source] = 1
    queue = deque([source])
    while queue:
        u = queue.popleft()
        if rows[u][u]:
            return False
        for v, linked in enumerate(rows[u]):
            if not linked:
                continue
            if colours[v] is None:
                colours[v] = 1 - colours[u]
                queue.append(v)
            elif colours[v] == colours[u]:
                return False
    return True