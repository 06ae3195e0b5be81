import pytest
from hypothesis import given, strategies as st

from algobox.mst import DisjointSets, kruskal_mst, prim_mst

SOURCE_EDGES = [
    (0, 1, 4),
    (0, 7, 8),
    (1, 2, 8),
    (1, 7, 11),
    (2, 3, 7),
    (2, 8, 2),
    (2, 5, 4),
    (3, 4, 9),
    (3, 5, 14),
    (4, 5, 10),
    (5, 6, 2),
    (6, 7, 1),
    (6, 8, 6),
    (7, 8, 7),
]

SOURCE_MATRIX = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _edges_to_matrix(n, edges):
    matrix = [[0] * n for _ in range(n)]
    for u, v, w in edges:
        matrix[u][v] = matrix[v][u] = w
    return matrix


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(min_value=2, max_value=7))
    edges = []
    for i in range(n):
        for j in range(i + 1, n):
            weight = draw(st.integers(min_value=0, max_value=9))
            if j == i + 1 and weight == 0:
                weight = 10
            if weight:
                edges.append((i, j, weight))
    return n, edges


def test_disjoint_sets_union_and_find():
    sets = DisjointSets(4)
    assert sets.find(3) == 3
    assert sets.union(1, 2) is True
    assert sets.union(2, 3) is True
    assert sets.union(1, 3) is False
    assert sets.find(1) == sets.find(3)
    assert sets.find(0) != sets.find(1)


def test_disjoint_sets_out_of_range():
    with pytest.raises(ValueError):
        DisjointSets(2).find(3)


def test_kruskal_source_example():
    total, chosen = kruskal_mst(9, SOURCE_EDGES)
    assert total == 37
    assert len(chosen) == 8
    assert sum(w for _, _, w in chosen) == total


def test_kruskal_takes_cheapest_edge_first():
    _, chosen = kruskal_mst(9, SOURCE_EDGES)
    assert chosen[0] == (6, 7, 1)


def test_prim_source_example():
    assert prim_mst(SOURCE_MATRIX) == [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]


def test_prim_and_kruskal_agree_on_source_graph():
    matrix = _edges_to_matrix(9, SOURCE_EDGES)
    assert sum(w for _, _, w in prim_mst(matrix)) == kruskal_mst(9, SOURCE_EDGES)[0]


def test_prim_disconnected_graph_rejected():
    with pytest.raises(ValueError):
        prim_mst([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_prim_non_square_rejected():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1, 0, 0]])


def test_prim_trivial_graphs():
    assert prim_mst([]) == []
    assert prim_mst([[0]]) == []


@given(connected_graphs())
def test_kruskal_and_prim_give_same_weight(graph):
    n, edges = graph
    kruskal_total, kruskal_edges = kruskal_mst(n, edges)
    prim_edges = prim_mst(_edges_to_matrix(n, edges))
    assert len(kruskal_edges) == n - 1
    assert len(prim_edges) == n - 1
    assert sum(w for _, _, w in prim_edges) == kruskal_total


@given(connected_graphs())
def test_kruskal_edges_form_spanning_tree(graph):
    n, edges = graph
    _, chosen = kruskal_mst(n, edges)
    sets = DisjointSets(n)
    assert all(sets.union(u, v) for u, v, _ in chosen)
    assert len({sets.find(v) for v in range(n)}) == 1
    assert set(chosen) <= set(edges)