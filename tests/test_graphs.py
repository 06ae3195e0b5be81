import pytest
from hypothesis import given, strategies as st

from algobox.graphs import (
    directed_adjacency_list,
    format_adjacency_list,
    is_bipartite,
    undirected_adjacency_list,
)

SOURCE_UNDIRECTED_EDGES = [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]


def _cycle_matrix(n):
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        j = (i + 1) % n
        matrix[i][j] = matrix[j][i] = 1
    return matrix


def test_directed_list_keeps_edge_order_per_vertex():
    edges = [(1, 2, 7), (1, 3, 4), (2, 3, 1)]
    adjacency = directed_adjacency_list(3, edges)
    assert len(adjacency) == 4
    assert adjacency[0] == []
    assert adjacency[1] == [(2, 7), (3, 4)]
    assert adjacency[2] == [(3, 1)]
    assert adjacency[3] == []


def test_directed_list_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        directed_adjacency_list(2, [(1, 5, 1)])


def test_directed_list_rejects_negative_count():
    with pytest.raises(ValueError):
        directed_adjacency_list(-1, [])


def test_undirected_list_from_source_example():
    adjacency = undirected_adjacency_list(5, SOURCE_UNDIRECTED_EDGES)
    assert adjacency[0] == [1, 4]
    assert adjacency[1] == [0, 2, 3, 4]
    assert adjacency[3] == [1, 2, 4]


@given(
    st.integers(min_value=1, max_value=8).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(
                st.tuples(
                    st.integers(min_value=0, max_value=n - 1),
                    st.integers(min_value=0, max_value=n - 1),
                ),
                max_size=20,
            ),
        )
    )
)
def test_undirected_list_is_symmetric(case):
    n, edges = case
    adjacency = undirected_adjacency_list(n, edges)
    assert sum(len(neighbours) for neighbours in adjacency) == 2 * len(edges)
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            assert adjacency[v].count(u) >= 1


def test_undirected_list_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        undirected_adjacency_list(3, [(0, 3)])


def test_format_weighted_list():
    assert format_adjacency_list([[], [(2, 5)]]) == "[0]\n[1] -> 2(5)"


def test_format_plain_list_lists_each_neighbour():
    text = format_adjacency_list(undirected_adjacency_list(5, SOURCE_UNDIRECTED_EDGES))
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[1] == "[1] -> 0 -> 2 -> 3 -> 4"


def test_source_example_is_bipartite():
    matrix = [[0, 1, 0, 1], [1, 0, 1, 0], [0, 1, 0, 1], [1, 0, 1, 0]]
    assert is_bipartite(matrix, 0) is True


def test_triangle_is_not_bipartite():
    assert is_bipartite(_cycle_matrix(3), 0) is False


def test_self_loop_is_not_bipartite():
    matrix = [[1, 0], [0, 0]]
    assert is_bipartite(matrix, 0) is False


@given(st.integers(min_value=3, max_value=12), st.data())
def test_cycle_is_bipartite_exactly_when_even(n, data):
    source = data.draw(st.integers(min_value=0, max_value=n - 1))
    assert is_bipartite(_cycle_matrix(n), source) is (n % 2 == 0)


@given(st.integers(min_value=1, max_value=5), st.integers(min_value=1, max_value=5))
def test_complete_bipartite_graph(a, b):
    n = a + b
    matrix = [[0] * n for _ in range(n)]
    for i in range(a):
        for j in range(a, n):
            matrix[i][j] = matrix[j][i] = 1
    assert is_bipartite(matrix, 0) is True


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        is_bipartite([[0, 1], [1]], 0)


def test_source_out_of_range_rejected():
    with pytest.raises(ValueError):
        is_bipartite(_cycle_matrix(4), 4)