import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.linked_list import LinkedList, Node

values_lists = st.lists(st.integers(), max_size=40)


@given(values_lists)
def test_round_trip(values):
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0


def test_nodes_are_linked_in_order():
    linked = LinkedList([1, 2, 3])
    nodes = list(linked.nodes())
    assert [node.value for node in nodes] == [1, 2, 3]
    assert nodes[0].next is nodes[1]
    assert nodes[2].next is None


def test_push_front():
    linked = LinkedList([1, 2, 3])
    node = linked.push_front(5)
    assert list(linked) == [5, 1, 2, 3]
    assert next(linked.nodes()) is node
    assert len(linked) == 4


@given(values_lists, st.integers())
def test_append_matches_list(values, extra):
    linked = LinkedList(values)
    linked.append(extra)
    assert list(linked) == values + [extra]
    assert len(linked) == len(values) + 1


def test_append_to_empty():
    linked = LinkedList()
    linked.append(7)
    assert list(linked) == [7]


def test_insert_tail_example():
    linked = LinkedList([1, 2, 3, 4])
    linked.append(51)
    linked.append(22)
    assert list(linked) == [1, 2, 3, 4, 51, 22]


def test_insert_after_value():
    linked = LinkedList([1, 2, 3, 4])
    linked.insert_after(1, 5)
    linked.insert_after(5, 18)
    assert list(linked) == [1, 5, 18, 2, 3, 4]


def test_insert_after_missing_value_leaves_list_alone():
    linked = LinkedList([1, 2, 3, 4])
    with pytest.raises(ValueError):
        linked.insert_after(50, 18)
    assert list(linked) == [1, 2, 3, 4]
    assert len(linked) == 4


def test_insert_after_node():
    linked = LinkedList([1, 2, 3, 4])
    third = list(linked.nodes())[2]
    linked.insert_after_node(third, 11)
    assert list(linked) == [1, 2, 3, 11, 4]


def test_insert_after_foreign_node_raises():
    linked = LinkedList([1, 2, 3, 4])
    with pytest.raises(ValueError):
        linked.insert_after_node(Node(8), 11)
    assert list(linked) == [1, 2, 3, 4]


def test_insert_before():
    linked = LinkedList([1, 2, 3, 4, 5])
    linked.insert_before(8, 2)
    assert list(linked) == [1, 8, 2, 3, 4, 5]
    linked.insert_before(11, 1)
    assert list(linked) == [11, 1, 8, 2, 3, 4, 5]
    linked.remove(11)
    assert list(linked) == [1, 8, 2, 3, 4, 5]


def test_insert_before_missing_raises():
    linked = LinkedList([1, 2])
    with pytest.raises(ValueError):
        linked.insert_before(0, 9)


def test_push_append_remove_sequence():
    linked = LinkedList([1, 2, 3, 4])
    linked.push_front(3)
    linked.append(22)
    linked.remove(3)
    linked.remove(22)
    assert list(linked) == [1, 2, 3, 4]
    assert len(linked) == 4


def test_remove_first_occurrence_only():
    linked = LinkedList([1, 2, 1, 2])
    linked.remove(2)
    assert list(linked) == [1, 1, 2]


def test_remove_missing_raises():
    linked = LinkedList([1, 2])
    with pytest.raises(ValueError):
        linked.remove(9)


def test_remove_head_node():
    linked = LinkedList([1, 2, 3, 4, 5])
    linked.remove_node(next(linked.nodes()))
    assert list(linked) == [2, 3, 4, 5]


def test_remove_inner_node():
    linked = LinkedList([1, 2, 3])
    linked.remove_node(list(linked.nodes())[1])
    assert list(linked) == [1, 3]


def test_remove_foreign_node_raises():
    linked = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        linked.remove_node(Node(2))


@given(st.lists(st.integers(), min_size=1, max_size=30), st.data())
def test_remove_at_matches_list(values, data):
    position = data.draw(st.integers(0, len(values) - 1))
    linked = LinkedList(values)
    removed = linked.remove_at(position)
    expected = list(values)
    assert removed == expected.pop(position)
    assert list(linked) == expected
    assert len(linked) == len(expected)


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_remove_at_out_of_range(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.remove_at(position)
    assert list(linked) == [1, 2, 3]


def test_clear():
    linked = LinkedList([1, 2, 3])
    linked.clear()
    assert list(linked) == []
    assert len(linked) == 0


def test_middle_odd():
    assert LinkedList([1, 2, 3, 4, 5]).middle() == 3


def test_middle_even_takes_second():
    assert LinkedList([1, 2, 3, 4]).middle() == 3


def test_middle_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().middle()


@given(values_lists)
def test_reverse(values):
    linked = LinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]


@given(values_lists)
def test_reverse_recursive(values):
    linked = LinkedList(values)
    linked.reverse_recursive()
    assert list(linked) == values[::-1]


def test_reverse_twice_restores():
    linked = LinkedList([1, 2, 3, 4])
    linked.reverse()
    linked.reverse_recursive()
    assert list(linked) == [1, 2, 3, 4]