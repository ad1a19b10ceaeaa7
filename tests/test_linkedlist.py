import pytest

from catsworld.linkedlist import LinkedList, Node


def test_empty_list_has_no_elements():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []


def test_init_keeps_order():
    items = LinkedList([1, 2, 3])
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_push_front_prepends():
    items = LinkedList(["b", "c"])
    node = items.push_front("a")
    assert isinstance(node, Node) and node.value == "a"
    assert list(items) == ["a", "b", "c"]


def test_push_back_appends():
    items = LinkedList(["a"])
    items.push_back("b")
    assert list(items) == ["a", "b"]
    assert items.last() == "b"


def test_push_front_on_empty_sets_last():
    items = LinkedList()
    items.push_front(7)
    assert items.last() == 7
    items.push_back(8)
    assert list(items) == [7, 8]


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_len_counts_all_pushes():
    items = LinkedList()
    for value in range(5):
        items.push_back(value)
        items.push_front(value)
    assert len(items) == 10
    assert len(list(items)) == len(items)


def test_clear_releases_in_order_and_empties():
    released = []
    items = LinkedList([1, 2, 3])
    items.clear(released.append)
    assert released == [1, 2, 3]
    assert len(items) == 0
    assert list(items) == []


def test_clear_without_release_empties():
    items = LinkedList(["x"])
    items.clear()
    assert list(items) == []
    with pytest.raises(IndexError):
        items.last()


def test_list_usable_after_clear():
    items = LinkedList([1])
    items.clear()
    items.push_back(2)
    assert list(items) == [2]
    assert items.last() == 2


def test_for_each_visits_every_value():
    seen = []
    LinkedList(["a", "b", "c"]).for_each(seen.append)
    assert seen == ["a", "b", "c"]


def test_map_builds_new_list_and_leaves_original():
    items = LinkedList([1, 2, 3])
    mapped = items.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(items) == [1, 2, 3]


def test_map_failure_releases_produced_values():
    released = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return -value

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, released.append)
    assert released == [-1, -2]


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []