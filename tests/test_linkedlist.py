import pytest

from pipex.linkedlist import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    ll = LinkedList(items)
    assert list(ll) == items
    assert len(ll) == len(items)


def test_empty_list():
    ll = LinkedList()
    assert list(ll) == []
    assert len(ll) == 0
    assert ll.last() is None
    assert ll.head is None


def test_push_front_prepends():
    ll = LinkedList([2, 3])
    node = ll.push_front(1)
    assert list(ll) == [1, 2, 3]
    assert ll.head is node
    assert node.next.content == 2


def test_push_back_on_empty_sets_head():
    ll = LinkedList()
    node = ll.push_back("x")
    assert ll.head is node
    assert ll.last() is node
    assert list(ll) == ["x"]


def test_push_back_appends():
    ll = LinkedList([1])
    ll.push_back(2)
    ll.push_back(3)
    assert list(ll) == [1, 2, 3]


def test_last_is_final_node():
    ll = LinkedList([1, 2, 3])
    tail = ll.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_clear_calls_delete_in_order():
    deleted = []
    ll = LinkedList([1, 2, 3])
    ll.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(ll) == 0
    assert ll.head is None


def test_clear_without_delete_empties():
    ll = LinkedList(["a", "b"])
    ll.clear()
    assert list(ll) == []


def test_for_each_visits_every_value():
    seen = []
    ll = LinkedList([5, 6, 7])
    ll.for_each(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list():
    ll = LinkedList([1, 2, 3])
    mapped = ll.map(lambda v: v * 10)
    assert list(mapped) == [v * 10 for v in [1, 2, 3]]
    assert list(ll) == [1, 2, 3]
    assert mapped.head is not ll.head


def test_map_empty_gives_empty():
    mapped = LinkedList().map(str)
    assert len(mapped) == 0


def test_map_failure_deletes_partial_result():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value + 100

    ll = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        ll.map(func, deleted.append)
    assert deleted == [101, 102]
    assert list(ll) == [1, 2, 3, 4]


def test_len_tracks_pushes():
    ll = LinkedList()
    for count in range(1, 6):
        ll.push_front(count)
        assert len(ll) == count