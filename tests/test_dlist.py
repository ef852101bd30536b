import random

import pytest

from dsdrills.dlist import DoublyLinkedList


def test_new_list_is_empty():
    lst = DoublyLinkedList()
    assert lst.is_empty() is True
    assert len(lst) == 0
    lst.push_back(1)
    assert lst.is_empty() is False


def test_push_back_then_pop_back_in_reverse():
    items = [1, 2, 3, 4]
    lst = DoublyLinkedList()
    for item in items:
        lst.push_back(item)
    assert list(lst) == items
    remaining = list(items)
    while remaining:
        assert lst.pop_back() == remaining.pop()
        assert list(lst) == remaining
    assert lst.is_empty()


def test_push_front_then_pop_front():
    items = [1, 2, 3, 4]
    lst = DoublyLinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == items[::-1]
    remaining = items[::-1]
    while remaining:
        assert lst.pop_front() == remaining.pop(0)
        assert list(lst) == remaining


def test_pop_front_after_push_back():
    items = [1, 2, 3, 4]
    lst = DoublyLinkedList(items)
    assert [lst.pop_front() for _ in items] == items


@pytest.mark.parametrize("method", ["pop_back", "pop_front"])
def test_pop_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(DoublyLinkedList(), method)()


def test_find_and_insert_after_sequence():
    lst = DoublyLinkedList([1, 2, 3, 4])
    model = [1, 2, 3, 4]
    for anchor, value in ((1, 5), (2, 6), (3, 7)):
        pos = lst.find(anchor)
        assert pos.value == anchor
        lst.insert_after(pos, value)
        model.insert(model.index(anchor) + 1, value)
        assert list(lst) == model
    assert lst.erase(lst.find(3)) == 3
    model.remove(3)
    assert list(lst) == model


def test_find_missing_returns_none():
    assert DoublyLinkedList([1, 2]).find(3) is None
    assert DoublyLinkedList().find(1) is None


def test_erase_last_then_reuse():
    lst = DoublyLinkedList([1, 2, 3, 4])
    lst.erase(lst.find(4))
    assert list(lst) == [1, 2, 3]
    for item in (1, 2, 3, 4):
        lst.push_back(item)
    assert list(lst) == [1, 2, 3, 1, 2, 3, 4]
    assert len(lst) == 7


def test_erase_detached_node_raises():
    lst = DoublyLinkedList([1, 2])
    node = lst.find(1)
    lst.erase(node)
    with pytest.raises(ValueError):
        lst.erase(node)
    with pytest.raises(ValueError):
        lst.insert_after(node, 9)
    assert list(lst) == [2]


def test_backward_links_are_consistent():
    lst = DoublyLinkedList([1, 2, 3])
    lst.push_front(0)
    lst.insert_after(lst.find(2), 9)
    node = lst.find(3)
    backwards = []
    while node is not None and node.prev is not None and node.value is not None:
        backwards.append(node.value)
        node = node.prev
    assert backwards == list(lst)[::-1]


def test_clear_detaches_nodes():
    lst = DoublyLinkedList([1, 2, 3])
    node = lst.find(2)
    lst.clear()
    assert lst.is_empty()
    assert node.next is None and node.prev is None
    lst.push_back(8)
    assert list(lst) == [8]


def test_render():
    assert DoublyLinkedList([1, 2, 3, 4]).render() == "1->2->3->4->"
    assert DoublyLinkedList().render() == ""


def test_random_operations_match_python_list():
    rng = random.Random(7)
    lst = DoublyLinkedList()
    model = []
    removed = []
    expected_removed = []
    for _ in range(400):
        ops = ["back", "front"]
        if model:
            ops += ["pop_back", "pop_front", "after", "erase"]
        op = rng.choice(ops)
        value = rng.randint(0, 30)
        if op == "back":
            lst.push_back(value)
            model.append(value)
        elif op == "front":
            lst.push_front(value)
            model.insert(0, value)
        elif op == "pop_back":
            removed.append(lst.pop_back())
            expected_removed.append(model.pop())
        elif op == "pop_front":
            removed.append(lst.pop_front())
            expected_removed.append(model.pop(0))
        elif op == "after":
            anchor = rng.choice(model)
            lst.insert_after(lst.find(anchor), value)
            model.insert(model.index(anchor) + 1, value)
        else:
            target = rng.choice(model)
            removed.append(lst.erase(lst.find(target)))
            model.remove(target)
            expected_removed.append(target)
        assert list(lst) == model
        assert lst.is_empty() == (not model)
    assert removed == expected_removed