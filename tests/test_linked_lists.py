import pytest

from algos.linked_lists import (
    CircularList,
    LinkedList,
    intersect,
    intersection_value,
)


def build_main_list():
    ll = LinkedList()
    ll.append(1)
    ll.append(5)
    ll.push_front(10)
    ll.append(8)
    ll.append(32)
    return ll


def test_display_format():
    assert str(build_main_list()) == "10->1->5->8->32->NULL"


def test_empty_display():
    assert str(LinkedList()) == "NULL"


def test_rotate_by_two():
    ll = build_main_list()
    ll.rotate(2)
    assert str(ll) == "5->8->32->10->1->NULL"


def test_rotate_full_length_is_identity():
    ll = LinkedList([1, 2, 3])
    ll.rotate(3)
    assert list(ll) == [1, 2, 3]
    LinkedList().rotate(4)


def test_rotate_preserves_elements():
    ll = LinkedList(range(7))
    ll.rotate(10)
    assert sorted(ll) == list(range(7))
    assert len(ll) == 7


def test_push_front_on_existing():
    ll = LinkedList([10, 20, 30])
    ll.push_front(7)
    assert list(ll) == [7, 10, 20, 30]


def test_len_and_contains():
    ll = LinkedList([4, 5, 6])
    assert len(ll) == 3
    assert 5 in ll
    assert 9 not in ll


def test_remove_middle_and_head():
    ll = LinkedList([1, 2, 3, 4])
    ll.remove(3)
    assert list(ll) == [1, 2, 4]
    ll.remove(1)
    assert list(ll) == [2, 4]


def test_remove_missing():
    with pytest.raises(ValueError):
        LinkedList([1, 2]).remove(9)


def test_reverse():
    values = [3, 1, 4, 1, 5]
    ll = LinkedList(values)
    ll.reverse()
    assert list(ll) == values[::-1]


def test_reverse_in_groups():
    ll = LinkedList([1, 2, 3, 4, 5])
    ll.reverse_in_groups(2)
    assert list(ll) == [2, 1, 4, 3, 5]


def test_reverse_in_groups_whole_list():
    ll = LinkedList([1, 2, 3])
    ll.reverse_in_groups(5)
    assert list(ll) == [3, 2, 1]
    with pytest.raises(ValueError):
        ll.reverse_in_groups(0)


@pytest.mark.parametrize("position", [1, 2, 3, 5])
def test_cycle_detect_and_remove(position):
    values = [10, 20, 30, 40, 50]
    ll = LinkedList(values)
    assert not ll.has_cycle()
    ll.make_cycle(position)
    assert ll.has_cycle()
    ll.remove_cycle()
    assert not ll.has_cycle()
    assert list(ll) == values


def test_make_cycle_bad_position():
    with pytest.raises(IndexError):
        LinkedList([1, 2]).make_cycle(3)


def test_intersection():
    first = LinkedList([1, 2, 3, 4, 5, 6])
    second = LinkedList([9, 10])
    intersect(first, second, 4)
    assert intersection_value(first, second) == 4
    assert list(second) == [9, 10, 4, 5, 6]


def test_no_intersection():
    assert intersection_value(LinkedList([1, 2]), LinkedList([1, 2])) is None


def test_circular_list_order():
    cl = CircularList()
    for value in (1, 2, 3):
        cl.push_front(value)
    assert list(cl) == [3, 2, 1]
    assert len(cl) == 3


def test_circular_list_empty():
    cl = CircularList()
    assert list(cl) == []
    assert len(cl) == 0