"""Tests for the bidirectional UnrolledListIterator."""

import pytest

from unrolledlist import (
    IllegalCursorStateError,
    InvalidArgumentError,
    NoSuchElementError,
    PositionOutOfBoundsError,
    UnrolledList,
    UnrolledListIterator,
)


def test_forward_traversal() -> None:
    """Test next() yields every element in order."""
    lst = UnrolledList(range(10))
    it = lst.iterator()
    seen = []
    while it.has_next():
        seen.append(it.next())
    assert seen == list(range(10))
    assert it.next_index() == 10
    assert not it.has_next()


def test_backward_traversal() -> None:
    """Test previous() from the end yields the reverse sequence."""
    lst = UnrolledList(range(10))
    it = lst.iterator(len(lst))
    seen = []
    while it.has_previous():
        seen.append(it.previous())
    assert seen == list(reversed(range(10)))
    assert it.previous_index() == -1


def test_direction_change_returns_same_element() -> None:
    """Test next() then previous() returns the same element twice."""
    lst = UnrolledList("abcde")
    it = lst.iterator(2)
    assert it.next() == "c"
    assert it.previous() == "c"
    assert it.previous() == "b"
    assert it.next_index() == 1


def test_end_of_sequence() -> None:
    """Test advancing past either end raises NoSuchElementError."""
    lst = UnrolledList([1])
    it = lst.iterator()
    with pytest.raises(NoSuchElementError):
        it.previous()
    it.next()
    with pytest.raises(NoSuchElementError):
        it.next()
    assert issubclass(NoSuchElementError, StopIteration)


def test_python_iteration_protocol() -> None:
    """Test the iterator works in for loops and list()."""
    lst = UnrolledList(range(7))
    assert list(lst.iterator()) == list(range(7))
    assert list(lst.iterator(4)) == [4, 5, 6]


@pytest.mark.parametrize("start", [-1, 4])
def test_iterator_start_out_of_bounds(start: int) -> None:
    """Test a start position outside [0, size] is rejected."""
    lst = UnrolledList([1, 2, 3])
    with pytest.raises(PositionOutOfBoundsError):
        lst.iterator(start)


@pytest.mark.parametrize("start", [-1, 4, 10])
def test_iterator_constructor_checks_start(start: int) -> None:
    """Test building an iterator directly validates the start position."""
    lst = UnrolledList([1, 2, 3])
    with pytest.raises(PositionOutOfBoundsError):
        UnrolledListIterator(lst, start)


def test_iterator_constructor_at_end() -> None:
    """Test an iterator built directly at size walks backward."""
    lst = UnrolledList([1, 2, 3])
    it = UnrolledListIterator(lst, 3)
    assert not it.has_next()
    assert it.previous() == 3


def test_set_requires_commit_point() -> None:
    """Test set() before any traversal raises IllegalCursorStateError."""
    lst = UnrolledList([1, 2, 3])
    it = lst.iterator()
    with pytest.raises(IllegalCursorStateError):
        it.set(9)


def test_set_after_next_replaces_in_place() -> None:
    """Test set() replaces the element at index 2 without structural change."""
    lst = UnrolledList(range(1, 9))
    it = lst.iterator()
    it.next()
    it.next()
    assert it.next() == 3
    before = [len(node) for node in lst.nodes()]

    it.set(30)
    assert len(lst) == 8
    assert [len(node) for node in lst.nodes()] == before
    assert lst.to_list() == [1, 2, 30, 4, 5, 6, 7, 8]

    assert it.delete() == 30
    assert len(lst) == 7
    assert lst.to_list() == [1, 2, 4, 5, 6, 7, 8]
    assert it.next_index() == 2
    assert it.next() == 4


def test_set_after_previous() -> None:
    """Test set() after previous() targets the element stepped over."""
    lst = UnrolledList("abcde")
    it = lst.iterator(3)
    assert it.previous() == "c"
    it.set("C")
    assert lst.to_list() == ["a", "b", "C", "d", "e"]


def test_set_none_rejected() -> None:
    """Test set(None) raises InvalidArgumentError."""
    lst = UnrolledList([1, 2])
    it = lst.iterator()
    it.next()
    with pytest.raises(InvalidArgumentError):
        it.set(None)  # type: ignore[arg-type]


def test_delete_requires_commit_point() -> None:
    """Test delete() without a fresh next()/previous() is illegal."""
    lst = UnrolledList([1, 2, 3])
    it = lst.iterator()
    with pytest.raises(IllegalCursorStateError):
        it.delete()
    it.next()
    it.delete()
    with pytest.raises(IllegalCursorStateError):
        it.delete()
    with pytest.raises(IllegalCursorStateError):
        it.set(5)
    assert lst.to_list() == [2, 3]


def test_delete_after_previous_keeps_index() -> None:
    """Test deleting the element returned by previous() leaves the cursor in place."""
    lst = UnrolledList(range(1, 9))
    it = lst.iterator(len(lst))
    assert it.previous() == 8
    assert it.delete() == 8
    assert it.next_index() == 7
    assert not it.has_next()
    assert it.previous() == 7


def test_delete_across_node_boundary() -> None:
    """Test deleting the last element of a node when the cursor sits in the next node."""
    lst = UnrolledList(range(1, 9))
    it = lst.iterator()
    for _ in range(4):
        last = it.next()
    assert last == 4
    assert it.delete() == 4
    assert it.next_index() == 3
    assert lst.nodes() == [(1, 2, 3), (5, 6, 7, 8)]
    assert it.next() == 5


def test_delete_last_element_at_end() -> None:
    """Test deleting the final element unlinks its node and moves the cursor back."""
    lst = UnrolledList(range(1, 6))
    it = lst.iterator()
    while it.has_next():
        it.next()
    assert it.delete() == 5
    assert lst.nodes() == [(1, 2, 3, 4)]
    assert it.next_index() == 4
    assert not it.has_next()
    assert it.previous() == 4


def test_delete_while_traversing(check_structure) -> None:
    """Test filtering the list in place through the iterator."""
    lst = UnrolledList(range(30))
    it = lst.iterator()
    while it.has_next():
        if it.next() % 3 != 0:
            it.delete()
        check_structure(lst)
    assert lst.to_list() == list(range(0, 30, 3))


def test_delete_while_traversing_backward(check_structure) -> None:
    """Test filtering the list in place walking from the end."""
    lst = UnrolledList(range(30), node_capacity=6)
    it = lst.iterator(len(lst))
    while it.has_previous():
        if it.previous() % 2:
            it.delete()
        check_structure(lst)
    assert lst.to_list() == list(range(0, 30, 2))


def test_insert_through_iterator() -> None:
    """Test insert() places the item before the cursor and advances past it."""
    lst = UnrolledList([1, 2, 3, 4])
    it = lst.iterator(2)
    it.insert(99)
    assert lst.to_list() == [1, 2, 99, 3, 4]
    assert it.next_index() == 3
    assert it.previous_index() == 2
    assert it.next() == 3


def test_insert_clears_commit_point() -> None:
    """Test set() and delete() are illegal right after insert()."""
    lst = UnrolledList([1, 2, 3])
    it = lst.iterator()
    it.next()
    it.insert(10)
    with pytest.raises(IllegalCursorStateError):
        it.set(5)
    with pytest.raises(IllegalCursorStateError):
        it.delete()
    assert lst.to_list() == [1, 10, 2, 3]


def test_insert_none_rejected() -> None:
    """Test insert(None) is rejected and the cursor does not move."""
    lst = UnrolledList([1])
    it = lst.iterator()
    with pytest.raises(InvalidArgumentError):
        it.insert(None)  # type: ignore[arg-type]
    assert it.next_index() == 0


def test_build_list_through_iterator(check_structure) -> None:
    """Test repeated insert() into an empty list appends in order."""
    lst = UnrolledList[int]()
    it = lst.iterator()
    for i in range(13):
        it.insert(i)
        check_structure(lst)
    assert lst.to_list() == list(range(13))
    assert lst.nodes() == [(0, 1, 2, 3), (4, 5, 6, 7), (8, 9, 10, 11), (12,)]
