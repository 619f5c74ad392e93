"""Bidirectional cursor over an UnrolledList."""

from typing import TYPE_CHECKING, Generic, TypeVar

from unrolledlist.errors import (
    IllegalCursorStateError,
    InvalidArgumentError,
    NoSuchElementError,
    PositionOutOfBoundsError,
)
from unrolledlist.position import Position

if TYPE_CHECKING:
    from unrolledlist.core import UnrolledList

T = TypeVar("T")


class UnrolledListIterator(Generic[T]):
    """
    Stateful cursor sitting between two logical positions.

    set() and delete() act on the element most recently returned by next()
    or previous(); insert() and delete() clear that commit point. Structural
    changes made through the list itself invalidate the iterator.
    """

    def __init__(self, owner: "UnrolledList[T]", start: int = 0) -> None:
        """
        Place the cursor so that next() yields position start.

        Raises:
            PositionOutOfBoundsError: If start is not in [0, len(owner)].
        """
        if start < 0 or start > len(owner):
            raise PositionOutOfBoundsError(f"Position {start} out of range for size {len(owner)}")
        self._list = owner
        self._index = start
        self._last: Position[T] | None = None

    def next_index(self) -> int:
        """Return the position next() would yield."""
        return self._index

    def previous_index(self) -> int:
        """Return the position previous() would yield."""
        return self._index - 1

    def has_next(self) -> bool:
        return self._index < len(self._list)

    def has_previous(self) -> bool:
        return self._index > 0

    def next(self) -> T:
        """
        Return the element at the cursor and advance past it.

        Raises:
            NoSuchElementError: If the cursor is at the end.
        """
        if not self.has_next():
            raise NoSuchElementError("No element after the cursor")
        position = self._list._find(self._index)
        self._index += 1
        self._last = position
        return position.item

    def previous(self) -> T:
        """
        Step back over the element before the cursor and return it.

        Raises:
            NoSuchElementError: If the cursor is at the start.
        """
        if not self.has_previous():
            raise NoSuchElementError("No element before the cursor")
        self._index -= 1
        position = self._list._find(self._index)
        self._last = position
        return position.item

    def set(self, item: T) -> None:
        """
        Replace the element last returned by next() or previous().

        Raises:
            InvalidArgumentError: If item is None.
            IllegalCursorStateError: If there is no commit point.
        """
        if item is None:
            raise InvalidArgumentError("None elements are not allowed")
        if self._last is None:
            raise IllegalCursorStateError("set() requires a preceding next() or previous()")
        self._last.node.data[self._last.offset] = item

    def insert(self, item: T) -> None:
        """
        Insert item before the cursor; a following next() is unaffected.

        Raises:
            InvalidArgumentError: If item is None.
        """
        self._list.insert(self._index, item)
        self._index += 1
        self._last = None

    def delete(self) -> T:
        """
        Remove and return the element last returned by next() or previous().

        Raises:
            IllegalCursorStateError: If there is no commit point.
        """
        if self._last is None:
            raise IllegalCursorStateError("delete() requires a preceding next() or previous()")
        current = self._list._find(self._index)
        # The committed element lies before the cursor after a next()
        if self._last.offset < current.offset or self._last.node is current.node.prev:
            self._index -= 1
        item = self._list._remove_at(self._last)
        self._last = None
        return item

    def __iter__(self) -> "UnrolledListIterator[T]":
        return self

    def __next__(self) -> T:
        return self.next()
