"""Main UnrolledList implementation."""

import logging
from operator import index as op_index
from typing import Any, Generic, Iterable, Iterator, TypeVar

from unrolledlist.errors import InvalidArgumentError, PositionOutOfBoundsError
from unrolledlist.iterator import UnrolledListIterator
from unrolledlist.node import Node
from unrolledlist.position import Position
from unrolledlist.types import DEFAULT_NODE_CAPACITY, Comparator

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class UnrolledList(Generic[T]):
    """
    Sequence container storing several elements per node.

    Every node except possibly the last one holds at least half its capacity.
    Insertion fills the previous node or splits a full one; removal borrows
    from or merges with the successor to keep the rule.
    """

    def __init__(
        self,
        iterable: Iterable[T] | None = None,
        *,
        node_capacity: int = DEFAULT_NODE_CAPACITY,
    ) -> None:
        """
        Initialize the list.

        Args:
            iterable: Elements to append in order.
            node_capacity: Maximum number of elements per node. Must be a
                positive even integer; half of it is the minimum fill of every
                node except the last.

        Raises:
            InvalidArgumentError: If node_capacity is not a positive even
                integer, or iterable yields None.
        """
        message = f"node_capacity must be a positive even integer, got {node_capacity!r}"
        if isinstance(node_capacity, bool):
            raise InvalidArgumentError(message)
        try:
            node_capacity = op_index(node_capacity)
        except TypeError:
            raise InvalidArgumentError(message) from None
        if node_capacity <= 0 or node_capacity % 2 != 0:
            raise InvalidArgumentError(message)
        self._capacity = node_capacity
        # Sentinel nodes never hold data
        self._head: Node[T] = Node(node_capacity)
        self._tail: Node[T] = Node(node_capacity)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
        if iterable is not None:
            self.extend(iterable)

    @property
    def node_capacity(self) -> int:
        """Maximum number of elements a node may hold."""
        return self._capacity

    def size(self) -> int:
        """Return the number of elements."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    # Chain maintenance

    def _find(self, pos: int) -> Position[T]:
        """Map logical index pos (0 <= pos <= size) to a node and offset."""
        if pos == self._size:
            return Position(self._tail, 0)
        node = self._head.next
        before = 0
        while node is not self._tail and before + node.count <= pos:  # type: ignore[union-attr]
            before += node.count  # type: ignore[union-attr]
            node = node.next
        return Position(node, pos - before)  # type: ignore[arg-type]

    def _link_after(self, current: Node[T], new_node: Node[T]) -> None:
        """Link new_node immediately after current."""
        new_node.prev = current
        new_node.next = current.next
        current.next.prev = new_node  # type: ignore[union-attr]
        current.next = new_node

    def _unlink(self, node: Node[T]) -> None:
        """Remove node from the chain."""
        node.prev.next = node.next  # type: ignore[union-attr]
        node.next.prev = node.prev  # type: ignore[union-attr]
        node.prev = None
        node.next = None

    def _new_node_after(self, current: Node[T], item: T) -> Node[T]:
        node: Node[T] = Node(self._capacity)
        node.append_item(item)
        self._link_after(current, node)
        logger.debug("Allocated node after %r", current)
        return node

    def _split(self, node: Node[T]) -> Node[T]:
        """Move the upper half of a full node into a new successor node."""
        mid = self._capacity // 2
        new_node: Node[T] = Node(self._capacity)
        self._link_after(node, new_node)
        for i in range(mid, self._capacity):
            new_node.append_item(node.data[i])  # type: ignore[arg-type]
            node.data[i] = None
        node.count = mid
        logger.debug("Split full node into %r and %r", node, new_node)
        return new_node

    def _add_at(self, position: Position[T], item: T) -> None:
        """Insert item at an already resolved location."""
        node, offset = position.node, position.offset
        mid = self._capacity // 2

        if self._size == 0:
            self._new_node_after(self._head, item)
            self._size += 1
            return

        if offset == 0:
            previous = node.prev
            if previous is not self._head and not previous.is_full:  # type: ignore[union-attr]
                previous.append_item(item)  # type: ignore[union-attr]
                self._size += 1
                return
            if node is self._tail:
                self._new_node_after(previous, item)  # type: ignore[arg-type]
                self._size += 1
                return
            # Start of a real node whose predecessor is head or full

        if not node.is_full:
            node.insert_item(offset, item)
        else:
            new_node = self._split(node)
            if offset <= mid:
                node.insert_item(offset, item)
            else:
                new_node.insert_item(offset - mid, item)
        self._size += 1

    def _remove_at(self, position: Position[T]) -> T:
        """Remove and return the element at an already resolved location."""
        node, offset = position.node, position.offset
        mid = self._capacity // 2
        is_last = node.next is self._tail

        if is_last and node.count == 1:
            item = node.remove_item(offset)
            self._unlink(node)
            logger.debug("Unlinked emptied last node")
        elif is_last or node.count > mid:
            # Count is taken before removal, so the node keeps at least mid
            item = node.remove_item(offset)
        else:
            item = node.remove_item(offset)
            successor = node.next
            if successor.count > mid:  # type: ignore[union-attr]
                node.append_item(successor.remove_item(0))  # type: ignore[union-attr]
                logger.debug("Borrowed one element from successor into %r", node)
            else:
                for moved in successor.items():  # type: ignore[union-attr]
                    node.append_item(moved)
                self._unlink(successor)  # type: ignore[arg-type]
                logger.debug("Merged successor into %r", node)

        self._size -= 1
        return item

    def _check_element(self, item: T | None) -> None:
        if item is None:
            raise InvalidArgumentError("None elements are not allowed")

    def _check_index(self, pos: int) -> int:
        """Validate an element index (negative counts from the end)."""
        if pos < 0:
            pos += self._size
        if pos < 0 or pos >= self._size:
            raise PositionOutOfBoundsError(f"Index {pos} out of range for size {self._size}")
        return pos

    # Public list operations

    def add(self, item: T) -> bool:
        """
        Append item at the end.

        Raises:
            InvalidArgumentError: If item is None.
        """
        self._check_element(item)
        self._add_at(self._find(self._size), item)
        return True

    def insert(self, pos: int, item: T) -> None:
        """
        Insert item before logical position pos.

        Raises:
            InvalidArgumentError: If item is None.
            PositionOutOfBoundsError: If pos is not in [0, size].
        """
        self._check_element(item)
        if pos < 0 or pos > self._size:
            raise PositionOutOfBoundsError(f"Position {pos} out of range for size {self._size}")
        self._add_at(self._find(pos), item)

    def remove(self, pos: int) -> T:
        """
        Remove and return the element at logical position pos.

        Raises:
            PositionOutOfBoundsError: If pos is not in [0, size).
        """
        if pos < 0 or pos >= self._size:
            raise PositionOutOfBoundsError(f"Position {pos} out of range for size {self._size}")
        return self._remove_at(self._find(pos))

    def get(self, pos: int) -> T:
        """Return the element at logical position pos."""
        if pos < 0 or pos >= self._size:
            raise PositionOutOfBoundsError(f"Position {pos} out of range for size {self._size}")
        return self._find(pos).item

    def set(self, pos: int, item: T) -> T:
        """Replace the element at pos in place and return the old one."""
        self._check_element(item)
        if pos < 0 or pos >= self._size:
            raise PositionOutOfBoundsError(f"Position {pos} out of range for size {self._size}")
        position = self._find(pos)
        old = position.item
        position.node.data[position.offset] = item
        return old

    def extend(self, iterable: Iterable[T]) -> None:
        """Append every element of iterable."""
        # Snapshot first; iterable may be this list
        for item in list(iterable):
            self.add(item)

    def clear(self) -> None:
        """Remove every element."""
        self._reset()

    def _reset(self) -> None:
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def iterator(self, start: int = 0) -> UnrolledListIterator[T]:
        """
        Return a bidirectional iterator whose next() yields position start.

        Raises:
            PositionOutOfBoundsError: If start is not in [0, size].
        """
        return UnrolledListIterator(self, start)

    def index(self, item: T) -> int:
        """Return the position of the first element equal to item."""
        for i, value in enumerate(self):
            if value == item:
                return i
        raise ValueError(f"{item!r} is not in list")

    def to_list(self) -> list[T]:
        return list(self)

    def nodes(self) -> list[tuple[T, ...]]:
        """Return the occupied contents of each node in chain order."""
        result: list[tuple[T, ...]] = []
        node = self._head.next
        while node is not self._tail:
            result.append(tuple(node.items()))  # type: ignore[union-attr]
            node = node.next  # type: ignore[union-attr]
        return result

    # Sorting

    def _drain(self) -> list[T]:
        """Copy the elements out through a forward iterator and empty the chain."""
        it = self.iterator()
        items = [it.next() for _ in range(self._size)]
        self._reset()
        return items

    def _rebuild(self, items: list[T]) -> None:
        for item in items:
            self.add(item)
        logger.debug("Rebuilt chain with %d elements", self._size)

    def sort(self, comparator: Comparator[T] | None = None) -> None:
        """
        Sort in non-decreasing order with an insertion sort.

        Args:
            comparator: Returns negative, zero or positive when its first
                argument orders before, equal to or after its second.
                Defaults to the elements' natural order.

        After sorting every node except possibly the last is full.
        """
        compare = comparator if comparator is not None else _natural_order
        items = self._drain()
        for i in range(1, len(items)):
            current = items[i]
            j = i - 1
            while j >= 0 and compare(items[j], current) > 0:
                items[j + 1] = items[j]
                j -= 1
            items[j + 1] = current
        self._rebuild(items)

    def sort_reverse(self) -> None:
        """Sort in non-increasing natural order with a bubble sort."""
        items = self._drain()
        for i in range(1, len(items)):
            swapped = False
            for j in range(len(items) - i):
                if items[j] < items[j + 1]:  # type: ignore[operator]
                    items[j], items[j + 1] = items[j + 1], items[j]
                    swapped = True
            if not swapped:
                break
        self._rebuild(items)

    # Diagnostics

    def render(self, cursor: UnrolledListIterator[T] | None = None) -> str:
        """
        Return the node structure as text, e.g. ``[(A, B, C, D), (E, -, -, -)]``.

        Empty slots are shown as ``-``. With a cursor, ``| `` precedes the
        element at its next index, or `` |`` follows the last element when the
        cursor is at the end.
        """
        position = cursor.next_index() if cursor is not None else -1
        count = 0
        groups: list[str] = []
        node = self._head.next
        while node is not self._tail:
            slots: list[str] = []
            for i in range(self._capacity):
                if i >= node.count:  # type: ignore[union-attr]
                    slots.append("-")
                    continue
                text = str(node.data[i])  # type: ignore[union-attr]
                if position == count:
                    text = "| " + text
                count += 1
                if position == self._size and count == self._size:
                    text += " |"
                slots.append(text)
            groups.append("(" + ", ".join(slots) + ")")
            node = node.next  # type: ignore[union-attr]
        return "[" + ", ".join(groups) + "]"

    # Python sequence protocol

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._tail:
            yield from node.items()  # type: ignore[union-attr]
            node = node.next  # type: ignore[union-attr]

    def __reversed__(self) -> Iterator[T]:
        node = self._tail.prev
        while node is not self._head:
            yield from reversed(node.items())  # type: ignore[union-attr]
            node = node.prev  # type: ignore[union-attr]

    def __contains__(self, item: object) -> bool:
        return any(value == item for value in self)

    def __getitem__(self, pos: int) -> T:
        return self.get(self._check_index(pos))

    def __setitem__(self, pos: int, item: T) -> None:
        self.set(self._check_index(pos), item)

    def __delitem__(self, pos: int) -> None:
        self.remove(self._check_index(pos))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnrolledList):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UnrolledList({self.to_list()!r}, node_capacity={self._capacity})"
