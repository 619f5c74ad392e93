"""Fixed-capacity array-backed node of an unrolled linked list."""

from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """
    A node holding up to ``capacity`` elements.

    Slots ``[0, count)`` are occupied and contiguous; slots
    ``[count, capacity)`` hold None.
    """

    __slots__ = ("data", "count", "prev", "next")

    def __init__(self, capacity: int) -> None:
        self.data: list[T | None] = [None] * capacity
        self.count = 0
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None

    @property
    def capacity(self) -> int:
        return len(self.data)

    @property
    def is_full(self) -> bool:
        return self.count == len(self.data)

    def append_item(self, item: T) -> None:
        """Store item at the first free slot. Precondition: not full."""
        self.data[self.count] = item
        self.count += 1

    def insert_item(self, offset: int, item: T) -> None:
        """Store item at offset, shifting later elements right. Precondition: not full."""
        for i in range(self.count - 1, offset - 1, -1):
            self.data[i + 1] = self.data[i]
        self.data[offset] = item
        self.count += 1

    def remove_item(self, offset: int) -> T:
        """Remove and return the element at offset, shifting later elements left."""
        item = self.data[offset]
        for i in range(offset + 1, self.count):
            self.data[i - 1] = self.data[i]
        self.count -= 1
        self.data[self.count] = None
        return item  # type: ignore[return-value]

    def items(self) -> list[T]:
        """Return the occupied slots in order."""
        return self.data[: self.count]  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"Node({self.items()!r}, capacity={self.capacity})"
