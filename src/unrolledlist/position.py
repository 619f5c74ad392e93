"""Resolved location of a logical index inside the node chain."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from unrolledlist.node import Node

T = TypeVar("T")


@dataclass(frozen=True)
class Position(Generic[T]):
    """A node and an offset within it; the append point is (tail, 0)."""

    node: Node[T]
    offset: int

    @property
    def item(self) -> T:
        """The element stored at this location."""
        return self.node.data[self.offset]  # type: ignore[return-value]
