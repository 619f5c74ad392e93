"""unrolledlist - Unrolled linked list keeping every node but the last at least half full."""

from unrolledlist.core import UnrolledList
from unrolledlist.errors import (
    IllegalCursorStateError,
    InvalidArgumentError,
    NoSuchElementError,
    PositionOutOfBoundsError,
    UnrolledListError,
)
from unrolledlist.iterator import UnrolledListIterator
from unrolledlist.types import DEFAULT_NODE_CAPACITY, Comparator

__version__ = "0.0.1"

__all__ = [
    "UnrolledList",
    "UnrolledListIterator",
    "UnrolledListError",
    "InvalidArgumentError",
    "PositionOutOfBoundsError",
    "IllegalCursorStateError",
    "NoSuchElementError",
    "Comparator",
    "DEFAULT_NODE_CAPACITY",
]
