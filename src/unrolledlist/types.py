"""Type definitions for unrolledlist."""

from typing import Callable, TypeAlias, TypeVar

# Element type
T = TypeVar("T")

# Pairwise ordering: negative, zero or positive like a three-way compare
Comparator: TypeAlias = Callable[[T, T], int]

# Node capacity used when none is given
DEFAULT_NODE_CAPACITY = 4
