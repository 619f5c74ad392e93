"""Exception classes for unrolledlist."""


class UnrolledListError(Exception):
    """Base exception for all unrolledlist errors."""


class InvalidArgumentError(UnrolledListError, ValueError):
    """Raised for a None element or a node capacity that is not a positive even integer."""


class PositionOutOfBoundsError(UnrolledListError, IndexError):
    """Raised when a logical position is outside the range valid for the operation."""


class IllegalCursorStateError(UnrolledListError, RuntimeError):
    """Raised when set() or delete() is called on an iterator without a commit point."""


class NoSuchElementError(UnrolledListError, StopIteration):
    """Raised when an iterator is advanced past the last or first element."""
