"""Exception types raised by grappolo.

Both concrete errors also derive from the matching builtin
(``ValueError`` / ``IndexError``) so callers can catch them either way.
"""


class GrappoloError(Exception):
    """Base class for all grappolo errors."""


class InvalidInputError(GrappoloError, ValueError):
    """Input rejected before any work started (empty elements, self-pairs, ...)."""


class IndexOutOfRangeError(GrappoloError, IndexError):
    """An element index falls outside the matrix it refers to."""

    def __init__(self, index: int, size: int, what: str = "index") -> None:
        super().__init__(f"{what} {index} out of range for matrix of size {size}")
        self.index = index
        self.size = size
