"""Exhaustive (cartesian) pair supplier."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import combinations

from grappolo.errors import InvalidInputError
from grappolo.pairs.base import IndexPair


def exhaustive_pairs(size: int) -> Iterator[IndexPair]:
    """Yield every ``(i, j)`` with ``0 <= i < j < size`` in row-major order.

    A single element yields no pairs.

    Raises:
        InvalidInputError: If ``size`` is not positive.
    """
    if size < 1:
        raise InvalidInputError(f"size must be positive, got {size}")
    return combinations(range(size), 2)
