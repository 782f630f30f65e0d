"""Shared types for candidate pair suppliers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

IndexPair = tuple[int, int]


@runtime_checkable
class PairSupplier(Protocol):
    """Anything that can be iterated for ``(i, j)`` pairs, ``i < j``.

    Plain generators, lists and the strategy functions in this package
    all satisfy the protocol.
    """

    def __iter__(self) -> Iterator[IndexPair]:
        ...


@dataclass
class PairStats:
    """Statistics about candidate pair generation.

    Attributes:
        total_elements: Number of input elements.
        total_possible_pairs: Pairs an exhaustive supplier would emit.
        supplied_pairs: Distinct pairs actually supplied.
        reduction_pct: Percentage of pairs eliminated by blocking.
    """

    total_elements: int
    total_possible_pairs: int
    supplied_pairs: int
    reduction_pct: float


def pair_stats(size: int, supplied_pairs: int) -> PairStats:
    """Compare a supplier's output against the exhaustive baseline."""
    total_possible = size * (size - 1) // 2
    reduction = (1 - supplied_pairs / total_possible) * 100 if total_possible > 0 else 0.0
    return PairStats(
        total_elements=size,
        total_possible_pairs=total_possible,
        supplied_pairs=supplied_pairs,
        reduction_pct=reduction,
    )
