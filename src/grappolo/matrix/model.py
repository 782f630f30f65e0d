"""Value types for the sparse similarity matrix.

The matrix has one row per element.  Each row only holds scores for
siblings whose similarity reached the matrix's ``min_similarity``, so
rows stay short and lookups scan them linearly.  Every type here is
frozen: deriving a new matrix (``spin_off``) never touches the old one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from grappolo.errors import IndexOutOfRangeError, InvalidInputError


@dataclass(frozen=True)
class Score:
    """One edge endpoint as seen from a row: sibling index and similarity."""

    sibling_index: int
    similarity: float


def _score_order(score: Score) -> tuple[float, int]:
    """Descending similarity, then ascending sibling index."""
    return (-score.similarity, score.sibling_index)


@dataclass(frozen=True)
class Row:
    """Sparse adjacency list for one element, sorted by descending similarity."""

    scores: tuple[Score, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", tuple(sorted(self.scores, key=_score_order)))

    @classmethod
    def from_scores(cls, scores: Iterable[Score]) -> Row:
        return cls(tuple(scores))

    def __len__(self) -> int:
        return len(self.scores)

    def __iter__(self) -> Iterator[Score]:
        return iter(self.scores)

    def __getitem__(self, sibling_index: int) -> float:
        """Similarity to ``sibling_index``, or 0.0 if no edge was recorded."""
        for score in self.scores:
            if score.sibling_index == sibling_index:
                return score.similarity
        return 0.0

    @property
    def weight(self) -> float:
        """Sum of this row's similarities (weighted degree)."""
        return sum(score.similarity for score in self.scores)

    def cut_at(self, similarity: float) -> list[int]:
        """Sibling indices whose similarity is at least ``similarity``."""
        return [s.sibling_index for s in self.scores if s.similarity >= similarity]

    def ranked_siblings(self, excluding: set[int] | frozenset[int] = frozenset()) -> list[int]:
        """Sibling indices by descending similarity, skipping ``excluding``."""
        return [
            score.sibling_index
            for score in self.scores
            if score.sibling_index not in excluding
        ]


def distinct_similarities(values: Iterable[float]) -> tuple[float, ...]:
    """Exact-value deduplicated similarities in ascending order.

    Callers only pass values that passed a ``> 0`` filter, which NaN
    never does, so Python's float ordering is total here.
    """
    return tuple(sorted(set(values)))


@dataclass(frozen=True)
class SimilarityMatrix:
    """A sparse, symmetric similarity matrix.

    ``matrix[i][j] == matrix[j][i]`` for every pair of indices; pairs
    without a recorded edge read as 0.0.

    Attributes:
        rows: One ``Row`` per element, indexed by element position.
        min_similarity: Floor used when this matrix was built or derived.
        similarity_values: Ascending, distinct similarities present.
    """

    rows: tuple[Row, ...]
    min_similarity: float
    similarity_values: tuple[float, ...]

    @property
    def size(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[self._check_index(index)]

    def similarity(self, row_index: int, column_index: int) -> float:
        self._check_index(column_index)
        return self[row_index][column_index]

    @property
    def edge_count(self) -> int:
        return sum(len(row) for row in self.rows) // 2

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield every edge once as ``(i, j, similarity)`` with ``i < j``."""
        for row_index, row in enumerate(self.rows):
            for score in row:
                if row_index < score.sibling_index:
                    yield row_index, score.sibling_index, score.similarity

    def spin_off(self, indices: Sequence[int], min_similarity: float) -> SimilarityMatrix:
        """Project this matrix onto ``indices`` with a new similarity floor.

        The derived matrix has ``len(indices)`` rows; position ``k`` holds
        the element at ``indices[k]`` of this matrix.  An edge survives
        only if both endpoints are in ``indices`` and its similarity is
        at least ``min_similarity``.

        Raises:
            InvalidInputError: If ``indices`` is empty or has duplicates.
            IndexOutOfRangeError: If an index is outside this matrix.
        """
        if not indices:
            raise InvalidInputError("Cannot spin off a matrix from an empty index list")
        if not 0.0 <= min_similarity <= 1.0:
            raise InvalidInputError(f"min_similarity must be in [0, 1], got {min_similarity}")

        new_positions: dict[int, int] = {}
        for new_index, old_index in enumerate(indices):
            self._check_index(old_index)
            if old_index in new_positions:
                raise InvalidInputError(f"Duplicate index {old_index} in spin-off indices")
            new_positions[old_index] = new_index

        rows = tuple(
            Row.from_scores(
                Score(new_positions[score.sibling_index], score.similarity)
                for score in self.rows[old_index]
                if score.sibling_index in new_positions and score.similarity >= min_similarity
            )
            for old_index in indices
        )

        return SimilarityMatrix(
            rows=rows,
            min_similarity=min_similarity,
            similarity_values=distinct_similarities(
                score.similarity for row in rows for score in row
            ),
        )

    def rank_by_weight(self) -> list[int]:
        """All indices by descending degree, then descending weighted degree.

        Ties on both keys fall back to ascending index, so the order is
        fully deterministic.
        """
        return sorted(
            range(self.size),
            key=lambda index: (-len(self.rows[index]), -self.rows[index].weight, index),
        )

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.rows):
            raise IndexOutOfRangeError(index, len(self.rows))
        return index
