"""Similarity matrix construction.

Scores every candidate pair with the caller's metric, keeps pairs at or
above the similarity floor and merges them symmetrically into rows.
Scoring is a data-parallel map (joblib); the merge into rows runs
single-threaded once every score is in.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import structlog
from joblib import Parallel, delayed

from grappolo.errors import IndexOutOfRangeError, InvalidInputError
from grappolo.matrix.model import Row, Score, SimilarityMatrix, distinct_similarities
from grappolo.pairs.base import IndexPair
from grappolo.similarity.metrics import SimilarityMetric

logger = structlog.get_logger()

DEFAULT_CHUNK_SIZE = 10_000


def build_similarity_matrix(
    elements: Sequence[Any],
    min_similarity: float,
    pairs: Iterable[IndexPair],
    metric: SimilarityMetric,
    *,
    n_jobs: int = 1,
    backend: str = "threading",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> SimilarityMatrix:
    """Build a sparse similarity matrix over ``elements``.

    A pair is retained only if its similarity is positive and at least
    ``min_similarity``.  All input is validated before any scoring
    starts, so a failed build never leaves a partial matrix behind.

    Args:
        elements: The elements to be clustered, referred to by index.
        min_similarity: Similarity floor in [0, 1].
        pairs: Candidate ``(i, j)`` index pairs.  Reversed pairs are
            canonicalized and duplicates are scored once.
        metric: Pure, symmetric similarity function.
        n_jobs: Number of joblib workers used for scoring.
        backend: joblib backend (``"threading"``, ``"loky"``, ...).
        chunk_size: Pairs scored per joblib task.

    Returns:
        The immutable ``SimilarityMatrix``.

    Raises:
        InvalidInputError: If ``elements`` is empty, ``min_similarity``
            is outside [0, 1] or a self-pair ``(i, i)`` is supplied.
        IndexOutOfRangeError: If a pair refers to a missing element.
    """
    size = len(elements)
    if size == 0:
        raise InvalidInputError("Cannot create matrix from empty element sequence")
    if not 0.0 <= min_similarity <= 1.0:
        raise InvalidInputError(f"min_similarity must be in [0, 1], got {min_similarity}")
    if chunk_size < 1:
        raise InvalidInputError(f"chunk_size must be positive, got {chunk_size}")

    candidate_pairs = _validated_pairs(pairs, size)
    similarities = _score_pairs(elements, candidate_pairs, metric, n_jobs, backend, chunk_size)

    # Sequential symmetric merge
    row_scores: list[list[Score]] = [[] for _ in range(size)]
    retained: list[float] = []
    for (row_index, column_index), similarity in zip(candidate_pairs, similarities):
        if similarity > 0.0 and similarity >= min_similarity:
            row_scores[row_index].append(Score(column_index, similarity))
            row_scores[column_index].append(Score(row_index, similarity))
            retained.append(similarity)

    matrix = SimilarityMatrix(
        rows=tuple(Row.from_scores(scores) for scores in row_scores),
        min_similarity=min_similarity,
        similarity_values=distinct_similarities(retained),
    )

    logger.info(
        "matrix_built",
        size=size,
        scored_pairs=len(candidate_pairs),
        edges=len(retained),
        distinct_values=len(matrix.similarity_values),
        min_similarity=min_similarity,
    )
    return matrix


def _validated_pairs(pairs: Iterable[IndexPair], size: int) -> list[IndexPair]:
    """Materialize, canonicalize and deduplicate candidate pairs."""
    seen: set[IndexPair] = set()
    ordered: list[IndexPair] = []
    duplicates = 0

    for i, j in pairs:
        if i == j:
            raise InvalidInputError(f"Self-pair ({i}, {j}) is not a valid candidate pair")
        for index in (i, j):
            if not 0 <= index < size:
                raise IndexOutOfRangeError(index, size, what="pair index")
        pair = (i, j) if i < j else (j, i)
        if pair in seen:
            duplicates += 1
            continue
        seen.add(pair)
        ordered.append(pair)

    if duplicates:
        logger.debug("duplicate_pairs_dropped", count=duplicates)
    return ordered


def _score_chunk(
    elements: Sequence[Any],
    metric: SimilarityMetric,
    chunk: list[IndexPair],
) -> list[float]:
    return [metric(elements[i], elements[j]) for i, j in chunk]


def _score_pairs(
    elements: Sequence[Any],
    pairs: list[IndexPair],
    metric: SimilarityMetric,
    n_jobs: int,
    backend: str,
    chunk_size: int,
) -> list[float]:
    """Score pairs in chunks; results come back in input order."""
    if not pairs:
        return []

    chunks = [pairs[i : i + chunk_size] for i in range(0, len(pairs), chunk_size)]
    results = Parallel(n_jobs=n_jobs, backend=backend)(
        delayed(_score_chunk)(elements, metric, chunk) for chunk in chunks
    )

    similarities: list[float] = []
    for chunk_result in results:
        similarities.extend(chunk_result)
    return similarities
