"""Shared test fixtures."""

from __future__ import annotations

import pytest

from grappolo.matrix import SimilarityMatrix, build_similarity_matrix
from grappolo.pairs import exhaustive_pairs
from grappolo.similarity import normalized_damerau_levenshtein

NAMES = [
    "alejandro", "alejo",
    "martha", "marta",
    "marlene", "marleny", "malrene",
    "ricardo",
]


@pytest.fixture
def names() -> list[str]:
    """Eight given names forming three similarity groups plus an outlier."""
    return list(NAMES)


@pytest.fixture
def names_matrix(names) -> SimilarityMatrix:
    """Exhaustive Damerau-Levenshtein matrix over ``names`` at floor 0.0."""
    return build_similarity_matrix(
        names, 0.0, exhaustive_pairs(len(names)), normalized_damerau_levenshtein
    )
