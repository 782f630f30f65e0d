"""Similarity metrics -- pure, symmetric functions returning a value in [0, 1]."""

from grappolo.similarity.metrics import (
    METRICS,
    Similarity,
    SimilarityMetric,
    get_metric,
    normalized_damerau_levenshtein,
    token_sort_similarity,
)

__all__ = [
    "get_metric",
    "METRICS",
    "normalized_damerau_levenshtein",
    "Similarity",
    "SimilarityMetric",
    "token_sort_similarity",
]
