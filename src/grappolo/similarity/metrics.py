"""String similarity metrics built on RapidFuzz.

A similarity is a float in [0, 1]: ``0.0`` means unrelated, ``1.0``
means identical.  Metrics must be pure and symmetric; the matrix builder
calls them concurrently and evaluates each pair in one direction only.
"""

from __future__ import annotations

from typing import Any, Callable

from rapidfuzz import fuzz
from rapidfuzz.distance import DamerauLevenshtein

from grappolo.errors import InvalidInputError

Similarity = float

SimilarityMetric = Callable[[Any, Any], Similarity]


def normalized_damerau_levenshtein(a: str, b: str) -> Similarity:
    """Return ``1 - distance / max(len(a), len(b))``.

    Uses the unrestricted Damerau-Levenshtein distance (insertions,
    deletions, substitutions and adjacent transpositions).  Two empty
    strings are identical.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - DamerauLevenshtein.distance(a, b) / longest


def token_sort_similarity(a: str, b: str) -> Similarity:
    """Word-order-insensitive similarity for multi-word strings.

    Strings are case-folded before comparison.  Returns 0.0 if either
    side is blank.
    """
    a = (a or "").strip().casefold()
    b = (b or "").strip().casefold()
    if not a or not b:
        return 0.0
    return fuzz.token_sort_ratio(a, b) / 100.0


METRICS: dict[str, SimilarityMetric] = {
    "damerau_levenshtein": normalized_damerau_levenshtein,
    "token_sort": token_sort_similarity,
}


def get_metric(name: str) -> SimilarityMetric:
    """Look up a metric by its configuration name."""
    try:
        return METRICS[name]
    except KeyError:
        raise InvalidInputError(
            f"Unknown similarity metric {name!r}; expected one of {sorted(METRICS)}"
        ) from None
