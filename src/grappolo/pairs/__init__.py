"""Candidate pair suppliers.

A supplier is anything iterable over ``(i, j)`` index pairs with
``i < j``.  Only supplied pairs are ever scored, so a supplier trades
recall for speed: an edge it never emits is invisible to clustering.
"""

from grappolo.pairs.base import IndexPair, PairStats, PairSupplier, pair_stats
from grappolo.pairs.exhaustive import exhaustive_pairs
from grappolo.pairs.ngrams import ngram_pairs, ngrams

__all__ = [
    "exhaustive_pairs",
    "IndexPair",
    "ngram_pairs",
    "ngrams",
    "pair_stats",
    "PairStats",
    "PairSupplier",
]
