"""N-gram blocking pair supplier.

Pairs strings that share at least one character n-gram.  Strings
shorter than the n-gram length produce no n-grams, appear in no pairs
and therefore always end up as singleton clusters.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from grappolo.errors import InvalidInputError
from grappolo.pairs.base import IndexPair


def ngrams(string: str, ngram_length: int) -> list[str]:
    """Split a string into its overlapping n-grams, in order.

    Duplicates are kept: ``ngrams("aaa", 2) == ["aa", "aa"]``.
    """
    return [
        string[start:start + ngram_length]
        for start in range(len(string) - ngram_length + 1)
    ]


def ngram_pairs(strings: Sequence[str], ngram_length: int) -> Iterator[IndexPair]:
    """Generate index pairs of strings sharing one or more n-grams.

    Pairs use canonical ordering (``i < j``) and are deduplicated across
    n-grams, so strings sharing several n-grams produce the pair once.
    Pairs are emitted in sorted order.

    Raises:
        InvalidInputError: If ``ngram_length`` is not positive.
    """
    if ngram_length < 1:
        raise InvalidInputError(f"ngram_length must be positive, got {ngram_length}")

    # Blocking index: n-gram -> indices of strings containing it
    ngram_index: dict[str, set[int]] = {}
    for index, string in enumerate(strings):
        for gram in ngrams(string, ngram_length):
            ngram_index.setdefault(gram, set()).add(index)

    seen: set[IndexPair] = set()
    for indices in ngram_index.values():
        if len(indices) < 2:
            continue
        ordered = sorted(indices)
        for a in range(len(ordered)):
            for b in range(a + 1, len(ordered)):
                seen.add((ordered[a], ordered[b]))

    return iter(sorted(seen))
