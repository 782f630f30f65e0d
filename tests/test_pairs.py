"""Tests for the candidate pair suppliers."""

import pytest

from grappolo.errors import InvalidInputError
from grappolo.pairs import (
    PairSupplier,
    exhaustive_pairs,
    ngram_pairs,
    ngrams,
    pair_stats,
)


class TestExhaustivePairs:
    def test_yields_all_pairs_in_row_major_order(self):
        assert list(exhaustive_pairs(3)) == [(0, 1), (0, 2), (1, 2)]

    def test_pair_count(self):
        assert len(list(exhaustive_pairs(42))) == 42 * 41 // 2

    def test_singleton_yields_no_pairs(self):
        """A single element is valid input that simply has nothing to compare."""
        assert list(exhaustive_pairs(1)) == []

    def test_rejects_zero_size(self):
        with pytest.raises(InvalidInputError):
            exhaustive_pairs(0)

    def test_satisfies_supplier_protocol(self):
        assert isinstance(exhaustive_pairs(3), PairSupplier)


class TestNgrams:
    def test_bigrams(self):
        assert ngrams("rustinomicon", 2) == [
            "ru", "us", "st", "ti", "in", "no", "om", "mi", "ic", "co", "on",
        ]

    def test_trigrams(self):
        assert ngrams("rustinomicon", 3) == [
            "rus", "ust", "sti", "tin", "ino", "nom", "omi", "mic", "ico", "con",
        ]

    def test_duplicates_kept(self):
        assert ngrams("aaa", 2) == ["aa", "aa"]

    def test_short_string_has_no_ngrams(self):
        assert ngrams("a", 2) == []
        assert ngrams("", 2) == []

    def test_string_of_exact_length(self):
        assert ngrams("ab", 2) == ["ab"]


class TestNgramPairs:
    def test_pairs_sharing_a_bigram(self):
        """Only strings with a common bigram are paired."""
        names = ["alejandro", "marlene", "martha", "ricardo"]
        pairs = list(ngram_pairs(names, 2))

        assert set(pairs) == {(0, 1), (1, 2), (1, 3), (2, 3)}
        assert (0, 2) not in pairs
        assert (0, 3) not in pairs

    def test_each_pair_emitted_once(self):
        """Strings sharing many n-grams still yield a single pair."""
        pairs = list(ngram_pairs(["marlene", "marleny"], 2))
        assert pairs == [(0, 1)]

    def test_pairs_are_sorted_and_canonical(self):
        pairs = list(ngram_pairs(["xab", "yab", "zab"], 2))
        assert pairs == [(0, 1), (0, 2), (1, 2)]

    def test_short_strings_are_never_paired(self):
        pairs = list(ngram_pairs(["a", "ab", "ab"], 2))
        assert pairs == [(1, 2)]

    def test_rejects_non_positive_length(self):
        with pytest.raises(InvalidInputError):
            ngram_pairs(["ab", "ab"], 0)


class TestPairStats:
    def test_reduction(self):
        stats = pair_stats(5, 4)
        assert stats.total_possible_pairs == 10
        assert stats.supplied_pairs == 4
        assert stats.reduction_pct == pytest.approx(60.0)

    def test_single_element_has_no_reduction(self):
        stats = pair_stats(1, 0)
        assert stats.total_possible_pairs == 0
        assert stats.reduction_pct == 0.0
