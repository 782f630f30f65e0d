"""Helpers shared by several test modules."""

from __future__ import annotations

from grappolo.matrix import SimilarityMatrix, build_similarity_matrix


def matrix_from_edges(
    size: int,
    edges: dict[tuple[int, int], float],
    min_similarity: float = 0.0,
) -> SimilarityMatrix:
    """Build a matrix over ``range(size)`` whose similarities come from ``edges``."""

    def lookup(a: int, b: int) -> float:
        return edges.get((a, b), edges.get((b, a), 0.0))

    return build_similarity_matrix(list(range(size)), min_similarity, list(edges), lookup)


def assert_partition(clusters: list[list[int]], size: int) -> None:
    """Clusters are non-empty, pairwise disjoint and cover ``range(size)``."""
    assert all(len(c) > 0 for c in clusters)
    flat = [i for c in clusters for i in c]
    assert len(flat) == len(set(flat))
    assert set(flat) == set(range(size))


def as_sets(clusters: list[list[int]]) -> set[frozenset[int]]:
    """Clusters as a set of sets, ignoring order."""
    return {frozenset(c) for c in clusters}
