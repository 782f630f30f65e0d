"""Greedy, recursively refined clustering over a similarity matrix.

Indices are visited in ``rank_by_weight`` order, so densely connected
elements claim their neighbourhoods first.  Each unvisited index seeds
a cluster made of itself plus all of its still-unvisited siblings.
Small clusters, and clusters spanning the whole matrix, are committed
as they are; anything in between is re-clustered on a matrix restricted
to its own members and replaced by the resulting sub-clusters.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from grappolo.matrix.model import SimilarityMatrix

logger = structlog.get_logger()

Cluster = list[int]

# Clusters smaller than this are committed without refinement
MIN_REFINEMENT_SIZE = 3


@dataclass
class ClusteringResult:
    """Result of a clustering run.

    Attributes:
        clusters: Disjoint, non-empty clusters covering every matrix index.
        matrix: The similarity matrix the clusters were computed from.
    """

    clusters: list[Cluster]
    matrix: SimilarityMatrix

    @property
    def cluster_count(self) -> int:
        return len(self.clusters)

    @property
    def singleton_count(self) -> int:
        return sum(1 for c in self.clusters if len(c) == 1)

    def labels(self) -> list[int]:
        """Cluster number for every matrix index, in index order."""
        labels = [-1] * self.matrix.size
        for label, members in enumerate(self.clusters):
            for index in members:
                labels[index] = label
        return labels


class Clusterer:
    """Single-use traversal state for clustering one matrix.

    Use ``Clusterer.cluster(matrix)``; every recursive refinement runs on
    a fresh instance.
    """

    def __init__(self) -> None:
        self.clusters_so_far: list[Cluster] = []
        self.visited_so_far: set[int] = set()
        self.current_cluster: Cluster = []

    @classmethod
    def cluster(cls, matrix: SimilarityMatrix) -> ClusteringResult:
        """Partition all indices of ``matrix`` into clusters."""
        clusters = cls().collect_clusters(matrix)
        logger.debug(
            "matrix_clustered",
            size=matrix.size,
            clusters=len(clusters),
            min_similarity=matrix.min_similarity,
        )
        return ClusteringResult(clusters=clusters, matrix=matrix)

    def collect_clusters(self, matrix: SimilarityMatrix) -> list[Cluster]:
        for index in matrix.rank_by_weight():
            if index in self.visited_so_far:
                continue

            self._new_cluster(index)
            for sibling in matrix[index].ranked_siblings(self.visited_so_far):
                self._add_to_cluster(sibling)

            size = len(self.current_cluster)
            if size < MIN_REFINEMENT_SIZE or size == matrix.size:
                self._commit_current_cluster()
            else:
                sub_matrix = matrix.spin_off(self.current_cluster, 0.0)
                inner_clusters = Clusterer().collect_clusters(sub_matrix)
                logger.debug(
                    "cluster_refined",
                    size=size,
                    sub_clusters=len(inner_clusters),
                )
                self._commit_inner_clusters(inner_clusters)

        return list(self.clusters_so_far)

    def _new_cluster(self, index: int) -> None:
        self.current_cluster = []
        self._add_to_cluster(index)

    def _add_to_cluster(self, index: int) -> None:
        self.current_cluster.append(index)
        self.visited_so_far.add(index)

    def _commit_current_cluster(self) -> None:
        self.clusters_so_far.append(self.current_cluster)
        self.current_cluster = []

    def _commit_inner_clusters(self, inner_clusters: list[Cluster]) -> None:
        """Map sub-clusters from the derived matrix back to this matrix's indices."""
        for inner in inner_clusters:
            self.clusters_so_far.append([self.current_cluster[i] for i in inner])
        self.current_cluster = []


def cluster(matrix: SimilarityMatrix) -> ClusteringResult:
    """Cluster a similarity matrix.  See ``Clusterer``."""
    return Clusterer.cluster(matrix)
