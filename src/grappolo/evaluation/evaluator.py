"""Cluster evaluators: score a clustering result and compare scores.

An evaluator only needs two methods, so any object providing them can
be used to rank several clustering runs (for example one per threshold).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from grappolo.clustering import ClusteringResult
from grappolo.evaluation.metrics import compute_pairwise_metrics

ClusterEvaluation = float


class ClusterEvaluator(Protocol):
    def evaluate(self, result: ClusteringResult) -> ClusterEvaluation:
        """Score a clustering result."""
        ...

    def best_of(self, first: ClusterEvaluation, second: ClusterEvaluation) -> bool:
        """Return ``True`` if ``first`` is a better score than ``second``."""
        ...


class PairwiseF1Evaluator:
    """Pairwise F1 against known ground-truth labels (higher is better)."""

    def __init__(self, ground_truth_labels: Sequence[object]) -> None:
        self.ground_truth_labels = list(ground_truth_labels)

    def evaluate(self, result: ClusteringResult) -> ClusterEvaluation:
        return compute_pairwise_metrics(result.clusters, self.ground_truth_labels).f1

    def best_of(self, first: ClusterEvaluation, second: ClusterEvaluation) -> bool:
        return first > second


class MeanIntraSimilarityEvaluator:
    """Mean similarity of the matrix edges kept inside a cluster.

    Needs no ground truth.  Edges between clusters and singleton clusters
    contribute nothing; a result with no intra-cluster edge scores 0.0.
    """

    def evaluate(self, result: ClusteringResult) -> ClusterEvaluation:
        labels = result.labels()
        intra = [
            similarity
            for i, j, similarity in result.matrix.edges()
            if labels[i] == labels[j]
        ]
        if not intra:
            return 0.0
        return sum(intra) / len(intra)

    def best_of(self, first: ClusterEvaluation, second: ClusterEvaluation) -> bool:
        return first > second
