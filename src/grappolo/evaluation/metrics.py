"""Pairwise evaluation metrics for clustering results.

Computes precision, recall, and F1 score by comparing the index pairs
placed in the same cluster against a ground-truth partition.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations

from grappolo.errors import InvalidInputError


@dataclass
class PairwiseMetrics:
    """Container for pairwise evaluation metrics."""

    precision: float
    recall: float
    f1: float
    true_positives: int
    false_positives: int
    false_negatives: int
    total_ground_truth_same: int
    total_predicted_same: int


def co_clustered_pairs(clusters: Iterable[Sequence[int]]) -> set[tuple[int, int]]:
    """All canonically ordered ``(i, j)`` pairs that share a cluster."""
    pairs: set[tuple[int, int]] = set()
    for members in clusters:
        pairs.update(combinations(sorted(members), 2))
    return pairs


def clusters_from_labels(labels: Sequence[object]) -> list[list[int]]:
    """Group indices by label, in order of first appearance."""
    groups: dict[object, list[int]] = {}
    for index, label in enumerate(labels):
        groups.setdefault(label, []).append(index)
    return list(groups.values())


def compute_pairwise_metrics(
    predicted_clusters: Iterable[Sequence[int]],
    ground_truth_labels: Sequence[object],
) -> PairwiseMetrics:
    """Compute pairwise precision, recall, and F1 for a clustering.

    Args:
        predicted_clusters: Clusters of element indices.
        ground_truth_labels: True label for every element index; elements
            sharing a label belong together.

    Returns:
        PairwiseMetrics with precision, recall, F1, and confusion counts.
    """
    predicted_clusters = list(predicted_clusters)
    predicted_size = sum(len(members) for members in predicted_clusters)
    if predicted_size != len(ground_truth_labels):
        raise InvalidInputError(
            f"Clusters cover {predicted_size} elements but "
            f"{len(ground_truth_labels)} labels were given"
        )

    pred = co_clustered_pairs(predicted_clusters)
    gt_same = co_clustered_pairs(clusters_from_labels(ground_truth_labels))

    tp = len(pred & gt_same)
    fp = len(pred - gt_same)
    fn = len(gt_same - pred)

    # Perfect singleton partitions have no pairs at all; score them as exact
    if not pred and not gt_same:
        precision = recall = f1 = 1.0
    else:
        precision = tp / (tp + fp) if (tp + fp) > 0 else 0.0
        recall = tp / (tp + fn) if (tp + fn) > 0 else 0.0
        f1 = 2 * precision * recall / (precision + recall) if (precision + recall) > 0 else 0.0

    return PairwiseMetrics(
        precision=precision,
        recall=recall,
        f1=f1,
        true_positives=tp,
        false_positives=fp,
        false_negatives=fn,
        total_ground_truth_same=len(gt_same),
        total_predicted_same=len(pred),
    )


def format_metrics(result: PairwiseMetrics) -> str:
    """Format metrics for terminal display."""
    lines = [
        "",
        "=" * 50,
        "  Clustering Evaluation",
        "=" * 50,
        "",
        f"  Precision:  {result.precision:.4f}",
        f"  Recall:     {result.recall:.4f}",
        f"  F1 Score:   {result.f1:.4f}",
        "",
        f"  True Positives:   {result.true_positives}",
        f"  False Positives:  {result.false_positives}",
        f"  False Negatives:  {result.false_negatives}",
        "",
        f"  Ground Truth Same: {result.total_ground_truth_same}",
        f"  Predicted Same:    {result.total_predicted_same}",
        "=" * 50,
        "",
    ]
    return "\n".join(lines)
