"""Recursive partitioning of a similarity matrix into disjoint clusters."""

from .clusterer import MIN_REFINEMENT_SIZE, Cluster, Clusterer, ClusteringResult, cluster

__all__ = ["cluster", "Cluster", "Clusterer", "ClusteringResult", "MIN_REFINEMENT_SIZE"]
