"""Grappolo: cluster elements by pairwise similarity.

A sparse, symmetric similarity matrix is built from candidate index
pairs and a similarity metric, then partitioned by a greedy traversal
that recursively refines clusters too large to accept as-is.
"""

from grappolo.clustering import Clusterer, ClusteringResult, cluster
from grappolo.errors import GrappoloError, IndexOutOfRangeError, InvalidInputError
from grappolo.matrix import Row, Score, SimilarityMatrix, build_similarity_matrix

__all__ = [
    "build_similarity_matrix",
    "cluster",
    "Clusterer",
    "ClusteringResult",
    "GrappoloError",
    "IndexOutOfRangeError",
    "InvalidInputError",
    "Row",
    "Score",
    "SimilarityMatrix",
]
