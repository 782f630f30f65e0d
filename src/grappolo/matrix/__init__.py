"""Sparse, symmetric similarity matrix and its builder."""

from grappolo.matrix.builder import build_similarity_matrix
from grappolo.matrix.model import Row, Score, SimilarityMatrix

__all__ = ["build_similarity_matrix", "Row", "Score", "SimilarityMatrix"]
