"""Clustering pipeline: candidate pairs -> similarity matrix -> clusters.

Pure functions over in-memory elements; file handling lives in the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from grappolo.clustering import Clusterer, ClusteringResult
from grappolo.config.clustering import ClusteringConfig, PairsConfig
from grappolo.matrix import SimilarityMatrix, build_similarity_matrix
from grappolo.pairs import IndexPair, exhaustive_pairs, ngram_pairs, pair_stats
from grappolo.similarity import get_metric

logger = structlog.get_logger()


def candidate_pairs(elements: Sequence[str], config: PairsConfig) -> list[IndexPair]:
    """Generate candidate pairs with the configured strategy."""
    if config.strategy == "exhaustive":
        pairs = list(exhaustive_pairs(len(elements)))
    else:
        pairs = list(ngram_pairs(elements, config.ngram_length))

    stats = pair_stats(len(elements), len(pairs))
    logger.info(
        "candidate_pairs_generated",
        strategy=config.strategy,
        pairs=stats.supplied_pairs,
        possible=stats.total_possible_pairs,
        reduction_pct=round(stats.reduction_pct, 2),
    )
    return pairs


def build_matrix(elements: Sequence[str], config: ClusteringConfig) -> SimilarityMatrix:
    """Build the similarity matrix described by ``config``."""
    return build_similarity_matrix(
        elements,
        config.matrix.min_similarity,
        candidate_pairs(elements, config.pairs),
        get_metric(config.metric),
        n_jobs=config.matrix.n_jobs,
        backend=config.matrix.backend,
    )


def run_clustering(elements: Sequence[str], config: ClusteringConfig) -> ClusteringResult:
    """Full pipeline: candidate pairs -> matrix -> clusters."""
    result = Clusterer.cluster(build_matrix(elements, config))
    logger.info(
        "clustering_complete",
        elements=len(elements),
        clusters=result.cluster_count,
        singletons=result.singleton_count,
    )
    return result
