"""Threshold sweep: cluster one master matrix at several similarity floors.

Each slice is a ``spin_off`` of the full index set, so similarities are
never recomputed from the raw elements.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from grappolo.clustering import Clusterer, ClusteringResult
from grappolo.matrix import SimilarityMatrix

logger = structlog.get_logger()


def sweep_thresholds(
    matrix: SimilarityMatrix,
    thresholds: Iterable[float] | None = None,
) -> Iterator[tuple[float, ClusteringResult]]:
    """Yield ``(threshold, result)`` for each threshold, in the given order.

    Args:
        matrix: Master matrix, usually built at a low floor.
        thresholds: Similarity floors to cluster at.  Defaults to every
            distinct similarity value present in ``matrix``.
    """
    if thresholds is None:
        thresholds = matrix.similarity_values

    all_indices = list(range(matrix.size))
    for threshold in thresholds:
        result = Clusterer.cluster(matrix.spin_off(all_indices, threshold))
        logger.info(
            "threshold_clustered",
            threshold=round(threshold, 4),
            clusters=result.cluster_count,
            singletons=result.singleton_count,
        )
        yield threshold, result
