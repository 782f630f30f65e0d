"""Plain-text input and report formatting for the CLI."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from grappolo.clustering import ClusteringResult
from grappolo.matrix import SimilarityMatrix


def read_lines(path: Path, limit: int | None = None) -> list[str]:
    """Read up to ``limit`` non-blank lines from a UTF-8 text file."""
    lines: list[str] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            if limit is not None and len(lines) >= limit:
                break
            line = line.rstrip("\r\n")
            if line.strip():
                lines.append(line)
    return lines


def format_matrix(matrix: SimilarityMatrix, elements: Sequence[str]) -> str:
    """One line per row: ``index/element: sibling/element/similarity, ...``."""
    lines = []
    for row_index, row in enumerate(matrix.rows):
        record = ", ".join(
            f"{score.sibling_index}/{elements[score.sibling_index]}/{score.similarity}"
            for score in row
        )
        lines.append(f"{row_index}/{elements[row_index]}: {record}")
    return "\n".join(lines) + "\n"


def format_clusters(result: ClusteringResult, elements: Sequence[str]) -> str:
    """One line per cluster: ``size,member,member,...``."""
    lines = [
        ",".join([str(len(members))] + [elements[i] for i in members])
        for members in result.clusters
    ]
    return "\n".join(lines) + "\n"
