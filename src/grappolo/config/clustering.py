"""Clustering run configuration with sensible defaults.

All parameters can be overridden via a YAML file (``grappolo.yaml`` by
default).  If the file does not exist, defaults are used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator


class MatrixConfig(BaseModel):
    """Similarity matrix construction parameters."""

    min_similarity: float = Field(default=0.75, ge=0.0, le=1.0)
    n_jobs: int = 1
    backend: Literal["threading", "loky", "multiprocessing"] = "threading"

    @field_validator("n_jobs")
    @classmethod
    def reject_zero_jobs(cls, value: int) -> int:
        """joblib treats 0 as an error; negative values count back from the CPU count."""
        if value == 0:
            raise ValueError("n_jobs must be non-zero")
        return value


class PairsConfig(BaseModel):
    """Candidate pair generation strategy."""

    strategy: Literal["exhaustive", "ngram"] = "ngram"
    ngram_length: int = Field(default=2, ge=1)


class ClusteringConfig(BaseModel):
    """Top-level run configuration combining all sub-configs."""

    metric: str = "damerau_levenshtein"
    matrix: MatrixConfig = MatrixConfig()
    pairs: PairsConfig = PairsConfig()


def load_clustering_config(path: Path) -> ClusteringConfig:
    """Load run configuration from a YAML file.

    If the file does not exist, returns a ``ClusteringConfig`` with all
    default values.  Partial overrides are supported -- only the keys
    present in the YAML file will override defaults.
    """
    if not path.exists():
        return ClusteringConfig()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return ClusteringConfig(**data)
