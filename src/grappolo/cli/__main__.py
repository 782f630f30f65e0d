"""CLI entry point: python -m grappolo.cli {cluster,sweep}"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from grappolo.clustering import Clusterer
from grappolo.config.clustering import ClusteringConfig, load_clustering_config
from grappolo.config.settings import get_settings
from grappolo.errors import GrappoloError
from grappolo.evaluation.sweep import sweep_thresholds
from grappolo.io import format_clusters, format_matrix, read_lines
from grappolo.logging_config import configure_logging
from grappolo.pipeline import build_matrix


def resolve_config(args: argparse.Namespace, default_path: Path) -> ClusteringConfig:
    """Load the YAML config and apply command-line overrides on top."""
    config = load_clustering_config(Path(args.config) if args.config else default_path)
    data = config.model_dump()

    if args.min_similarity is not None:
        data["matrix"]["min_similarity"] = args.min_similarity
    if args.n_jobs is not None:
        data["matrix"]["n_jobs"] = args.n_jobs
    if args.strategy is not None:
        data["pairs"]["strategy"] = args.strategy
    if args.ngram_length is not None:
        data["pairs"]["ngram_length"] = args.ngram_length
    if args.metric is not None:
        data["metric"] = args.metric

    return ClusteringConfig.model_validate(data)


def run_cluster(args: argparse.Namespace, config: ClusteringConfig) -> None:
    """Cluster the input file and write one line per cluster."""
    log = structlog.get_logger()
    elements = read_lines(Path(args.input), args.limit)
    log.info("elements_loaded", path=args.input, count=len(elements))

    matrix = build_matrix(elements, config)
    if args.matrix_output:
        Path(args.matrix_output).write_text(format_matrix(matrix, elements), encoding="utf-8")
        log.info("matrix_written", path=args.matrix_output)

    result = Clusterer.cluster(matrix)
    report = format_clusters(result, elements)
    if args.output:
        Path(args.output).write_text(report, encoding="utf-8")
        log.info("clusters_written", path=args.output, clusters=result.cluster_count)
    else:
        sys.stdout.write(report)


def run_sweep(args: argparse.Namespace, config: ClusteringConfig) -> None:
    """Cluster at every distinct similarity value, one file per value."""
    log = structlog.get_logger()
    input_path = Path(args.input)
    elements = read_lines(input_path, args.limit)
    log.info("elements_loaded", path=args.input, count=len(elements))

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    matrix = build_matrix(elements, config)
    written = 0
    # Distinct values may round to the same 4 decimals
    for position, (threshold, result) in enumerate(sweep_thresholds(matrix)):
        filepath = output_dir / f"{input_path.stem}-clusters-{position:03d}-{threshold:.4f}.txt"
        filepath.write_text(format_clusters(result, elements), encoding="utf-8")
        written += 1

    log.info("sweep_complete", files=written, directory=str(output_dir))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grappolo",
        description="Cluster lines of text by pairwise similarity",
    )
    subparsers = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", type=str, help="Text file, one element per line")
    common.add_argument("--config", type=str, default=None, help="YAML run configuration")
    common.add_argument("--min-similarity", type=float, default=None)
    common.add_argument("--strategy", choices=["exhaustive", "ngram"], default=None)
    common.add_argument("--ngram-length", type=int, default=None)
    common.add_argument("--metric", type=str, default=None)
    common.add_argument("--n-jobs", type=int, default=None, help="Parallel scoring workers")
    common.add_argument("--limit", type=int, default=None, help="Read at most this many lines")

    cluster_parser = subparsers.add_parser(
        "cluster", parents=[common], help="Cluster at a single similarity floor"
    )
    cluster_parser.add_argument("--output", type=str, default=None, help="Cluster file (default: stdout)")
    cluster_parser.add_argument("--matrix-output", type=str, default=None, help="Also write the matrix")

    sweep_parser = subparsers.add_parser(
        "sweep", parents=[common], help="Cluster at every distinct similarity value"
    )
    sweep_parser.add_argument("--output-dir", type=str, required=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        structlog.get_logger().error("command_failed", command=args.command, error=str(e))
        sys.exit(2)

    configure_logging(json_output=settings.log_json, log_level=settings.log_level)
    log = structlog.get_logger()

    try:
        config = resolve_config(args, settings.config_path)
        if args.command == "cluster":
            run_cluster(args, config)
        elif args.command == "sweep":
            run_sweep(args, config)
    except (GrappoloError, ValidationError, OSError) as e:
        log.error("command_failed", command=args.command, error=str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
