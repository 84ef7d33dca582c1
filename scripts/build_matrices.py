#!/usr/bin/env python3
"""
Build the daily flat matrix and the activity co-occurrence graph from a
Daylio CSV export.

Usage:
    python scripts/build_matrices.py --input daylio_export.csv

Outputs:
    - outputs/matrices/flatmatrix.csv
    - outputs/matrices/gephi-matrix.csv
    - outputs/matrices/cooccurrence.gexf
    - outputs/matrices/cooccurrence_pairs.csv
    - outputs/matrices/cooccurrence_heatmap.png
    - outputs/matrices/summary.json
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from daylio_matrix.config import PipelineConfig
from daylio_matrix.errors import DaylioMatrixError
from daylio_matrix.export import (
    cooccurrence_graph,
    get_graph_statistics,
    write_flat_matrix,
    write_gephi_matrix,
    write_gexf,
)
from daylio_matrix.ingest import DaylioExportLoader
from daylio_matrix.pipeline import run_pipeline


def setup_logging(output_dir: Path) -> None:
    """Configure logging."""
    log_file = output_dir / "logs" / f"build_matrices_{datetime.now():%Y%m%d_%H%M%S}.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(log_file, rotation="10 MB", level="DEBUG")


def load_pipeline_config(args: argparse.Namespace) -> PipelineConfig:
    """Config file first, then command line overrides."""
    if args.config:
        config = PipelineConfig.from_file(Path(args.config))
    else:
        config = PipelineConfig()

    if args.unknown_tags:
        config.unknown_tag_policy = args.unknown_tags
    if args.strict_moods:
        config.strict_moods = True
    return config


def main():
    parser = argparse.ArgumentParser(description="Build mood/activity matrices from a Daylio export")
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Daylio CSV export",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="outputs/matrices",
        help="Output directory",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config (see configs/default.yaml)",
    )
    parser.add_argument(
        "--unknown-tags",
        type=str,
        default=None,
        choices=["abort", "skip"],
        help="How to handle tags missing from the configured activity list",
    )
    parser.add_argument(
        "--strict-moods",
        action="store_true",
        help="Fail on moods outside the vocabulary instead of writing -1",
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Skip the heatmap figure",
    )

    args = parser.parse_args()

    # Setup
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(output_dir)
    config = load_pipeline_config(args)

    logger.info("=" * 60)
    logger.info("Daylio Matrix Build")
    logger.info("=" * 60)
    logger.info(f"Moods: {config.moods}")
    logger.info(f"Unknown tag policy: {config.unknown_tag_policy}")

    loader = DaylioExportLoader(
        Path(args.input),
        config={"date_format": config.date_format, "dayfirst": config.dayfirst},
    )
    records = loader.load_records()

    try:
        result = run_pipeline(
            records,
            moods=config.moods,
            activities=config.activities,
            unknown_tag_policy=config.unknown_tag_policy,
            strict_moods=config.strict_moods,
        )
    except DaylioMatrixError as e:
        logger.error(f"Aborting: {e}")
        sys.exit(1)

    names = config.outputs
    write_flat_matrix(result.flat, output_dir / names.flat_matrix, delimiter=config.delimiter)
    write_gephi_matrix(result.cooccurrence, output_dir / names.gephi_matrix)

    pairs_path = output_dir / names.pairs
    result.engine.to_frame().to_csv(pairs_path, index=False)
    logger.info(f"Saved pair details to {pairs_path}")

    graph = cooccurrence_graph(result.cooccurrence, min_weight=config.min_edge_weight)
    write_gexf(graph, output_dir / names.graph)

    if not args.no_plot:
        from daylio_matrix.export.plots import plot_cooccurrence_heatmap
        plot_cooccurrence_heatmap(result.cooccurrence, output_dir / names.heatmap)

    summary = result.summary()
    summary["graph"] = get_graph_statistics(graph)
    summary_path = output_dir / "summary.json"
    with open(summary_path, "w") as f:
        json.dump(summary, f, indent=2, default=float)
    logger.info(f"Saved summary to {summary_path}")

    logger.info("\n" + "=" * 60)
    logger.info("SUMMARY")
    logger.info("=" * 60)
    for key, value in result.summary().items():
        logger.info(f"  {key}: {value}")

    logger.info("\nDone!")


if __name__ == "__main__":
    main()
