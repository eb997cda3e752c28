"""Main entry point for the corpus frequency aggregation pipeline."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .config import AggregateConfig
from .exporter import ExportStats, export_table
from .table import open_table
from .walker import DirectoryWalker, WalkStats

logger = logging.getLogger(__name__)

__all__ = ["RunSummary", "aggregate_corpus", "run"]


@dataclass
class RunSummary:
    """Outcome of a full run."""
    walk: WalkStats
    export: ExportStats
    distinct_words: int
    elapsed: timedelta


def run(config: AggregateConfig) -> RunSummary:
    """
    Run the pipeline for a prepared configuration.

    Orchestrates the complete aggregation workflow:
    1. Validates the configuration
    2. Opens the frequency table, dropping any previous run's state
    3. Walks the input tree, folding every corpus file into the table
    4. Exports the count-ordered and word-ordered views

    Args:
        config: Run configuration

    Returns:
        RunSummary with walk and export diagnostics

    Raises:
        StartupError: If the configuration is unusable
        StructuralError: If a corpus file is malformed (under "fail")
        OSError: If an input or output path cannot be accessed
    """
    config.validate()
    start_time = datetime.now()

    logger.info("Starting corpus frequency aggregation")
    logger.info(f"Input directory: {config.input_dir}")
    logger.info(f"Frequency table: {config.db_path}")

    with open_table(config.db_path, mode="w") as table:
        walk_stats = DirectoryWalker(table, config).walk(config.input_dir)
        logger.info(
            f"Walk finished: {walk_stats.files} files, "
            f"{walk_stats.tokens} tokens, {walk_stats.failed} malformed"
        )
        distinct_words = len(table)

        export_stats = export_table(
            table,
            config.output_paths,
            min_count=config.min_count,
            encoding=config.encoding,
        )

    return RunSummary(
        walk=walk_stats,
        export=export_stats,
        distinct_words=distinct_words,
        elapsed=datetime.now() - start_time,
    )


def aggregate_corpus(
    input_dir,
    output_prefix,
    db_path=None,
    min_count: int = 2,
    on_malformed: str = "fail",
    follow_symlinks: bool = False,
    encoding: str = "utf-8",
    show_progress: bool = True,
    config: Optional[AggregateConfig] = None,
) -> RunSummary:
    """
    Main pipeline: aggregate a corpus tree and export its frequency table.

    Args:
        input_dir: Root directory of corpus files
        output_prefix: Prefix the two export paths are derived from
        db_path: Frequency table location (default: ./freqs.db3)
        min_count: Records with count >= min_count are exported
        on_malformed: "fail" or "skip" for structurally broken files
        follow_symlinks: Descend into symlinked directories
        encoding: Text encoding of corpus and output files
        show_progress: Display a progress counter
        config: Fully built configuration; overrides the other arguments

    Returns:
        RunSummary with walk and export diagnostics
    """
    if config is None:
        kwargs = {}
        if db_path is not None:
            kwargs["db_path"] = db_path
        config = AggregateConfig(
            input_dir=input_dir,
            output_prefix=output_prefix,
            min_count=min_count,
            on_malformed=on_malformed,
            follow_symlinks=follow_symlinks,
            encoding=encoding,
            show_progress=show_progress,
            **kwargs,
        )
    return run(config)
