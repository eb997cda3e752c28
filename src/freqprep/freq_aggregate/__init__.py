"""
Corpus frequency aggregation pipeline.

This module walks a directory of corpus files, folds every
"word<TAB>count" line into a persistent frequency table, and exports
two sorted projections of the result.

Main entry point:
    aggregate_corpus() - Full pipeline (reset table, walk, export)

Key components:
    - parser: Header validation and data line parsing
    - table: SQLite-backed frequency table
    - aggregator: Per-file accumulation into the table
    - walker: Recursive directory traversal
    - exporter: Sorted, filtered output files
"""

from .core import aggregate_corpus, RunSummary
from .config import AggregateConfig, build_output_paths
from .errors import (
    FreqPrepError,
    StartupError,
    StructuralError,
    MalformedHeader,
    MissingWord,
    MissingOrInvalidCount,
    StoreUnavailable,
)

__all__ = [
    "aggregate_corpus",
    "RunSummary",
    "AggregateConfig",
    "build_output_paths",
    "FreqPrepError",
    "StartupError",
    "StructuralError",
    "MalformedHeader",
    "MissingWord",
    "MissingOrInvalidCount",
    "StoreUnavailable",
]
