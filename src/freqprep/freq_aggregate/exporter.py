"""Sorted, filtered export of the frequency table.

Both output files share one layout:

    @size	<sum of all counts>
    @size-1	<sum of exported counts>
    <word>	<count>
    ...

The first file lists words by count descending, the second by word
ascending. Only records with count >= min_count are listed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from .table import FrequencyRecord, FrequencyTable

logger = logging.getLogger(__name__)

__all__ = ["ExportStats", "export_table", "write_export"]


@dataclass
class ExportStats:
    """Diagnostics for an export.

    Attributes:
        size: Sum of counts over every record
        size_n: Sum of counts over exported records
        rows_by_count: Data rows written to the count-ordered file
        rows_by_word: Data rows written to the word-ordered file
        paths: (count-ordered path, word-ordered path)
    """
    size: int
    size_n: int
    rows_by_count: int
    rows_by_word: int
    paths: Tuple[Path, Path]


def write_export(
    path: Path,
    records: Iterable[FrequencyRecord],
    size: int,
    size_n: int,
    min_count: int = 2,
    encoding: str = "utf-8",
) -> int:
    """
    Write one export file.

    Args:
        path: Destination file (parent directories are created)
        records: Records to list, already filtered and ordered
        size: Total of all counts
        size_n: Total of exported counts
        min_count: Export threshold, used to label the second header line
        encoding: Output text encoding

    Returns:
        Number of data rows written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with open(path, "w", encoding=encoding, newline="\n") as f:
        f.write(f"@size\t{size}\n")
        f.write(f"@size-{min_count - 1}\t{size_n}\n")
        for word, count in records:
            f.write(f"{word}\t{count}\n")
            rows += 1
    return rows


def export_table(
    table: FrequencyTable,
    paths: Tuple[Path, Path],
    min_count: int = 2,
    encoding: str = "utf-8",
) -> ExportStats:
    """
    Write the count-ordered and word-ordered views of the table.

    Args:
        table: Frequency table after the walk has completed
        paths: (count-ordered path, word-ordered path)
        min_count: Records with count >= min_count are exported
        encoding: Output text encoding

    Returns:
        ExportStats with totals and row counts
    """
    by_count_path, by_word_path = paths
    size, size_n = table.totals(min_count)
    logger.info(f"Exporting: size={size}, size-{min_count - 1}={size_n}")

    rows_by_count = write_export(
        by_count_path,
        table.scan_all(order="count", min_count=min_count),
        size,
        size_n,
        min_count=min_count,
        encoding=encoding,
    )
    logger.info(f"Wrote {rows_by_count} rows to {by_count_path}")

    rows_by_word = write_export(
        by_word_path,
        table.scan_all(order="word", min_count=min_count),
        size,
        size_n,
        min_count=min_count,
        encoding=encoding,
    )
    logger.info(f"Wrote {rows_by_word} rows to {by_word_path}")

    return ExportStats(
        size=size,
        size_n=size_n,
        rows_by_count=rows_by_count,
        rows_by_word=rows_by_word,
        paths=(by_count_path, by_word_path),
    )
