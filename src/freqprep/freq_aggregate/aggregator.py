"""Fold one corpus file into the frequency table."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import MalformedHeader, StoreUnavailable, StructuralError
from .parser import check_header_line, parse_data_line
from .table import FrequencyTable

logger = logging.getLogger(__name__)

__all__ = ["FileStats", "aggregate_file", "accumulate"]


@dataclass
class FileStats:
    """Diagnostics for one aggregated file.

    Attributes:
        path: File that was processed
        lines: Number of data lines folded into the table
        tokens: Sum of the counts on those lines
    """
    path: Path
    lines: int = 0
    tokens: int = 0


def accumulate(table: FrequencyTable, word: str, count: int) -> int:
    """
    Add count to a word's running total.

    A failed lookup is treated as an unseen word so the walk keeps going.

    Returns:
        The word's new cumulative count
    """
    try:
        current = table.get_count(word)
    except StoreUnavailable as e:
        logger.warning(f"{e}; treating {word!r} as unseen")
        current = None

    new_count = (current or 0) + count
    table.upsert(word, new_count)
    return new_count


def aggregate_file(
    path: str | Path,
    table: FrequencyTable,
    header_lines: int = 5,
    header_marker: str = "@",
    encoding: str = "utf-8",
) -> FileStats:
    """
    Stream a corpus file's lines into the frequency table.

    The header lines are validated and discarded; every later line is
    parsed and accumulated. All of the file's updates are committed
    together, so a file that fails part way contributes nothing.

    Args:
        path: Corpus file
        table: Open frequency table
        header_lines: Number of leading header lines
        header_marker: Required prefix of each header line
        encoding: Text encoding of the file

    Returns:
        FileStats with the number of data lines and their count total

    Raises:
        StructuralError: If the header or a data line is malformed, or
            the file cannot be decoded (path is attached)
        StoreUnavailable: If a write to the table fails (path is included)
        OSError: If the file cannot be read
    """
    path = Path(path)
    stats = FileStats(path=path)
    logger.info(f"processing file {path} ...")

    index = -1
    try:
        with table.transaction(), open(path, "r", encoding=encoding) as f:
            for index, line in enumerate(f):
                if index < header_lines:
                    check_header_line(line, index, header_marker)
                    logger.debug(f"skipping header line: {line.rstrip()!r}")
                    continue

                parsed = parse_data_line(line, index)
                accumulate(table, parsed.word, parsed.count)
                stats.lines += 1
                stats.tokens += parsed.count

            if index + 1 < header_lines:
                raise MalformedHeader(
                    f"file ends after {index + 1} of {header_lines} header lines",
                    line_number=index + 1 if index >= 0 else None,
                )
    except UnicodeDecodeError as e:
        raise StructuralError(
            f"cannot decode as {encoding}: {e.reason}", path=path
        ) from e
    except StructuralError as e:
        e.path = path
        raise
    except StoreUnavailable as e:
        raise StoreUnavailable(f"{path}: {e}") from e

    logger.debug(f"{path}: {stats.lines} lines, {stats.tokens} tokens")
    return stats
