"""SQLite-backed frequency table.

The table maps each word to its cumulative count for the current run:

    freqs(word TEXT PRIMARY KEY, count INTEGER NOT NULL)

Opening in write mode drops and recreates it, so no state survives
from a previous (possibly failed) run.
"""
from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, NamedTuple, Optional, Tuple

from .errors import StoreUnavailable

logger = logging.getLogger(__name__)

__all__ = [
    "FrequencyRecord",
    "FrequencyTable",
    "open_table",
    "SCAN_ORDERS",
    "MAX_COUNT",
]

TABLE_NAME = "freqs"

# SQLite INTEGER is a signed 64-bit value
MAX_COUNT = 2 ** 63 - 1

# Count ties are broken by word so repeated exports are byte-identical
SCAN_ORDERS = {
    None: "",
    "count": " ORDER BY count DESC, word ASC",
    "word": " ORDER BY word ASC",
}


class FrequencyRecord(NamedTuple):
    """One row of the frequency table."""
    word: str
    count: int


class FrequencyTable:
    """
    Persistent word -> cumulative count mapping.

    Single-key reads and upserts run inside the connection's current
    transaction; use transaction() to group a file's updates so they
    commit or roll back together.
    """

    def __init__(self, conn: sqlite3.Connection, path: Optional[Path] = None):
        """
        Wrap an open SQLite connection.

        Args:
            conn: Open connection
            path: Database location, for diagnostics
        """
        self.conn = conn
        self.path = path

    def reset(self) -> None:
        """Drop and recreate the table, discarding any prior run's state."""
        logger.info(f"Resetting frequency table at {self.path}")
        self.conn.execute(f"DROP TABLE IF EXISTS {TABLE_NAME}")
        self.conn.execute(
            f"CREATE TABLE {TABLE_NAME} ("
            "word TEXT PRIMARY KEY, "
            "count INTEGER NOT NULL)"
        )
        self.conn.commit()

    def get_count(self, word: str) -> Optional[int]:
        """
        Look up the current cumulative count for a word.

        Args:
            word: Key to look up

        Returns:
            Current count, or None if the word has not been seen

        Raises:
            StoreUnavailable: If the backend fails to answer
        """
        try:
            row = self.conn.execute(
                f"SELECT count FROM {TABLE_NAME} WHERE word = ?", (word,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreUnavailable(f"lookup of {word!r} failed: {e}") from e
        return row[0] if row is not None else None

    def upsert(self, word: str, count: int) -> None:
        """
        Insert a word or overwrite its count.

        The caller computes the new cumulative value; this does not add.

        Raises:
            StoreUnavailable: If the write fails
        """
        try:
            self.conn.execute(
                f"INSERT INTO {TABLE_NAME} (word, count) VALUES (?, ?) "
                "ON CONFLICT(word) DO UPDATE SET count = excluded.count",
                (word, count),
            )
        except (sqlite3.Error, OverflowError) as e:
            raise StoreUnavailable(f"write of {word!r} failed: {e}") from e

    def scan_all(
        self,
        order: Optional[str] = None,
        min_count: Optional[int] = None,
    ) -> Iterator[FrequencyRecord]:
        """
        Stream records from the table.

        Args:
            order: None for storage order, "count" for count descending
                (ties by word), "word" for word ascending
            min_count: If given, only records with count >= min_count

        Yields:
            FrequencyRecord for each matching row
        """
        if order not in SCAN_ORDERS:
            raise ValueError(f"Unknown scan order: {order!r}")

        sql = f"SELECT word, count FROM {TABLE_NAME}"
        params: Tuple = ()
        if min_count is not None:
            sql += " WHERE count >= ?"
            params = (min_count,)
        sql += SCAN_ORDERS[order]

        for word, count in self.conn.execute(sql, params):
            yield FrequencyRecord(word, count)

    def totals(self, min_count: int) -> Tuple[int, int]:
        """
        Sum counts over the whole table.

        Args:
            min_count: Threshold for the second total

        Returns:
            Tuple of (sum of all counts, sum of counts >= min_count)
        """
        size, size_n = self.conn.execute(
            f"SELECT COALESCE(SUM(count), 0), "
            f"COALESCE(SUM(CASE WHEN count >= ? THEN count ELSE 0 END), 0) "
            f"FROM {TABLE_NAME}",
            (min_count,),
        ).fetchone()
        return size, size_n

    def __len__(self) -> int:
        return self.conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()[0]

    @contextmanager
    def transaction(self) -> Iterator["FrequencyTable"]:
        """Commit on success, roll back if the block raises."""
        try:
            yield self
        except BaseException:
            self.conn.rollback()
            raise
        else:
            self.conn.commit()

    def close(self) -> None:
        self.conn.close()


@contextmanager
def open_table(db_path: str | Path, mode: str = "w") -> Iterator[FrequencyTable]:
    """
    Open the frequency table.

    Args:
        db_path: SQLite database file
        mode: "w" resets the table for a fresh run, "r" opens an
            existing table read-only

    Yields:
        FrequencyTable bound to the database

    Example:
        >>> with open_table("freqs.db3", mode="w") as table:
        ...     table.upsert("cat", 3)
    """
    db_path = Path(db_path)

    if mode not in ("w", "r"):
        raise ValueError(f"Unknown mode: {mode!r} (expected 'w' or 'r')")
    if mode == "r" and not db_path.exists():
        raise FileNotFoundError(f"Frequency table not found: {db_path}")
    if mode == "w":
        db_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        if mode == "w":
            conn = sqlite3.connect(str(db_path))
            conn.execute("PRAGMA synchronous=NORMAL")
        else:
            conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
    except sqlite3.Error as e:
        raise StoreUnavailable(f"cannot open frequency table {db_path}: {e}") from e

    table = FrequencyTable(conn, db_path)
    try:
        if mode == "w":
            try:
                table.reset()
            except sqlite3.Error as e:
                raise StoreUnavailable(f"cannot reset frequency table {db_path}: {e}") from e
        yield table
    finally:
        table.close()
