"""Recursive directory traversal feeding the file aggregator."""
from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set, Tuple

from tqdm import tqdm

from .aggregator import aggregate_file
from .config import AggregateConfig, is_skipped_name
from .errors import StructuralError
from .table import FrequencyTable

logger = logging.getLogger(__name__)

__all__ = ["WalkStats", "DirectoryWalker", "walk_corpus"]


@dataclass
class WalkStats:
    """Diagnostics for a full directory walk.

    Attributes:
        files: Corpus files aggregated successfully
        skipped: Entries deliberately passed over (skip-list, symlinked dirs)
        failed: Malformed files dropped under the "skip" policy
        tokens: Sum of all counts folded into the table
        failed_paths: Paths of the dropped files
    """
    files: int = 0
    skipped: int = 0
    failed: int = 0
    tokens: int = 0
    failed_paths: List[Path] = field(default_factory=list)


class DirectoryWalker:
    """
    Walks a corpus tree and aggregates every regular file it finds.

    Siblings are visited in name order so repeated runs over an
    unchanged tree touch files in the same sequence.
    """

    def __init__(self, table: FrequencyTable, config: AggregateConfig):
        """
        Initialize the walker.

        Args:
            table: Open frequency table, already reset for this run
            config: Run configuration
        """
        self.table = table
        self.config = config
        self.stats = WalkStats()
        self._visited: Set[Tuple[int, int]] = set()
        self._progress: Optional[tqdm] = None

    def walk(self, root: str | Path) -> WalkStats:
        """
        Aggregate every corpus file under root.

        Args:
            root: Directory to walk

        Returns:
            WalkStats for the whole tree

        Raises:
            StructuralError: On a malformed file under the "fail" policy
            OSError: If a directory or file cannot be read, or a symlink
                has no target
        """
        root = Path(root)
        self._progress = tqdm(
            desc="Aggregating",
            unit="file",
            disable=not self.config.show_progress,
        )
        try:
            self._walk_dir(root)
        finally:
            self._progress.close()
            self._progress = None
        return self.stats

    def _walk_dir(self, directory: Path) -> None:
        if self.config.follow_symlinks:
            st = directory.stat()
            key = (st.st_dev, st.st_ino)
            if key in self._visited:
                logger.warning(f"Skipping already visited directory (symlink cycle?): {directory}")
                self.stats.skipped += 1
                return
            self._visited.add(key)

        logger.info(f"reading dir {directory} ...")
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            path = Path(entry.path)

            if entry.is_dir(follow_symlinks=False):
                self._walk_dir(path)
                continue

            if entry.is_symlink() and entry.is_dir():
                if self.config.follow_symlinks:
                    self._walk_dir(path)
                else:
                    logger.debug(f"Not following symlinked directory: {path}")
                    self.stats.skipped += 1
                continue

            if entry.is_file():
                if is_skipped_name(entry.name, self.config.skip_names):
                    logger.debug(f"Skipping metadata file: {path}")
                    self.stats.skipped += 1
                    continue
                self._process_file(path)
                continue

            if entry.is_symlink() and not path.exists():
                raise FileNotFoundError(errno.ENOENT, "dangling symlink", str(path))

            logger.debug(f"Ignoring non-regular entry: {path}")

    def _process_file(self, path: Path) -> None:
        try:
            file_stats = aggregate_file(
                path,
                self.table,
                header_lines=self.config.header_lines,
                header_marker=self.config.header_marker,
                encoding=self.config.encoding,
            )
        except StructuralError as e:
            if self.config.on_malformed != "skip":
                raise
            logger.warning(f"Skipping malformed file: {e}")
            self.stats.failed += 1
            self.stats.failed_paths.append(path)
            return

        self.stats.files += 1
        self.stats.tokens += file_stats.tokens
        self._progress.update(1)
        self._progress.set_postfix(tokens=self.stats.tokens, refresh=False)


def walk_corpus(
    root: str | Path,
    table: FrequencyTable,
    config: AggregateConfig,
) -> WalkStats:
    """
    Convenience wrapper: walk root with a fresh DirectoryWalker.

    Args:
        root: Directory to walk
        table: Open frequency table
        config: Run configuration

    Returns:
        WalkStats for the whole tree
    """
    return DirectoryWalker(table, config).walk(root)
