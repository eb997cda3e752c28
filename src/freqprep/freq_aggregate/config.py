"""Configuration and data structures for frequency aggregation."""
from __future__ import annotations

import fnmatch
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Tuple

from .errors import StartupError

__all__ = [
    "AggregateConfig",
    "DEFAULT_DB_PATH",
    "DEFAULT_SKIP_NAMES",
    "MALFORMED_POLICIES",
    "build_output_paths",
    "is_skipped_name",
]

DEFAULT_DB_PATH = Path("freqs.db3")

# Platform metadata files that never hold corpus data
DEFAULT_SKIP_NAMES: FrozenSet[str] = frozenset({
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
    "._*",
})

MALFORMED_POLICIES = ("fail", "skip")

BY_COUNT_SUFFIX = ".by_count.tsv"
BY_WORD_SUFFIX = ".by_word.tsv"


@dataclass
class AggregateConfig:
    """Configuration for an aggregation run.

    Attributes:
        input_dir: Root directory of corpus files
        output_prefix: Path prefix the two export files are derived from
        db_path: Location of the SQLite frequency table (reset every run)
        header_lines: Number of leading header lines per corpus file
        header_marker: Prefix every header line must start with
        min_count: Records with count >= min_count are exported
        skip_names: Glob patterns of file names that are never aggregated
        follow_symlinks: Whether to descend into symlinked directories
        on_malformed: "fail" aborts the run on a structural error,
            "skip" drops the offending file and continues
        encoding: Text encoding of corpus and output files
        show_progress: Display a tqdm progress counter while walking
    """
    input_dir: Path
    output_prefix: Path
    db_path: Path = DEFAULT_DB_PATH
    header_lines: int = 5
    header_marker: str = "@"
    min_count: int = 2
    skip_names: FrozenSet[str] = field(default_factory=lambda: DEFAULT_SKIP_NAMES)
    follow_symlinks: bool = False
    on_malformed: str = "fail"
    encoding: str = "utf-8"
    show_progress: bool = True

    def __post_init__(self):
        self.input_dir = Path(self.input_dir)
        self.output_prefix = Path(self.output_prefix)
        self.db_path = Path(self.db_path)
        self.skip_names = frozenset(self.skip_names)

    def validate(self) -> None:
        """
        Check the configuration before any work begins.

        Raises:
            StartupError: If any value is unusable
        """
        if not self.input_dir.exists():
            raise StartupError(f"Input directory does not exist: {self.input_dir}")
        if not self.input_dir.is_dir():
            raise StartupError(f"Input path is not a directory: {self.input_dir}")
        if not self.output_prefix.name:
            raise StartupError(f"Output prefix has no file name: {self.output_prefix}")
        if self.header_lines < 0:
            raise StartupError(f"header_lines must be >= 0, got {self.header_lines}")
        if not self.header_marker:
            raise StartupError("header_marker must not be empty")
        if self.min_count < 1:
            raise StartupError(f"min_count must be >= 1, got {self.min_count}")
        if self.on_malformed not in MALFORMED_POLICIES:
            raise StartupError(
                f"on_malformed must be one of {', '.join(MALFORMED_POLICIES)}, "
                f"got {self.on_malformed!r}"
            )

    @property
    def output_paths(self) -> Tuple[Path, Path]:
        return build_output_paths(self.output_prefix)


def build_output_paths(prefix: str | Path) -> Tuple[Path, Path]:
    """Build the two export paths from an output prefix.

    The prefix's final suffix is replaced, or the new suffix appended
    when it has none.

    Args:
        prefix: Output path prefix

    Returns:
        Tuple of (count-descending path, word-ascending path)

    Example:
        >>> build_output_paths("/scratch/out/2gram.txt")
        (Path('/scratch/out/2gram.by_count.tsv'), Path('/scratch/out/2gram.by_word.tsv'))
    """
    prefix = Path(prefix)
    base = prefix.with_suffix("") if prefix.suffix else prefix
    return (
        base.with_name(base.name + BY_COUNT_SUFFIX),
        base.with_name(base.name + BY_WORD_SUFFIX),
    )


def is_skipped_name(name: str, skip_names: FrozenSet[str]) -> bool:
    """Return True if a file name matches any skip pattern."""
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in skip_names)
