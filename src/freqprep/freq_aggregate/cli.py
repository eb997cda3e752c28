"""Command-line interface for corpus frequency aggregation."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from .config import DEFAULT_DB_PATH, MALFORMED_POLICIES, AggregateConfig
from .core import run
from .display import print_completion_banner, print_run_header
from .errors import FreqPrepError

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freq-aggregate",
        description=(
            "Aggregate word counts from a tree of corpus files into a "
            "frequency table and export it sorted by count and by word."
        ),
    )
    parser.add_argument("input_dir", help="Directory of corpus files (walked recursively)")
    parser.add_argument(
        "output_prefix",
        help="Output path prefix; writes <prefix>.by_count.tsv and <prefix>.by_word.tsv",
    )
    parser.add_argument(
        "--db",
        dest="db_path",
        default=str(DEFAULT_DB_PATH),
        help=f"Frequency table location, reset on every run (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--min-count",
        type=int,
        default=2,
        help="Export only words whose total count is at least this (default: 2)",
    )
    parser.add_argument(
        "--on-malformed",
        choices=MALFORMED_POLICIES,
        default="fail",
        help="Abort the run on a malformed file, or skip that file (default: fail)",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories",
    )
    parser.add_argument("--encoding", default="utf-8", help="Corpus file encoding (default: utf-8)")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress counter")
    parser.add_argument("--quiet", action="store_true", help="Hide banners and progress")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the aggregation pipeline from the command line.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 on any fatal error
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    config = AggregateConfig(
        input_dir=args.input_dir,
        output_prefix=args.output_prefix,
        db_path=args.db_path,
        min_count=args.min_count,
        on_malformed=args.on_malformed,
        follow_symlinks=args.follow_symlinks,
        encoding=args.encoding,
        show_progress=not (args.no_progress or args.quiet),
    )

    if not args.quiet:
        print_run_header(datetime.now(), config)

    try:
        summary = run(config)
    except FreqPrepError as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    if not args.quiet:
        print_completion_banner(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
