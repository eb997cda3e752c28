"""Display formatting for the aggregation pipeline."""

__all__ = [
    "truncate_path_to_fit",
    "print_run_header",
    "print_completion_banner",
    "LINE_WIDTH",
]

LINE_WIDTH = 100


def truncate_path_to_fit(path, prefix, width=LINE_WIDTH):
    """
    Shorten a path so that prefix + path fits within width.

    The tail of the path is kept, since it is the most specific part.

    Args:
        path: Path to display
        prefix (str): Label printed before the path
        width (int): Total line width

    Returns:
        str: The path, possibly truncated with a leading "..."
    """
    path_str = str(path)
    available = width - len(prefix)
    if len(path_str) <= available:
        return path_str
    if available <= 3:
        return path_str[-max(available, 0):] if available > 0 else ""
    return "..." + path_str[-(available - 3):]


def print_run_header(start_time, config):
    """
    Print run configuration header.

    Args:
        start_time (datetime): Start time of the run.
        config (AggregateConfig): Run configuration.
    """
    by_count, by_word = config.output_paths
    lines = [
        "CORPUS FREQUENCY AGGREGATION",
        "━" * LINE_WIDTH,
        f"Start Time: {start_time:%Y-%m-%d %H:%M:%S}",
        "",
        "Configuration",
        "═" * LINE_WIDTH,
        f"Input directory:      {truncate_path_to_fit(config.input_dir, 'Input directory:      ')}",
        f"Frequency table:      {truncate_path_to_fit(config.db_path, 'Frequency table:      ')}",
        f"Output (by count):    {truncate_path_to_fit(by_count, 'Output (by count):    ')}",
        f"Output (by word):     {truncate_path_to_fit(by_word, 'Output (by word):     ')}",
        f"Minimum count:        {config.min_count}",
        f"On malformed file:    {config.on_malformed}",
        "",
    ]
    print("\n".join(lines), flush=True)


def print_completion_banner(summary):
    """
    Print completion banner with statistics.

    Args:
        summary (RunSummary): Result of the run.
    """
    walk = summary.walk
    export = summary.export
    lines = [
        "",
        "Aggregation Complete",
        "═" * LINE_WIDTH,
        f"Files aggregated:     {walk.files:,}",
        f"Entries skipped:      {walk.skipped:,}",
        f"Malformed files:      {walk.failed:,}",
        f"Distinct words:       {summary.distinct_words:,}",
        f"Total count (size):   {export.size:,}",
        f"Exported count:       {export.size_n:,}",
        f"Rows (by count):      {export.rows_by_count:,}",
        f"Rows (by word):       {export.rows_by_word:,}",
        f"Elapsed:              {summary.elapsed}",
        "━" * LINE_WIDTH,
        "",
    ]
    print("\n".join(lines), flush=True)
