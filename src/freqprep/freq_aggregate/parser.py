"""Line parsing for corpus frequency files.

Each corpus file starts with a fixed number of header lines that must
begin with a marker character, followed by data lines of the form
``word<TAB>count``:

    @@@@@
    @@@@@
    @@@@@
    @@@@@
    @@@@@
    the	1520
    cat	3
"""
from __future__ import annotations

from typing import NamedTuple, Optional

from .errors import MalformedHeader, MissingWord, MissingOrInvalidCount
from .table import MAX_COUNT

__all__ = [
    "ParsedLine",
    "check_header_line",
    "parse_data_line",
    "parse_line",
]


class ParsedLine(NamedTuple):
    """A single (word, count) observation from a data line."""
    word: str
    count: int


def check_header_line(line: str, index: int, marker: str = "@") -> None:
    """
    Validate one header line.

    Args:
        line: Raw line text (trailing newline allowed)
        index: 0-based position of the line in its file
        marker: Prefix the line must start with

    Raises:
        MalformedHeader: If the line does not start with marker
    """
    if not line.startswith(marker):
        raise MalformedHeader(
            f"expected header line starting with {marker!r}, got {line.rstrip()[:60]!r}",
            line_number=index + 1,
        )


def parse_data_line(line: str, index: int) -> ParsedLine:
    """
    Parse one data line into a word and its count.

    The line is split on whitespace; tokens beyond the second are ignored.

    Args:
        line: Raw line text (trailing newline allowed)
        index: 0-based position of the line in its file

    Returns:
        ParsedLine with the word and its non-negative count

    Raises:
        MissingWord: If the line has no tokens
        MissingOrInvalidCount: If the count is absent, not a base-10
            non-negative integer, or too large to store

    Example:
        >>> parse_data_line("cat\\t3\\n", 5)
        ParsedLine(word='cat', count=3)
    """
    parts = line.split()
    if not parts:
        raise MissingWord("data line has no word", line_number=index + 1)

    word = parts[0]
    if len(parts) < 2:
        raise MissingOrInvalidCount(
            f"data line for {word!r} has no count", line_number=index + 1
        )

    raw_count = parts[1]
    # str.isdigit() alone accepts non-ASCII digits that int() rejects
    if not (raw_count.isascii() and raw_count.isdigit()):
        raise MissingOrInvalidCount(
            f"invalid count {raw_count!r} for {word!r}", line_number=index + 1
        )

    count = int(raw_count)
    if count > MAX_COUNT:
        raise MissingOrInvalidCount(
            f"count {raw_count} for {word!r} exceeds {MAX_COUNT}", line_number=index + 1
        )

    return ParsedLine(word, count)


def parse_line(
    line: str,
    index: int,
    header_lines: int = 5,
    marker: str = "@",
) -> Optional[ParsedLine]:
    """
    Parse a line according to its position in the file.

    Header lines are validated and discarded; everything after them is
    parsed as data.

    Args:
        line: Raw line text
        index: 0-based position of the line in its file
        header_lines: Number of leading header lines
        marker: Required prefix of header lines

    Returns:
        ParsedLine for data lines, None for header lines
    """
    if index < header_lines:
        check_header_line(line, index, marker)
        return None
    return parse_data_line(line, index)
