"""Exception types raised by the aggregation pipeline."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

__all__ = [
    "FreqPrepError",
    "StartupError",
    "StructuralError",
    "MalformedHeader",
    "MissingWord",
    "MissingOrInvalidCount",
    "StoreUnavailable",
]


class FreqPrepError(Exception):
    """Base class for all pipeline errors."""


class StartupError(FreqPrepError):
    """Bad or missing arguments, detected before any work begins."""


class StructuralError(FreqPrepError):
    """
    A corpus file violates the header or data line format.

    Attributes:
        path: File the offending line came from (set by the aggregator)
        line_number: 1-based line number within the file, if known
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        path: Optional[Union[str, Path]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        location = ""
        if self.path is not None:
            location = str(self.path)
            if self.line_number is not None:
                location += f":{self.line_number}"
        elif self.line_number is not None:
            location = f"line {self.line_number}"
        return f"{location}: {self.message}" if location else self.message


class MalformedHeader(StructuralError):
    """One of the leading header lines does not start with the marker."""


class MissingWord(StructuralError):
    """A data line has no word token."""


class MissingOrInvalidCount(StructuralError):
    """A data line's count is absent or not a non-negative integer."""


class StoreUnavailable(FreqPrepError):
    """The frequency table could not answer a lookup."""
