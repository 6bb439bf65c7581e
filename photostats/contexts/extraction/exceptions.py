"""Exception taxonomy for photo dataset extraction and analysis."""

from pathlib import Path
from typing import Any, Optional


class PhotoStatsError(Exception):
    """Base class for all photostats errors."""


class MissingFieldError(PhotoStatsError, KeyError):
    """
    Exception raised when a required JSON field is absent.

    Attributes:
        field: Name of the missing field (e.g., 'items', 'title')
        item_index: Position of the offending item, or None for top-level fields
    """

    def __init__(self, field: str, item_index: Optional[int] = None):
        self.field = field
        self.item_index = item_index

        if item_index is None:
            message = f"Dataset is missing required field '{field}'"
        else:
            message = f"Item {item_index} is missing required field '{field}'"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class MalformedDateError(PhotoStatsError, ValueError):
    """
    Exception raised when a date_taken value cannot be parsed.

    Attributes:
        value: The raw value that failed to parse
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot parse date_taken value: {value!r}")


class RankOutOfRangeError(PhotoStatsError, IndexError):
    """
    Exception raised when a tag rank lies outside the frequency ranking.

    Attributes:
        rank: Requested rank (0 = most common)
        distinct_words: Number of distinct words in the ranking
    """

    def __init__(self, rank: int, distinct_words: int):
        self.rank = rank
        self.distinct_words = distinct_words
        super().__init__(
            f"Tag rank {rank} is out of range ({distinct_words} distinct words)"
        )


class EmptyDatasetError(PhotoStatsError, ValueError):
    """Exception raised when a statistic is undefined because the dataset has no items."""


class DatasetLoadError(PhotoStatsError, ValueError):
    """
    Exception raised when a dataset file cannot be decoded.

    Attributes:
        path: File that failed to load
        original_error: The underlying decode error, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]
        if path:
            parts.append(f"File: {path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
