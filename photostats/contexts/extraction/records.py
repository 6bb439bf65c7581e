"""
Photo record data structure for the Extraction context.

Provides a typed, read-only view of one entry of a feed's `items` array.
Query functions work directly on the decoded mapping; PhotoRecord is used
where callers want attribute access or a parsed capture date.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from photostats.contexts.extraction.exceptions import MissingFieldError
from photostats.utils.timestamp import parse_date_taken

REQUIRED_FIELDS = ("title", "tags", "date_taken")


def require_field(item: Mapping[str, Any], field: str, item_index: Optional[int] = None) -> Any:
    """
    Look up a required field, raising MissingFieldError when it is absent.

    Args:
        item: Decoded JSON object
        field: Field name
        item_index: Position of the item within `items` (for error messages)

    Raises:
        MissingFieldError: If the field is missing or item is not an object
    """
    try:
        return item[field]
    except (KeyError, TypeError) as e:
        raise MissingFieldError(field, item_index) from e


@dataclass(frozen=True)
class PhotoRecord:
    """
    One photo from a feed.

    Attributes:
        title: Photo title
        tags: Space-separated tag words
        date_taken: Capture date string as found in the feed
    """

    title: str
    tags: str
    date_taken: str

    @classmethod
    def from_item(cls, item: Mapping[str, Any], item_index: Optional[int] = None) -> "PhotoRecord":
        """
        Build a record from a decoded `items` entry.

        Extra keys (link, media, author, ...) are ignored.

        Raises:
            MissingFieldError: If title, tags or date_taken is absent
        """
        values = {name: require_field(item, name, item_index) for name in REQUIRED_FIELDS}
        return cls(**values)

    @property
    def taken_at(self) -> datetime:
        """Parsed capture date (raises MalformedDateError)."""
        return parse_date_taken(self.date_taken)

    @property
    def tag_words(self) -> list[str]:
        """This record's tag string split on single spaces."""
        return self.tags.split(" ")
