"""
Field extractors for photo feed datasets.

Each extractor pulls one field out of every entry of the dataset's `items`
array, preserving item order. A dataset is the decoded JSON mapping itself.
"""

from typing import Any, List, Mapping

from photostats.contexts.extraction.exceptions import MissingFieldError
from photostats.contexts.extraction.records import PhotoRecord, require_field

Dataset = Mapping[str, Any]


def extract_items(dataset: Dataset) -> List[Mapping[str, Any]]:
    """
    Return the dataset's `items` array.

    Raises:
        MissingFieldError: If the dataset has no `items` field
    """
    items = require_field(dataset, "items")
    if not isinstance(items, list):
        raise MissingFieldError("items")
    return items


def _extract_field(dataset: Dataset, field: str) -> List[Any]:
    return [require_field(item, field, index) for index, item in enumerate(extract_items(dataset))]


def extract_titles(dataset: Dataset) -> List[str]:
    """Titles of all items, in item order."""
    return _extract_field(dataset, "title")


def extract_tags(dataset: Dataset) -> List[str]:
    """Raw space-separated tag strings of all items, in item order."""
    return _extract_field(dataset, "tags")


def extract_dates(dataset: Dataset) -> List[str]:
    """Raw `date_taken` strings of all items, in item order."""
    return _extract_field(dataset, "date_taken")


def extract_records(dataset: Dataset) -> List[PhotoRecord]:
    """
    Typed records for all items, in item order.

    Raises:
        MissingFieldError: If any item lacks title, tags or date_taken
    """
    return [PhotoRecord.from_item(item, index) for index, item in enumerate(extract_items(dataset))]
