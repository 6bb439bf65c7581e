"""
Photo feed statistics.

Each query takes a decoded feed dataset (a mapping with an `items` array)
and composes extractors, normalizers and aggregators into one statistic:

- image_count: number of photos
- alpha_numeric_tags_uniq: sorted, lower-cased, unique alphanumeric tag words
- non_alpha_numeric_tags: tag words with any non-alphanumeric character
- avg_title_length: mean title length in characters
- common_tag_by_rank: tag word at a given frequency rank
- oldest_photo_title: title of the earliest captured photo

Queries are pure: repeated calls on the same dataset return equal values.
"""

from dataclasses import dataclass, field
from typing import List

from photostats.contexts.analysis.aggregators import (
    RankedWord,
    count_by_lower_case,
    mean,
    pair_titles_with_dates,
    rank_descending_by_count,
    sort_by_date_ascending,
    sort_by_date_descending,
)
from photostats.contexts.analysis.logger import _log_debug
from photostats.contexts.analysis.normalizer import (
    combine_to_words,
    filter_alphanumeric,
    filter_non_alphanumeric,
    lower_unique_sorted,
)
from photostats.contexts.extraction.exceptions import EmptyDatasetError, RankOutOfRangeError
from photostats.contexts.extraction.extractors import (
    Dataset,
    extract_dates,
    extract_tags,
    extract_titles,
)


def tag_words(dataset: Dataset) -> List[str]:
    """All tag words of the dataset, in item order."""
    return combine_to_words(extract_tags(dataset))


def image_count(dataset: Dataset) -> int:
    return len(extract_titles(dataset))


def alpha_numeric_tags_uniq(dataset: Dataset) -> List[str]:
    """Unique alphanumeric tag words, lower-cased and sorted ascending."""
    return lower_unique_sorted(filter_alphanumeric(tag_words(dataset)))


def non_alpha_numeric_tags(dataset: Dataset) -> List[str]:
    """
    Tag words containing a character outside [A-Za-z0-9].

    Words keep their original case and dataset order; repeats are kept.
    """
    return filter_non_alphanumeric(tag_words(dataset))


def title_lengths(dataset: Dataset) -> List[int]:
    """Character (code point) length of each title, in item order."""
    return [len(title) for title in extract_titles(dataset)]


def avg_title_length(dataset: Dataset) -> float:
    """
    Mean title length in characters.

    Raises:
        EmptyDatasetError: If the dataset has no items
    """
    return mean(title_lengths(dataset))


def tag_ranking(dataset: Dataset) -> List[RankedWord]:
    """
    Case-insensitive frequency ranking of every tag word, most common first.

    Includes non-alphanumeric words. Ties keep first-seen order.
    """
    return rank_descending_by_count(count_by_lower_case(tag_words(dataset)))


def common_tag_by_rank(n: int, dataset: Dataset) -> str:
    """
    Tag word at frequency rank n (0 = most common).

    Negative ranks count back from the least common word.

    Raises:
        RankOutOfRangeError: If n falls outside the ranking
    """
    ranking = tag_ranking(dataset)
    try:
        ranked = ranking[n]
    except IndexError as e:
        raise RankOutOfRangeError(n, len(ranking)) from e

    _log_debug(f"Rank {n}: '{ranked.word}' ({ranked.count} occurrences)")
    return ranked.word


def oldest_photo_title(dataset: Dataset) -> str:
    """
    Title of the photo with the earliest capture date.

    Photos sharing a title are collapsed first and the later photo's date wins.

    Raises:
        EmptyDatasetError: If the dataset has no items
        MalformedDateError: If any date_taken cannot be parsed
    """
    pairs = sort_by_date_ascending(
        pair_titles_with_dates(extract_titles(dataset), extract_dates(dataset))
    )
    if not pairs:
        raise EmptyDatasetError("Cannot find the oldest photo of an empty dataset")
    return pairs[0].title


def newest_photo_title(dataset: Dataset) -> str:
    """
    Title of the photo with the latest capture date.

    Uses the same title collapsing as oldest_photo_title().

    Raises:
        EmptyDatasetError: If the dataset has no items
        MalformedDateError: If any date_taken cannot be parsed
    """
    pairs = sort_by_date_descending(
        pair_titles_with_dates(extract_titles(dataset), extract_dates(dataset))
    )
    if not pairs:
        raise EmptyDatasetError("Cannot find the newest photo of an empty dataset")
    return pairs[0].title


@dataclass
class DatasetSummary:
    """All statistics of one dataset, gathered for reporting."""

    image_count: int
    avg_title_length: float
    alpha_numeric_tags: List[str]
    non_alpha_numeric_tags: List[str]
    top_tags: List[RankedWord] = field(default_factory=list)
    oldest_photo_title: str = ""
    newest_photo_title: str = ""


def summarize(dataset: Dataset, top: int = 10) -> DatasetSummary:
    """
    Compute every statistic for a dataset.

    Args:
        dataset: Decoded feed dataset
        top: Number of ranked tags to keep

    Raises:
        EmptyDatasetError: If the dataset has no items
    """
    return DatasetSummary(
        image_count=image_count(dataset),
        avg_title_length=avg_title_length(dataset),
        alpha_numeric_tags=alpha_numeric_tags_uniq(dataset),
        non_alpha_numeric_tags=non_alpha_numeric_tags(dataset),
        top_tags=tag_ranking(dataset)[:top],
        oldest_photo_title=oldest_photo_title(dataset),
        newest_photo_title=newest_photo_title(dataset),
    )
