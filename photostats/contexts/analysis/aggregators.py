"""
Aggregations over extracted photo fields.

Counting, frequency ranking, title/date pairing and date ordering. Every
function returns a new collection; inputs are never modified.
"""

from typing import Dict, Iterable, List, Mapping, NamedTuple, Sequence

from photostats.contexts.extraction.exceptions import EmptyDatasetError
from photostats.utils.timestamp import parse_date_taken


class RankedWord(NamedTuple):
    """A tag word and how often it occurs."""

    word: str
    count: int


class TitleDatePair(NamedTuple):
    """A photo title and its raw capture date string."""

    title: str
    date: str


def count_by_lower_case(words: Iterable[str]) -> Dict[str, int]:
    """
    Tally words case-insensitively.

    Keys are lower-cased words in order of first occurrence.

    Examples:
        >>> count_by_lower_case(["Dog", "puppy", "dog"])
        {'dog': 2, 'puppy': 1}
    """
    counts: Dict[str, int] = {}
    for word in words:
        key = word.lower()
        counts[key] = counts.get(key, 0) + 1
    return counts


def rank_descending_by_count(counts: Mapping[str, int]) -> List[RankedWord]:
    """
    Order words from most to least frequent.

    The sort is stable over the mapping's iteration order, so words with equal
    counts keep first-seen order when counts came from count_by_lower_case().

    Examples:
        >>> rank_descending_by_count({"canine": 2, "dog": 3, "puppy": 2})
        [RankedWord(word='dog', count=3), RankedWord(word='canine', count=2), RankedWord(word='puppy', count=2)]
    """
    pairs = [RankedWord(word, count) for word, count in counts.items()]
    return sorted(pairs, key=lambda pair: -pair.count)


def pair_titles_with_dates(titles: Sequence[str], dates: Sequence[str]) -> List[TitleDatePair]:
    """
    Associate each title with its capture date.

    Titles act as keys: when two photos share a title the later photo's date
    replaces the earlier one, and the pair keeps the first photo's position.
    Extra entries in the longer sequence are ignored.
    """
    by_title = dict(zip(titles, dates))
    return [TitleDatePair(title, date) for title, date in by_title.items()]


def sort_by_date_ascending(pairs: Iterable[TitleDatePair]) -> List[TitleDatePair]:
    """
    Order pairs from oldest to newest capture date.

    Pairs with identical timestamps keep their input order.

    Raises:
        MalformedDateError: If any date cannot be parsed
    """
    return sorted(pairs, key=lambda pair: parse_date_taken(pair.date))


def sort_by_date_descending(pairs: Iterable[TitleDatePair]) -> List[TitleDatePair]:
    """
    Order pairs from newest to oldest capture date.

    Pairs with identical timestamps keep their input order (reverse=True keeps
    sorted() stable).

    Raises:
        MalformedDateError: If any date cannot be parsed
    """
    return sorted(pairs, key=lambda pair: parse_date_taken(pair.date), reverse=True)


def mean(values: Sequence[float]) -> float:
    """
    Arithmetic mean.

    Raises:
        EmptyDatasetError: If values is empty
    """
    if not values:
        raise EmptyDatasetError("Cannot average an empty sequence")
    return sum(values) / len(values)
