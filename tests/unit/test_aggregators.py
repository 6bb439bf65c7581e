"""Unit tests for counting, ranking and date ordering."""

import pytest

from photostats.contexts.analysis.aggregators import (
    RankedWord,
    TitleDatePair,
    count_by_lower_case,
    mean,
    pair_titles_with_dates,
    rank_descending_by_count,
    sort_by_date_ascending,
    sort_by_date_descending,
)
from photostats.contexts.extraction.exceptions import EmptyDatasetError, MalformedDateError


class TestCountByLowerCase:

    @pytest.mark.unit
    def test_merges_case_variants(self):
        assert count_by_lower_case(["Dog", "dog", "DOG", "puppy"]) == {"dog": 3, "puppy": 1}

    @pytest.mark.unit
    def test_keys_in_first_seen_order(self):
        counts = count_by_lower_case(["snow", "Dog", "beach", "dog"])
        assert list(counts) == ["snow", "dog", "beach"]

    @pytest.mark.unit
    def test_empty(self):
        assert count_by_lower_case([]) == {}


class TestRankDescendingByCount:

    @pytest.mark.unit
    def test_descending(self):
        ranking = rank_descending_by_count({"a": 1, "b": 3, "c": 2})
        assert [r.word for r in ranking] == ["b", "c", "a"]
        assert ranking[0] == RankedWord("b", 3)

    @pytest.mark.unit
    def test_ties_keep_first_seen_order(self):
        """Equal counts keep the mapping's insertion order."""
        counts = count_by_lower_case(["puppy", "canine", "dog", "canine", "puppy", "dog", "dog"])
        ranking = rank_descending_by_count(counts)
        assert [r.word for r in ranking] == ["dog", "puppy", "canine"]

    @pytest.mark.unit
    def test_input_mapping_untouched(self):
        counts = {"a": 1, "b": 2}
        rank_descending_by_count(counts)
        assert list(counts.items()) == [("a", 1), ("b", 2)]


class TestPairTitlesWithDates:

    @pytest.mark.unit
    def test_pairs_in_order(self):
        pairs = pair_titles_with_dates(["a", "b"], ["2016-01-01", "2015-01-01"])
        assert pairs == [TitleDatePair("a", "2016-01-01"), TitleDatePair("b", "2015-01-01")]

    @pytest.mark.unit
    def test_duplicate_title_takes_later_date(self):
        """A repeated title keeps its first position but the last date."""
        pairs = pair_titles_with_dates(
            ["Sunset", "Pier", "Sunset"],
            ["2016-01-01", "2016-02-01", "2017-03-01"],
        )
        assert pairs == [
            TitleDatePair("Sunset", "2017-03-01"),
            TitleDatePair("Pier", "2016-02-01"),
        ]


class TestSortByDate:

    @pytest.mark.unit
    def test_ascending_and_descending(self):
        pairs = [
            TitleDatePair("mid", "2016-06-26T11:02:13-08:00"),
            TitleDatePair("new", "2018-01-01T00:00:00-08:00"),
            TitleDatePair("old", "2015-08-14T18:22:40-08:00"),
        ]
        assert [p.title for p in sort_by_date_ascending(pairs)] == ["old", "mid", "new"]
        assert [p.title for p in sort_by_date_descending(pairs)] == ["new", "mid", "old"]

    @pytest.mark.unit
    def test_offsets_are_compared_as_instants(self):
        """11:00 at -08:00 is 19:00 UTC, later than 12:00 UTC."""
        pairs = [
            TitleDatePair("pacific", "2016-06-26T11:00:00-08:00"),
            TitleDatePair("utc", "2016-06-26T12:00:00+00:00"),
        ]
        assert sort_by_date_ascending(pairs)[0].title == "utc"

    @pytest.mark.unit
    def test_equal_timestamps_keep_input_order(self):
        pairs = [
            TitleDatePair("first", "2016-06-26 10:00:00"),
            TitleDatePair("second", "2016-06-26T10:00:00+00:00"),
            TitleDatePair("third", "2016-06-26T10:00:00Z"),
        ]
        assert [p.title for p in sort_by_date_ascending(pairs)] == ["first", "second", "third"]
        assert [p.title for p in sort_by_date_descending(pairs)] == ["first", "second", "third"]

    @pytest.mark.unit
    def test_malformed_date_raises(self):
        pairs = [TitleDatePair("ok", "2016-06-26"), TitleDatePair("bad", "last summer")]
        with pytest.raises(MalformedDateError) as exc_info:
            sort_by_date_ascending(pairs)
        assert exc_info.value.value == "last summer"


class TestMean:

    @pytest.mark.unit
    def test_mean(self):
        assert mean([15, 8, 5]) == pytest.approx(28 / 3)

    @pytest.mark.unit
    def test_empty_raises(self):
        with pytest.raises(EmptyDatasetError):
            mean([])
