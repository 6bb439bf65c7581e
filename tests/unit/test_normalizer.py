"""
Unit tests for tag word normalization.

Tests word helpers in photostats.contexts.analysis.normalizer.
"""

import pytest

from photostats.contexts.analysis.normalizer import (
    combine_to_words,
    filter_alphanumeric,
    filter_non_alphanumeric,
    is_alphanumeric,
    lower_unique,
    lower_unique_sorted,
)


class TestCombineToWords:
    """Tests for combine_to_words function."""

    @pytest.mark.unit
    def test_flattens_in_dataset_order(self):
        """Words from each tag string appear contiguously, in order."""
        words = combine_to_words(["dog puppy", "beach", "snow husky"])
        assert words == ["dog", "puppy", "beach", "snow", "husky"]

    @pytest.mark.unit
    def test_empty_tag_string_yields_empty_word(self):
        """An empty tag string becomes an empty word, as join/split produces."""
        assert combine_to_words(["dog", "", "cat"]) == ["dog", "", "cat"]

    @pytest.mark.unit
    def test_double_space_yields_empty_word(self):
        assert combine_to_words(["dog  cat"]) == ["dog", "", "cat"]

    @pytest.mark.unit
    def test_no_tag_strings(self):
        assert combine_to_words([]) == [""]

    @pytest.mark.unit
    def test_accepts_generator(self):
        assert combine_to_words(tags for tags in ["a b", "c"]) == ["a", "b", "c"]


class TestIsAlphanumeric:
    """Tests for is_alphanumeric function."""

    @pytest.mark.unit
    @pytest.mark.parametrize("word", ["dog", "Puppy", "2016", "P1060675", "ABCxyz09"])
    def test_ascii_letters_and_digits(self, word):
        assert is_alphanumeric(word)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "word", ["świnoujście", "café", "dog-park", "dog_park", "tag!", "a b", "ß"]
    )
    def test_rejects_other_characters(self, word):
        assert not is_alphanumeric(word)

    @pytest.mark.unit
    def test_empty_string_is_alphanumeric(self):
        """No characters means no disqualifying characters."""
        assert is_alphanumeric("")

    @pytest.mark.unit
    @pytest.mark.parametrize("word", ["Dog", "ŚWINOUJŚCIE", "Mixed2016", "", "K9-Unit"])
    def test_case_never_changes_classification(self, word):
        assert is_alphanumeric(word) == is_alphanumeric(word.lower())


class TestFilters:
    """Tests for filter_alphanumeric and filter_non_alphanumeric."""

    @pytest.mark.unit
    def test_partition_preserves_order_and_case(self):
        words = ["Dog", "świnoujście", "beach", "Łódź", "dog"]
        assert filter_alphanumeric(words) == ["Dog", "beach", "dog"]
        assert filter_non_alphanumeric(words) == ["świnoujście", "Łódź"]

    @pytest.mark.unit
    def test_non_alphanumeric_keeps_repeats(self):
        assert filter_non_alphanumeric(["café", "café"]) == ["café", "café"]


class TestLowerUnique:
    """Tests for lower_unique and lower_unique_sorted."""

    @pytest.mark.unit
    def test_first_occurrence_order(self):
        assert lower_unique(["Snow", "dog", "SNOW", "Dog", "beach"]) == ["snow", "dog", "beach"]

    @pytest.mark.unit
    def test_sorted_ascending(self):
        words = ["Snow", "dog", "2016", "SNOW", "Beach", "dogs"]
        assert lower_unique_sorted(words) == ["2016", "beach", "dog", "dogs", "snow"]

    @pytest.mark.unit
    def test_sorting_is_idempotent(self):
        once = lower_unique_sorted(["b", "A", "c", "a"])
        assert lower_unique_sorted(once) == once
