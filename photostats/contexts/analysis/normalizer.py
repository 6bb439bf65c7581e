"""
Tag word normalization for the Analysis context.

Turns per-photo tag strings into one flat word sequence and classifies words
as alphanumeric (ASCII letters and digits only) or not.
"""

import re
from typing import Iterable, List

# Any character that disqualifies a word from being alphanumeric
NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-zA-Z0-9]")


def combine_to_words(tag_strings: Iterable[str]) -> List[str]:
    """
    Join tag strings with a single space and split the result on spaces.

    Splitting is on the literal " " character, so an empty tag string or a
    doubled space produces empty-string words.

    Examples:
        >>> combine_to_words(["dog puppy", "beach"])
        ['dog', 'puppy', 'beach']
        >>> combine_to_words(["dog", ""])
        ['dog', '']
    """
    return " ".join(tag_strings).split(" ")


def is_alphanumeric(word: str) -> bool:
    """
    True if word contains no character outside [A-Za-z0-9].

    The empty string has no disqualifying characters and is alphanumeric.

    Examples:
        >>> is_alphanumeric("Puppy2016")
        True
        >>> is_alphanumeric("świnoujście")
        False
        >>> is_alphanumeric("")
        True
    """
    return NON_ALPHANUMERIC_PATTERN.search(word) is None


def filter_alphanumeric(words: Iterable[str]) -> List[str]:
    return [word for word in words if is_alphanumeric(word)]


def filter_non_alphanumeric(words: Iterable[str]) -> List[str]:
    return [word for word in words if not is_alphanumeric(word)]


def lower_unique(words: Iterable[str]) -> List[str]:
    """Lower-case words and drop repeats, keeping first-occurrence order."""
    # dict preserves insertion order
    return list(dict.fromkeys(word.lower() for word in words))


def lower_unique_sorted(words: Iterable[str]) -> List[str]:
    """
    Lower-case, de-duplicate and sort words ascending.

    Examples:
        >>> lower_unique_sorted(["Dog", "beach", "dog", "2016"])
        ['2016', 'beach', 'dog']
    """
    return sorted(lower_unique(words))
