"""
Analysis Context

Responsibilities:
- Normalizes tag strings into words and classifies them
- Aggregates counts, frequency ranks, averages and date orderings
- Exposes the query functions over a feed dataset

Owns: Statistics over photo metadata
Never: Reads files or decides pass/fail
"""

from photostats.contexts.analysis.queries import (
    DatasetSummary,
    alpha_numeric_tags_uniq,
    avg_title_length,
    common_tag_by_rank,
    image_count,
    newest_photo_title,
    non_alpha_numeric_tags,
    oldest_photo_title,
    summarize,
    tag_ranking,
    title_lengths,
)

__all__ = [
    # Query functions
    "image_count",
    "alpha_numeric_tags_uniq",
    "non_alpha_numeric_tags",
    "avg_title_length",
    "common_tag_by_rank",
    "oldest_photo_title",
    # Supplementary statistics
    "title_lengths",
    "tag_ranking",
    "newest_photo_title",
    "summarize",
    "DatasetSummary",
]
