"""
photostats - statistics over Flickr-style photo feed metadata

Computes derived statistics (photo count, tag vocabularies, title lengths,
tag frequency ranks, oldest/newest photo) from a JSON document holding an
`items` array of photo records.

Architecture:
- Extraction Context: Dataset loading, field extraction, error taxonomy
- Analysis Context: Tag normalization, aggregation, query functions
- Harness Context: Named value-equality assertion suites over fixture files
"""

__version__ = "0.1.0"
