"""
Shared utilities for photostats.

Common functionality used across contexts:
- Logger setup with provenance
- Capture date parsing
- Rounding of real-valued statistics
- Text table reports
"""
