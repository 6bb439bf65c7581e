"""Bounded contexts of photostats: extraction, analysis and harness."""
