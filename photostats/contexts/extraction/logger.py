"""
Extraction context logger.

Provides logging interface for extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[extract]"


def _log_error(message: str) -> None:
    """Log error message with [extract] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
