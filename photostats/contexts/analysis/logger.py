"""
Analysis context logger.

Provides logging interface for analysis context with automatic [analysis] prefix.
"""

from pathlib import Path

from loguru import logger

from photostats.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[analysis]"


def setup_analysis_logger(log_dir: Path, dataset_path: Path) -> Path:
    """
    Setup logger for a statistics report run.

    Args:
        log_dir: Directory for this session
        dataset_path: Dataset being analyzed (recorded in provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="stats",
        log_dir=log_dir,
        extra_provenance={"Dataset": dataset_path},
    )


def _log_info(message: str) -> None:
    """Log info message with [analysis] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analysis] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
