"""
Harness context logger.

Provides logging interface for fixture suites with automatic [suite] prefix.
"""

from pathlib import Path

from loguru import logger

from photostats.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[suite]"


def setup_suite_logger(log_dir: Path, fixtures_path: Path) -> Path:
    """
    Setup logger for a fixture suite run.

    Args:
        log_dir: Directory for this session
        fixtures_path: Directory holding the fixture files (recorded in provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="suite",
        log_dir=log_dir,
        extra_provenance={"Fixtures": fixtures_path},
    )


def _log_info(message: str) -> None:
    """Log info message with [suite] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [suite] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [suite] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def log_suite_result(result) -> None:
    """
    Log every outcome of a suite, then its summary line.

    Args:
        result: SuiteResult from run_suite()
    """
    for outcome in result.outcomes:
        if outcome.passed:
            _log_success(f"{result.name}: {outcome.describe()}")
        else:
            _log_error(f"{result.name}: {outcome.describe()}")

    total = len(result.outcomes)
    failed = len(result.failures)
    if failed:
        _log_error(f"{result.name}: {failed} of {total} assertions failed")
    else:
        _log_success(f"{result.name}: all {total} assertions passed")
