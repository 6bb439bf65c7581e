"""
Harness Context

Responsibilities:
- Loads fixture feeds and their expected statistics
- Checks named value-equality assertions independently
- Reports outcomes and the overall exit status

Owns: Suite definitions and pass/fail decisions
Never: Computes statistics itself
"""

from photostats.contexts.harness.assertions import (
    Assertion,
    AssertionOutcome,
    SuiteResult,
    check,
    exit_code,
    run_assertions,
)
from photostats.contexts.harness.suites import (
    build_fixture_assertions,
    default_fixture_paths,
    load_suite_config,
    run_fixture_suites,
    run_suite,
    run_suites,
)

__all__ = [
    "Assertion",
    "AssertionOutcome",
    "SuiteResult",
    "check",
    "run_assertions",
    "exit_code",
    "build_fixture_assertions",
    "default_fixture_paths",
    "load_suite_config",
    "run_suite",
    "run_suites",
    "run_fixture_suites",
]
