"""
Named value-equality assertions.

An assertion pairs a description with an actual and an expected value. Each
assertion is checked on its own; checking one never affects another.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List


@dataclass(frozen=True)
class Assertion:
    name: str
    actual: Any
    expected: Any


@dataclass(frozen=True)
class AssertionOutcome:
    """Result of checking one Assertion."""

    name: str
    passed: bool
    actual: Any
    expected: Any

    def describe(self) -> str:
        """One-line summary, with values shown only on failure."""
        if self.passed:
            return f"PASS {self.name}"
        return f"FAIL {self.name} (expected {self.expected!r}, got {self.actual!r})"


@dataclass
class SuiteResult:
    """
    Outcomes of one named suite.

    Attributes:
        name: Suite name (e.g., "dogs")
        outcomes: Outcomes in assertion order
    """

    name: str
    outcomes: List[AssertionOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failures(self) -> List[AssertionOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]


def check(assertion: Assertion) -> AssertionOutcome:
    """Compare actual and expected by deep value equality."""
    return AssertionOutcome(
        name=assertion.name,
        passed=assertion.actual == assertion.expected,
        actual=assertion.actual,
        expected=assertion.expected,
    )


def run_assertions(assertions: Iterable[Assertion]) -> List[AssertionOutcome]:
    """Check every assertion and collect all outcomes, passing or not."""
    return [check(assertion) for assertion in assertions]


def exit_code(results: Iterable[SuiteResult]) -> int:
    """0 if every suite passed, 1 otherwise."""
    return 0 if all(result.passed for result in results) else 1
