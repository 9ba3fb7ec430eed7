"""Data models shared across the fastwild engine."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

R = TypeVar("R")


class StepLimitExceeded(RuntimeError):
    """Raised when a match performs more unit comparisons than allowed."""

    def __init__(self, comparisons: int, limit: int) -> None:
        super().__init__(f"match exceeded {limit} unit comparisons")
        self.comparisons = comparisons
        self.limit = limit


@dataclass
class MatchStats:
    """Caller-owned step counter for a match call.

    Pass an instance as ``stats=`` to a matcher to count unit comparisons.
    With ``limit`` set, the matcher raises :class:`StepLimitExceeded` once
    the count goes past it.
    """

    limit: int | None = None
    comparisons: int = 0

    def tick(self) -> None:
        self.comparisons += 1
        if self.limit is not None and self.comparisons > self.limit:
            raise StepLimitExceeded(self.comparisons, self.limit)

    def counted(self, compare: Callable[..., R]) -> Callable[..., R]:
        def wrapper(*args: object) -> R:
            self.tick()
            return compare(*args)

        return wrapper


@dataclass(frozen=True)
class Case:
    subject: str
    pattern: str
    expected: bool


@dataclass
class SuiteReport:
    name: str
    passed: int = 0
    failures: list[tuple[Case, list[str]]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_json(self) -> dict[str, object]:
        return {
            "name": self.name,
            "passed": self.passed,
            "failed": len(self.failures),
            "failures": [
                {
                    "subject": case.subject,
                    "pattern": case.pattern,
                    "expected": case.expected,
                    "matchers": matchers,
                }
                for case, matchers in self.failures
            ],
        }


@dataclass(frozen=True)
class BenchOptions:
    """Benchmark settings.

    reps: how many times each case is run through each matcher
    suites: names of the built-in suites to time
    """

    reps: int = 1000
    suites: tuple[str, ...] = ("tame", "empty", "wild")


@dataclass
class Timings:
    """Accumulated wall time per matcher, in nanoseconds."""

    nanoseconds: dict[str, int] = field(default_factory=dict)

    def add(self, matcher: str, elapsed: int) -> None:
        self.nanoseconds[matcher] = self.nanoseconds.get(matcher, 0) + elapsed

    def seconds(self) -> dict[str, float]:
        return {name: elapsed / 1e9 for name, elapsed in self.nanoseconds.items()}
