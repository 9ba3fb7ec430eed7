"""Correctness harness cross-checking every matcher against expected verdicts."""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .engine.ascii import match_ascii
from .engine.codepoint import as_buffer, count
from .engine.matcher import match, match_bounded
from .engine.models import Case, SuiteReport
from .suites import SUITES


def _run_unbounded(case: Case) -> bool:
    return match(case.pattern, case.subject)


def _run_bounded(case: Case) -> bool:
    wild = as_buffer(case.pattern)
    tame = as_buffer(case.subject)
    return match_bounded(wild, tame, count(wild), count(tame))


def _run_ascii(case: Case) -> bool:
    return match_ascii(case.pattern, case.subject)


MATCHERS: dict[str, Callable[[Case], bool]] = {
    "match": _run_unbounded,
    "match_bounded": _run_bounded,
    "match_ascii": _run_ascii,
}


def applicable_matchers(case: Case) -> list[str]:
    """Matcher names that can judge ``case``; the ASCII path needs ASCII input."""
    names = ["match", "match_bounded"]
    if case.subject.isascii() and case.pattern.isascii():
        names.append("match_ascii")
    return names


def check_case(case: Case) -> list[str]:
    """Return the names of matchers whose verdict differs from ``case.expected``."""
    return [name for name in applicable_matchers(case) if MATCHERS[name](case) is not case.expected]


def run_suite(name: str, cases: Iterable[Case]) -> SuiteReport:
    report = SuiteReport(name=name)
    for case in cases:
        failed = check_case(case)
        if failed:
            report.failures.append((case, failed))
        else:
            report.passed += 1
    return report


def run_suites(names: Sequence[str] | None = None) -> list[SuiteReport]:
    selected = list(SUITES) if not names else list(names)
    for name in selected:
        if name not in SUITES:
            raise KeyError(f"unknown suite: {name}")
    return [run_suite(name, SUITES[name]) for name in selected]


def format_report(report: SuiteReport) -> str:
    status = "Passed" if report.ok else "Failed"
    lines = [f"{status} {report.name} tests"]
    for case, matchers in report.failures:
        lines.append(
            f"  {case.subject!r} vs {case.pattern!r}: expected {case.expected} ({', '.join(matchers)})"
        )
    return "\n".join(lines)


__all__ = [
    "MATCHERS",
    "applicable_matchers",
    "check_case",
    "format_report",
    "run_suite",
    "run_suites",
]
