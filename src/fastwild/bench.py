"""Timing runs of the matchers over the built-in suites.

Elapsed time accumulates in a caller-owned :class:`Timings`; nothing is kept
at module level between runs.
"""
from __future__ import annotations

import time
from collections.abc import Callable

from .engine.ascii import match_ascii
from .engine.codepoint import as_buffer, count
from .engine.matcher import match, match_bounded
from .engine.models import BenchOptions, Case, Timings
from .suites import SUITES


def _prepared(case: Case) -> dict[str, Callable[[], bool]]:
    # Encoding and unit counting stay outside the timed region.
    wild = as_buffer(case.pattern)
    tame = as_buffer(case.subject)
    wild_len = count(wild)
    tame_len = count(tame)
    runners: dict[str, Callable[[], bool]] = {
        "match": lambda: match(wild, tame),
        "match_bounded": lambda: match_bounded(wild, tame, wild_len, tame_len),
    }
    if case.subject.isascii() and case.pattern.isascii():
        runners["match_ascii"] = lambda: match_ascii(wild, tame)
    return runners


def run_benchmark(options: BenchOptions, timings: Timings | None = None) -> Timings:
    if options.reps < 1:
        raise ValueError("reps must be at least 1")
    if timings is None:
        timings = Timings()
    for name in options.suites:
        if name not in SUITES:
            raise KeyError(f"unknown suite: {name}")
        for case in SUITES[name]:
            for matcher, runner in _prepared(case).items():
                start = time.perf_counter_ns()
                for _ in range(options.reps):
                    runner()
                timings.add(matcher, time.perf_counter_ns() - start)
    return timings


def format_timings(timings: Timings) -> str:
    return "\n".join(
        f"{matcher}: {seconds:.3f} seconds" for matcher, seconds in timings.seconds().items()
    )


__all__ = ["format_timings", "run_benchmark"]
