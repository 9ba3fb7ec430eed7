"""Tests for :mod:`fastwild.bench`."""

import pytest

from fastwild.bench import format_timings, run_benchmark
from fastwild.engine.models import BenchOptions, Timings


def test_run_benchmark_accumulates_into_caller_timings() -> None:
    timings = Timings()
    result = run_benchmark(BenchOptions(reps=1, suites=("empty",)), timings)
    assert result is timings
    assert set(timings.nanoseconds) == {"match", "match_bounded", "match_ascii"}
    first = dict(timings.nanoseconds)
    run_benchmark(BenchOptions(reps=1, suites=("empty",)), timings)
    assert all(timings.nanoseconds[name] >= first[name] for name in first)


def test_utf8_suite_skips_ascii_path() -> None:
    timings = run_benchmark(BenchOptions(reps=1, suites=("utf8",)))
    assert "match_ascii" not in timings.nanoseconds


def test_format_timings() -> None:
    timings = Timings({"match": 1_500_000_000})
    assert timings.seconds() == {"match": 1.5}
    assert format_timings(timings) == "match: 1.500 seconds"


def test_run_benchmark_rejects_bad_options() -> None:
    with pytest.raises(ValueError):
        run_benchmark(BenchOptions(reps=0))
    with pytest.raises(KeyError):
        run_benchmark(BenchOptions(reps=1, suites=("missing",)))
