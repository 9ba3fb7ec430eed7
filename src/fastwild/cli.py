"""Command line interface for the fastwild wildcard matcher."""
from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from . import io
from .bench import format_timings, run_benchmark
from .engine.ascii import match_ascii
from .engine.codepoint import count
from .engine.matcher import match, match_bounded
from .engine.models import BenchOptions, MatchStats, StepLimitExceeded
from .engine.validate import check_utf8
from .harness import format_report, run_suite, run_suites
from .suites import SUITES


def _non_negative(value: str) -> int:
    """Parse a non-negative integer option."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fastwild", description="UTF-8 wildcard matching CLI")
    parser.add_argument("-V", "--version", action="version", version="fastwild 0.1")
    sub = parser.add_subparsers(dest="command", required=True)

    matchp = sub.add_parser("match", help="match a subject against a pattern")
    matchp.add_argument("pattern")
    matchp.add_argument("subject")
    matchp.add_argument("--limit-pattern", type=_non_negative, help="read at most N pattern code points")
    matchp.add_argument("--limit-subject", type=_non_negative, help="read at most N subject code points")
    matchp.add_argument("--ascii", action="store_true", default=False, help="use the single-byte fast path")
    matchp.add_argument("--validate", action="store_true", default=False, help="reject ill-formed UTF-8")
    matchp.add_argument("--stats", action="store_true", default=False, help="report unit comparisons")
    matchp.add_argument("--max-steps", type=_non_negative, help="give up after N unit comparisons")
    matchp.add_argument("--format", choices=["text", "json"], default="text")

    countp = sub.add_parser("count", help="count code points in a string")
    countp.add_argument("text")

    check = sub.add_parser("check", help="run correctness suites")
    check.add_argument("--suite", nargs="+", choices=sorted(SUITES))
    check.add_argument("--cases", help="extra cases file (.jsonl, .json, .csv or tab-separated)")
    check.add_argument("--format", choices=["text", "json"], default="text")
    check.add_argument("--out", default="-")

    bench = sub.add_parser("bench", help="time the matchers over the built-in suites")
    bench.add_argument("--reps", type=int, default=1000)
    bench.add_argument("--suite", nargs="+", choices=sorted(SUITES))
    bench.add_argument("--format", choices=["text", "json"], default="text")
    bench.add_argument("--out", default="-")
    return parser


def _command_match(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    # Raw argv bytes, so --validate sees exactly what the shell passed in.
    wild = os.fsencode(args.pattern)
    tame = os.fsencode(args.subject)
    if args.validate:
        check_utf8(wild)
        check_utf8(tame)
    stats = None
    if args.stats or args.max_steps is not None:
        stats = MatchStats(limit=args.max_steps)
    bounded = args.limit_pattern is not None or args.limit_subject is not None
    if args.ascii:
        if stats is not None or bounded:
            parser.error("--ascii cannot be combined with --stats, --max-steps or limits")
        matched = match_ascii(wild, tame)
    elif bounded:
        pattern_limit = args.limit_pattern if args.limit_pattern is not None else count(wild)
        subject_limit = args.limit_subject if args.limit_subject is not None else count(tame)
        matched = match_bounded(wild, tame, pattern_limit, subject_limit, stats=stats)
    else:
        matched = match(wild, tame, stats=stats)

    if args.format == "json":
        payload: dict[str, object] = {"match": matched}
        if stats is not None:
            payload["comparisons"] = stats.comparisons
        io.write_json(payload, "-")
    else:
        text = "match" if matched else "no match"
        if stats is not None:
            text += f" ({stats.comparisons} comparisons)"
        io.write_text(text + "\n", "-")
    return 0 if matched else 1


def _command_count(args: argparse.Namespace) -> int:
    io.write_text(f"{count(os.fsencode(args.text))}\n", "-")
    return 0


def _command_check(args: argparse.Namespace) -> int:
    reports = []
    if args.suite or not args.cases:
        reports.extend(run_suites(args.suite))
    if args.cases:
        reports.append(run_suite(os.path.basename(args.cases), io.read_cases(args.cases)))
    if args.format == "json":
        io.write_json({"suites": [report.to_json() for report in reports]}, args.out)
    else:
        io.write_text("\n".join(format_report(report) for report in reports) + "\n", args.out)
    return 0 if all(report.ok for report in reports) else 1


def _command_bench(args: argparse.Namespace) -> int:
    options = BenchOptions(reps=args.reps, suites=tuple(args.suite)) if args.suite else BenchOptions(reps=args.reps)
    timings = run_benchmark(options)
    if args.format == "json":
        io.write_json(timings.seconds(), args.out)
    else:
        io.write_text(format_timings(timings) + "\n", args.out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    command = args.command
    try:
        if command == "match":
            return _command_match(args, parser)
        elif command == "count":
            return _command_count(args)
        elif command == "check":
            return _command_check(args)
        elif command == "bench":
            return _command_bench(args)
    except (ValueError, OSError, StepLimitExceeded) as exc:
        parser.exit(2, f"fastwild: error: {exc}\n")
    except KeyError as exc:
        parser.exit(2, f"fastwild: error: {exc.args[0]}\n")
    parser.error(f"unknown command {command}")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
