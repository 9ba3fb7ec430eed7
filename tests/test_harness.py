"""Tests for the correctness harness and built-in suites."""

import pytest

from fastwild import harness
from fastwild.engine.models import Case
from fastwild.suites import SUITES


@pytest.mark.parametrize("name", sorted(SUITES))
def test_builtin_suite_passes(name: str) -> None:
    report = harness.run_suite(name, SUITES[name])
    assert report.ok, harness.format_report(report)
    assert report.passed == len(SUITES[name])


def test_run_suites_defaults_to_all() -> None:
    reports = harness.run_suites()
    assert [report.name for report in reports] == list(SUITES)
    assert all(report.ok for report in reports)


def test_run_suites_unknown_name() -> None:
    with pytest.raises(KeyError):
        harness.run_suites(["nope"])


def test_applicable_matchers_skips_ascii_for_utf8() -> None:
    assert harness.applicable_matchers(Case("abc", "a*", True)) == ["match", "match_bounded", "match_ascii"]
    assert harness.applicable_matchers(Case("é", "?", True)) == ["match", "match_bounded"]


def test_wrong_expectation_is_reported() -> None:
    case = Case("abc", "a*", False)
    assert harness.check_case(case) == ["match", "match_bounded", "match_ascii"]
    report = harness.run_suite("custom", [case, Case("abc", "abc", True)])
    assert not report.ok
    assert report.passed == 1
    text = harness.format_report(report)
    assert text.startswith("Failed custom tests")
    assert "'abc' vs 'a*'" in text
    payload = report.to_json()
    assert payload["failed"] == 1
    assert payload["failures"][0]["matchers"] == ["match", "match_bounded", "match_ascii"]
