"""End-to-end CLI tests executed directly via :func:`fastwild.cli.main`."""

import json
from pathlib import Path

import pytest

from fastwild import cli


def test_cli_match_exit_status(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["match", "*issip*ss*", "mississipissippi"]) == 0
    assert capfd.readouterr().out == "match\n"
    assert cli.main(["match", "ab*d", "abc"]) == 1
    assert capfd.readouterr().out == "no match\n"


def test_cli_match_json_with_stats(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["match", "*☂🐉", "☀☂🐉", "--stats", "--format", "json"]) == 0
    payload = json.loads(capfd.readouterr().out)
    assert payload["match"] is True
    assert payload["comparisons"] > 0


def test_cli_match_bounded_and_ascii(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["match", "abc", "abx", "--limit-pattern", "2", "--limit-subject", "2"]) == 0
    assert cli.main(["match", "a*b", "axx", "--limit-pattern", "2"]) == 0
    assert cli.main(["match", "*a?b", "caaab", "--ascii"]) == 0
    capfd.readouterr()


def test_cli_match_errors(capfd: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["match", "a*a*a*a*a*b", "a" * 50 + "b", "--max-steps", "3"])
    assert excinfo.value.code == 2
    assert "exceeded 3 unit comparisons" in capfd.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["match", "a", "a", "--ascii", "--stats"])
    assert excinfo.value.code == 2

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["match", "a", "a", "--limit-pattern", "-1"])
    assert excinfo.value.code == 2
    capfd.readouterr()


def test_cli_count(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["count", "héllo🐂"]) == 0
    assert capfd.readouterr().out == "6\n"


def test_cli_check_builtin_suites(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["check"]) == 0
    out = capfd.readouterr().out
    for name in ("tame", "empty", "wild", "utf8"):
        assert f"Passed {name} tests" in out


def test_cli_check_cases_file(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    cases = tmp_path / "cases.jsonl"
    cases.write_text(
        '{"subject": "abc", "pattern": "a*", "expected": true}\n'
        '{"subject": "abc", "pattern": "b*", "expected": true}\n',
        encoding="utf-8",
    )
    assert cli.main(["check", "--cases", str(cases), "--format", "json"]) == 1
    payload = json.loads(capfd.readouterr().out)
    assert [suite["name"] for suite in payload["suites"]] == ["cases.jsonl"]
    assert payload["suites"][0]["failed"] == 1


def test_cli_check_missing_file(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["check", "--cases", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 2
    assert "fastwild: error" in capfd.readouterr().err


def test_cli_bench(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "timings.json"
    assert cli.main(["bench", "--reps", "1", "--suite", "empty", "--format", "json", "--out", str(out)]) == 0
    timings = json.loads(out.read_text())
    assert set(timings) == {"match", "match_bounded", "match_ascii"}


def test_fastwild_main_entrypoint(capfd: pytest.CaptureFixture[str]) -> None:
    from fastwild import main as fastwild_main

    assert fastwild_main(["count", ""]) == 0
    assert capfd.readouterr().out == "0\n"
