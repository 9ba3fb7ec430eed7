"""Tests for the single-byte fast path."""

import fnmatch

import numpy as np
import pytest

from fastwild.engine.ascii import match_ascii
from fastwild.engine.matcher import match


@pytest.mark.parametrize(
    "subject,pattern,expected",
    [
        ("Hi", "Hi*", True),
        ("abc", "ab*d", False),
        ("caaab", "*a?b", True),
        ("aaaaa", "*aa?", True),
        ("abcd", "*??", True),
        ("", "*?", False),
        ("", "", True),
        ("a", "", False),
    ],
)
def test_match_ascii_scenarios(subject: str, pattern: str, expected: bool) -> None:
    assert match_ascii(pattern, subject) is expected


def test_match_ascii_agrees_with_match() -> None:
    rng = np.random.default_rng(7)
    for _ in range(400):
        pattern = "".join(rng.choice(["a", "b", "*", "?"], size=int(rng.integers(0, 9))))
        subject = "".join(rng.choice(["a", "b"], size=int(rng.integers(0, 12))))
        expected = fnmatch.fnmatchcase(subject, pattern)
        assert match_ascii(pattern, subject) is expected, (pattern, subject)
        assert match(pattern, subject) is expected, (pattern, subject)
