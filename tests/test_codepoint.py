"""Tests for :mod:`fastwild.engine.codepoint`."""

import pytest

from fastwild.engine import codepoint


@pytest.mark.parametrize(
    "data,width",
    [
        (b"a", 1),
        ("é".encode(), 2),
        ("€".encode(), 3),
        ("🐂".encode(), 4),
        (b"\x80", 1),
        (b"", 0),
        (b"\x00a", 0),
    ],
)
def test_unit_width(data: bytes, width: int) -> None:
    assert codepoint.unit_width(data, 0) == width


def test_truncated_unit_stops_at_terminator() -> None:
    assert codepoint.unit_width(b"\xe2\x82", 0) == 2
    assert codepoint.unit_width(b"\xf0\x00\x9f\x90", 0) == 1
    assert codepoint.advance(b"\xf0\x9f", 0) == (2, False)


def test_advance_reports_following_unit() -> None:
    data = "aé🐂".encode()
    pos, more = codepoint.advance(data, 0)
    assert (pos, more) == (1, True)
    pos, more = codepoint.advance(data, pos)
    assert (pos, more) == (3, True)
    pos, more = codepoint.advance(data, pos)
    assert (pos, more) == (7, False)
    # Advancing on the terminator stays put.
    assert codepoint.advance(data, pos) == (7, False)


def test_equal_uses_left_unit_width() -> None:
    assert codepoint.equal(b"a", 0, b"ab", 0)
    assert codepoint.equal("é".encode(), 0, "éx".encode(), 0)
    assert not codepoint.equal("é".encode(), 0, "è".encode(), 0)
    assert not codepoint.equal("🐂".encode(), 0, "🐃".encode(), 0)
    assert codepoint.equal(b"\x00", 0, b"", 0)


def test_advance_and_equal() -> None:
    tame = "xé".encode()
    assert codepoint.advance_and_equal("é".encode(), 0, tame, 0) == (1, True)
    assert codepoint.advance_and_equal(b"y", 0, b"xz", 0) == (1, False)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", 0),
        ("a", 1),
        ("héllo🐂", 6),
        (b"ab\x00cd", 2),
        (memoryview(b"abc"), 3),
        (bytearray("𓋍𓋔𓎍".encode()), 3),
    ],
)
def test_count(text: object, expected: int) -> None:
    assert codepoint.count(text) == expected


def test_byte_at_past_end_reads_terminator() -> None:
    assert codepoint.byte_at(b"ab", 1) == ord("b")
    assert codepoint.byte_at(b"ab", 2) == 0
    assert codepoint.byte_at(b"ab", 50) == 0


def test_as_buffer() -> None:
    assert codepoint.as_buffer("é") == b"\xc3\xa9"
    raw = bytearray(b"abc")
    assert codepoint.as_buffer(raw) is raw
    assert codepoint.as_buffer(memoryview(b"ab"))[1] == ord("b")
    with pytest.raises(TypeError):
        codepoint.as_buffer(42)  # type: ignore[arg-type]
