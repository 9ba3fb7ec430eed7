"""UTF-8 code point cursor primitives.

Positions are plain integer offsets into a borrowed byte buffer.  Reading at
or past the end of the buffer yields ``0``, so the end of a Python buffer
behaves exactly like a terminating NUL byte, and an embedded NUL ends the
sequence early.

PERFORMS NO UTF-8 VALIDATION OTHER THAN TERMINATOR CHECKING.  Trailing bytes
of a multi-byte unit are assumed to be continuation bytes; see
:mod:`fastwild.engine.validate` for a checking pre-pass.
"""
from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]

# Lead byte ranges, per the UTF-8 encoding standard.  Anything up to 0x7F is
# an entire 1-byte unit and is not checked separately.
SINGLETON_LIMIT = 0xBF  # 10nnnnnn  (an intra-code-point byte)
TWOFER_LIMIT = 0xDF  # 110nnnnn  (first of a 2-byte code point)
THREESOME_LIMIT = 0xEF  # 1110nnnn  (first of a 3-byte code point)

_EXTENSION_LIMITS = (SINGLETON_LIMIT, TWOFER_LIMIT, THREESOME_LIMIT)

STAR = 0x2A
QUESTION = 0x3F


def as_buffer(value: str | Buffer) -> Buffer:
    """Return a byte buffer for ``value``, encoding text as UTF-8."""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, memoryview):
        return value if value.format == "B" else value.cast("B")
    raise TypeError(f"expected str or a bytes-like buffer, got {type(value).__name__}")


def byte_at(buf: Buffer, pos: int) -> int:
    return buf[pos] if pos < len(buf) else 0


def unit_width(buf: Buffer, pos: int) -> int:
    """Byte width of the unit at ``pos``; ``0`` on the terminator.

    Each byte past the lead is taken only while it is non-zero, so a unit
    truncated by a terminator stops short instead of stepping over it.
    """
    lead = byte_at(buf, pos)
    if not lead:
        return 0
    width = 1
    for limit in _EXTENSION_LIMITS:
        if lead <= limit or not byte_at(buf, pos + width):
            break
        width += 1
    return width


def advance(buf: Buffer, pos: int) -> tuple[int, bool]:
    """Step past one unit; report whether another unit follows."""
    pos += unit_width(buf, pos)
    return pos, byte_at(buf, pos) != 0


def equal(buf_a: Buffer, pos_a: int, buf_b: Buffer, pos_b: int) -> bool:
    """Compare two units byte for byte, sized by the unit at ``pos_a``."""
    lead = byte_at(buf_a, pos_a)
    if lead != byte_at(buf_b, pos_b):
        return False
    for offset, limit in enumerate(_EXTENSION_LIMITS, start=1):
        if lead <= limit:
            return True
        if byte_at(buf_a, pos_a + offset) != byte_at(buf_b, pos_b + offset):
            return False
    return True


def advance_and_equal(buf_a: Buffer, pos_a: int, buf_b: Buffer, pos_b: int) -> tuple[int, bool]:
    """Advance ``pos_b`` one unit, then compare it against the unit at ``pos_a``."""
    pos_b += unit_width(buf_b, pos_b)
    return pos_b, equal(buf_a, pos_a, buf_b, pos_b)


def count(buf: str | Buffer) -> int:
    """Number of units before the terminator."""
    buf = as_buffer(buf)
    if not byte_at(buf, 0):
        return 0
    total = 1
    pos, more = advance(buf, 0)
    while more:
        total += 1
        pos, more = advance(buf, pos)
    return total


__all__ = [
    "Buffer",
    "QUESTION",
    "STAR",
    "advance",
    "advance_and_equal",
    "as_buffer",
    "byte_at",
    "count",
    "equal",
    "unit_width",
]
