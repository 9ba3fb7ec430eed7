"""Optional UTF-8 well-formedness checks run ahead of the matchers."""
from __future__ import annotations

from .codepoint import Buffer, as_buffer, byte_at
from .matcher import match


class EncodingError(ValueError):
    """Raised for a buffer that is not well-formed UTF-8."""

    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(f"ill-formed UTF-8 at byte {offset}: {reason}")
        self.offset = offset
        self.reason = reason


def _trail_ranges(lead: int) -> tuple[tuple[int, int], ...] | None:
    """Allowed ranges for each byte after ``lead`` (Unicode table 3-7)."""
    if lead <= 0x7F:
        return ()
    if 0xC2 <= lead <= 0xDF:
        return ((0x80, 0xBF),)
    if lead == 0xE0:
        return ((0xA0, 0xBF), (0x80, 0xBF))
    if lead == 0xED:
        return ((0x80, 0x9F), (0x80, 0xBF))
    if 0xE1 <= lead <= 0xEF:
        return ((0x80, 0xBF), (0x80, 0xBF))
    if lead == 0xF0:
        return ((0x90, 0xBF), (0x80, 0xBF), (0x80, 0xBF))
    if 0xF1 <= lead <= 0xF3:
        return ((0x80, 0xBF), (0x80, 0xBF), (0x80, 0xBF))
    if lead == 0xF4:
        return ((0x80, 0x8F), (0x80, 0xBF), (0x80, 0xBF))
    return None


def check_utf8(buf: str | Buffer) -> None:
    """Scan up to the terminator and raise :class:`EncodingError` on the first bad unit."""
    buf = as_buffer(buf)
    pos = 0
    lead = byte_at(buf, pos)
    while lead:
        ranges = _trail_ranges(lead)
        if ranges is None:
            raise EncodingError(pos, f"invalid lead byte 0x{lead:02X}")
        for offset, (low, high) in enumerate(ranges, start=1):
            trail = byte_at(buf, pos + offset)
            if not low <= trail <= high:
                raise EncodingError(pos, f"bad continuation byte 0x{trail:02X} at offset {offset}")
        pos += 1 + len(ranges)
        lead = byte_at(buf, pos)


def is_well_formed(buf: str | Buffer) -> bool:
    try:
        check_utf8(buf)
    except EncodingError:
        return False
    return True


def match_checked(pattern: str | Buffer, subject: str | Buffer) -> bool:
    """Validate both inputs, then :func:`~fastwild.engine.matcher.match` them."""
    wild = as_buffer(pattern)
    tame = as_buffer(subject)
    check_utf8(wild)
    check_utf8(tame)
    return match(wild, tame)


__all__ = ["EncodingError", "check_utf8", "is_well_formed", "match_checked"]
