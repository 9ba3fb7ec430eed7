"""Wildcard matching over UTF-8 encoded buffers.

Both matchers compare a pattern (``wild``) against a subject (``tame``) one
code point at a time.  ``?`` matches exactly one code point and ``*`` matches
any run of them, including none.  There is no escape syntax for a literal
``*`` or ``?``.

The search is iterative and keeps a single fallback pair: the pattern
position just after the latest ``*`` and the subject position being tried
for it.  A failed continuation only ever moves the subject half of that pair
forward, so the pattern is never re-read before its latest ``*`` and the
work is bounded by pattern length times subject length.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Tuple

from .codepoint import (
    QUESTION,
    STAR,
    Buffer,
    advance,
    advance_and_equal,
    as_buffer,
    byte_at,
    equal,
)
from .models import MatchStats

Compare = Callable[[Buffer, int, Buffer, int], bool]
StepCompare = Callable[[Buffer, int, Buffer, int], Tuple[int, bool]]


def _comparators(stats: MatchStats | None) -> tuple[Compare, StepCompare]:
    if stats is None:
        return equal, advance_and_equal
    return stats.counted(equal), stats.counted(advance_and_equal)


def _skip_stars(wild: Buffer, pos: int) -> int:
    while byte_at(wild, pos) == STAR:
        pos += 1
    return pos


def match(pattern: str | Buffer, subject: str | Buffer, *, stats: MatchStats | None = None) -> bool:
    """Return whether ``subject`` matches the wildcard ``pattern``.

    Both sequences end at their first NUL byte or at the end of the buffer.
    Text arguments are encoded as UTF-8 first.
    """
    wild = as_buffer(pattern)
    tame = as_buffer(subject)
    same, step_same = _comparators(stats)
    p = s = 0

    # Find a first wildcard, if one exists, and the beginning of any
    # prospectively matching sequence after it.
    while True:
        if not byte_at(tame, s):
            # "ab" matches "ab*" but "abcd" doesn't match "abc".
            return not byte_at(wild, _skip_stars(wild, p))
        lead = byte_at(wild, p)
        if lead == STAR:
            p = _skip_stars(wild, p)
            if not byte_at(wild, p):
                return True  # "abc*" matches "abcd".
            if byte_at(wild, p) != QUESTION:
                while not same(wild, p, tame, s):
                    s, more = advance(tame, s)
                    if not more:
                        return False  # "a*bc" doesn't match "ab".
            p_back, s_back = p, s
            break
        if lead != QUESTION and not same(wild, p, tame, s):
            return False  # "abc" doesn't match "abd".
        p, _ = advance(wild, p)
        s, _ = advance(tame, s)

    # Find any further wildcards and any further matching sequences.
    while True:
        lead = byte_at(wild, p)
        if lead == STAR:
            p = _skip_stars(wild, p)
            if not byte_at(wild, p):
                return True  # "ab*c*" matches "abcd".
            if not byte_at(tame, s):
                return False  # "*bcd*" doesn't match "abc".
            if byte_at(wild, p) != QUESTION:
                while not same(wild, p, tame, s):
                    s, more = advance(tame, s)
                    if not more:
                        return False  # "a*b*c" doesn't match "ab".
            p_back, s_back = p, s
        elif lead != QUESTION and not same(wild, p, tame, s):
            if not byte_at(tame, s):
                return False  # "*bcd" doesn't match "abc".
            # Each '?' after the '*' already took one unit on the first try.
            while byte_at(wild, p_back) == QUESTION:
                p_back += 1
                s_back, _ = advance(tame, s_back)
            p = p_back
            s_back, found = step_same(wild, p, tame, s_back)
            while not found:
                if not byte_at(tame, s_back):
                    return False  # "*a*b" doesn't match "ac".
                s_back, found = step_same(wild, p, tame, s_back)
            s = s_back

        if not byte_at(tame, s):
            # "*bc" matches "abc" but not "abcd".
            return not byte_at(wild, p)
        p, _ = advance(wild, p)
        s, _ = advance(tame, s)


def _spent(buf: Buffer, pos: int, consumed: int, limit: int) -> bool:
    return consumed >= limit or not byte_at(buf, pos)


def match_bounded(
    pattern: str | Buffer,
    subject: str | Buffer,
    pattern_limit: int,
    subject_limit: int,
    *,
    stats: MatchStats | None = None,
) -> bool:
    """Like :func:`match`, reading at most the given number of code points.

    A sequence ends at its limit or at a NUL byte, whichever comes first.
    The limits must not exceed what the buffers actually hold.
    """
    if pattern_limit < 0 or subject_limit < 0:
        raise ValueError("unit limits must be non-negative")
    wild = as_buffer(pattern)
    tame = as_buffer(subject)
    same, step_same = _comparators(stats)
    p = s = 0
    pn = sn = 0

    while True:
        if _spent(tame, s, sn, subject_limit):
            while pn < pattern_limit and byte_at(wild, p) == STAR:
                p += 1
                pn += 1
            return _spent(wild, p, pn, pattern_limit)
        if _spent(wild, p, pn, pattern_limit):
            return False  # "abc" doesn't match "abcd".
        lead = byte_at(wild, p)
        if lead == STAR:
            while pn < pattern_limit and byte_at(wild, p) == STAR:
                p += 1
                pn += 1
            if _spent(wild, p, pn, pattern_limit):
                return True
            if byte_at(wild, p) != QUESTION:
                while not same(wild, p, tame, s):
                    s, _ = advance(tame, s)
                    sn += 1
                    if _spent(tame, s, sn, subject_limit):
                        return False
            p_back, s_back = p, s
            pn_back, sn_back = pn, sn
            break
        if lead != QUESTION and not same(wild, p, tame, s):
            return False
        p, _ = advance(wild, p)
        s, _ = advance(tame, s)
        pn += 1
        sn += 1

    while True:
        wild_spent = _spent(wild, p, pn, pattern_limit)
        tame_spent = _spent(tame, s, sn, subject_limit)
        lead = 0 if wild_spent else byte_at(wild, p)
        if lead == STAR:
            while pn < pattern_limit and byte_at(wild, p) == STAR:
                p += 1
                pn += 1
            if _spent(wild, p, pn, pattern_limit):
                return True
            if tame_spent:
                return False
            if byte_at(wild, p) != QUESTION:
                while not same(wild, p, tame, s):
                    s, _ = advance(tame, s)
                    sn += 1
                    if _spent(tame, s, sn, subject_limit):
                        return False
            p_back, s_back = p, s
            pn_back, sn_back = pn, sn
        elif lead != QUESTION and not tame_spent and (wild_spent or not same(wild, p, tame, s)):
            while pn_back < pattern_limit and byte_at(wild, p_back) == QUESTION:
                p_back += 1
                pn_back += 1
                s_back, _ = advance(tame, s_back)
                sn_back += 1
            p, pn = p_back, pn_back
            wild_spent = _spent(wild, p, pn, pattern_limit)
            while True:
                s_back, found = step_same(wild, p, tame, s_back)
                sn_back += 1
                if _spent(tame, s_back, sn_back, subject_limit):
                    if wild_spent:
                        break
                    return False
                if found and not wild_spent:
                    break
            s, sn = s_back, sn_back

        if _spent(tame, s, sn, subject_limit):
            return _spent(wild, p, pn, pattern_limit)
        p, _ = advance(wild, p)
        s, _ = advance(tame, s)
        pn += 1
        sn += 1


__all__ = ["match", "match_bounded"]
