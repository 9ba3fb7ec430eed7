"""Single-byte fast path for wildcard matching.

Treats every byte as a whole unit.  Only use it when both inputs are known to
be ASCII; on such input it agrees with :func:`fastwild.engine.matcher.match`.
"""
from __future__ import annotations

from .codepoint import QUESTION, STAR, Buffer, as_buffer, byte_at


def match_ascii(pattern: str | Buffer, subject: str | Buffer) -> bool:
    wild = as_buffer(pattern)
    tame = as_buffer(subject)
    p = s = 0

    while True:
        if not byte_at(tame, s):
            while byte_at(wild, p) == STAR:
                p += 1
            return not byte_at(wild, p)
        lead = byte_at(wild, p)
        if lead == STAR:
            p += 1
            while byte_at(wild, p) == STAR:
                p += 1
            lead = byte_at(wild, p)
            if not lead:
                return True
            if lead != QUESTION:
                while lead != byte_at(tame, s):
                    s += 1
                    if not byte_at(tame, s):
                        return False
            p_back, s_back = p, s
            break
        if lead != byte_at(tame, s) and lead != QUESTION:
            return False
        p += 1
        s += 1

    while True:
        lead = byte_at(wild, p)
        if lead == STAR:
            p += 1
            while byte_at(wild, p) == STAR:
                p += 1
            lead = byte_at(wild, p)
            if not lead:
                return True
            if not byte_at(tame, s):
                return False
            if lead != QUESTION:
                while lead != byte_at(tame, s):
                    s += 1
                    if not byte_at(tame, s):
                        return False
            p_back, s_back = p, s
        elif lead != byte_at(tame, s) and lead != QUESTION:
            if not byte_at(tame, s):
                return False
            while byte_at(wild, p_back) == QUESTION:
                p_back += 1
                s_back += 1
            p = p_back
            lead = byte_at(wild, p)
            s_back += 1
            while lead != byte_at(tame, s_back):
                if not byte_at(tame, s_back):
                    return False
                s_back += 1
            s = s_back

        if not byte_at(tame, s):
            return not byte_at(wild, p)
        p += 1
        s += 1


__all__ = ["match_ascii"]
