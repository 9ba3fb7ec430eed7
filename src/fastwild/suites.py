"""Built-in regression cases for the wildcard matchers.

Each suite is a tuple of :class:`~fastwild.engine.models.Case` entries,
written as ``(subject, pattern, expected)``.
"""
from __future__ import annotations

from .engine.models import Case

_LONG_AB = (
    "abababababababababababababababababababaacacacacaca"
    "cacadaeafagahaiajakalaaaaaaaaaaaaaaaaaffafagaagggagaaaaaaaab"
)
_LONG_A = "a" * 90 + "b"
_ABC_STARS = (
    "abc*abcd*abcde*abcdef*abcdefg*abcdefgh*abcdefghi*a"
    "bcdefghij*abcdefghijk*abcdefghijkl*abcdefghijklm*abcdefghijklmn"
)
_ABC_RUN = (
    "abcabcdabcdeabcdefabcdefgabcdefghabcdefghia"
    "bcdefghijabcdefghijkabcdefghijklabcdefghijklmabcdefghijklmn"
)


def _cases(*rows: tuple[str, str, bool]) -> tuple[Case, ...]:
    return tuple(Case(subject, pattern, expected) for subject, pattern, expected in rows)


WILD = _cases(
    # First wildcard after a total match, then a mismatch after '*'.
    ("Hi", "Hi*", True),
    ("abc", "ab*d", False),
    # Repeating character sequences.
    ("abcccd", "*ccd", True),
    ("mississipissippi", "*issip*ss*", True),
    ("xxxx*zzzzzzzzy*f", "xxxx*zzy*fffff", False),
    ("xxxx*zzzzzzzzy*f", "xxx*zzy*f", True),
    ("xxxxzzzzzzzzyf", "xxxx*zzy*fffff", False),
    ("xxxxzzzzzzzzyf", "xxxx*zzy*f", True),
    ("xyxyxyzyxyz", "xy*z*xyz", True),
    ("mississippi", "*sip*", True),
    ("xyxyxyxyz", "xy*xyz", True),
    ("mississippi", "mi*sip*", True),
    ("ababac", "*abac*", True),
    ("aaazz", "a*zz*", True),
    ("a12b12", "*12*23", False),
    ("a12b12", "a12b", False),
    ("a12b12", "*12*12*", True),
    # Repeating text matching '*' and then '?'.
    ("caaab", "*a?b", True),
    ("aaaaa", "*aa?", True),
    # '*' in the subject.
    ("*", "*", True),
    ("a*abab", "a*b", True),
    ("a*r", "a*", True),
    ("a*ar", "a*aar", False),
    # Double wildcards.
    ("XYXYXYZYXYz", "XY*Z*XYz", True),
    ("missisSIPpi", "*SIP*", True),
    ("mississipPI", "*issip*PI", True),
    ("miSsissippi", "mi*sip*", True),
    ("miSsissippi", "mi*Sip*", False),
    ("abAbac", "*Abac*", True),
    ("aAazz", "a*zz*", True),
    ("A12b12", "*12*23", False),
    ("a12B12", "*12*12*", True),
    ("oWn", "*oWn*", True),
    # No wildcards at all.
    ("bLah", "bLah", True),
    ("bLah", "bLaH", False),
    # Mixed wildcards.
    ("a", "*?", True),
    ("ab", "*?", True),
    ("abc", "*?", True),
    ("a", "??", False),
    ("ab", "?*?", True),
    ("ab", "*?*?*", True),
    ("abc", "?**?*?", True),
    ("abc", "?**?*&?", False),
    ("abcd", "?b*??", True),
    ("abcd", "?a*??", False),
    ("abcd", "?**?c?", True),
    ("abcd", "?**?d?", False),
    ("abcde", "?*b*?*d*?", True),
    # Single-unit matches.
    ("bLah", "bL?h", True),
    ("bLaaa", "bLa?", False),
    ("bLah", "bLa?", True),
    ("bLaH", "?Lah", False),
    ("bLaH", "?LaH", True),
    # Many wildcards.
    (_LONG_A, "a*a*a*a*a*a*aa*aaa*a*a*b", True),
    (_LONG_AB, "*a*b*ba*ca*a*aa*aaa*fa*ga*b*", True),
    (_LONG_AB, "*a*b*ba*ca*a*x*aaa*fa*ga*b*", False),
    (_LONG_AB, "*a*b*ba*ca*aaaa*fa*ga*gggg*b*", False),
    (_LONG_AB, "*a*b*ba*ca*aaaa*fa*ga*ggg*b*", True),
    ("aaabbaabbaab", "*aabbaa*a*", True),
    ("a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", "a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", True),
    ("aaaaaaaaaaaaaaaaa", "*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", True),
    ("aaaaaaaaaaaaaaaa", "*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*a*", False),
    (_ABC_STARS, "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*a            bc*", False),
    (_ABC_STARS, "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*", True),
    ("abc*abcd*abcd*abc*abcd", "abc*abc*abc*abc*abc", False),
    ("abc*abcd*abcd*abc*abcd*abcd*abc*abcd*abc*abc*abcd", "abc*abc*abc*abc*abc*abc*abc*abc*abc*abc*abcd", True),
    ("abc", "********a********b********c********", True),
    ("********a********b********c********", "abc", False),
    ("abc", "********a********b********b********", False),
    ("*abc*", "***a*b*c***", True),
    # Empty input.
    ("", "?", False),
    ("", "*?", False),
    ("", "", True),
    ("a", "", False),
)

TAME = _cases(
    ("abc", "abd", False),
    ("abcccd", "abcccd", True),
    ("mississipissippi", "mississipissippi", True),
    ("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyfffff", False),
    ("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", True),
    ("xxxxzzzzzzzzyf", "xxxxzzy.fffff", False),
    ("xyxyxyzyxyz", "xyxyxyzyxyz", True),
    ("mississippi", "mississippi", True),
    ("xyxyxyxyz", "xyxyxyxyz", True),
    ("m ississippi", "m ississippi", True),
    ("ababac", "ababac?", False),
    ("dababac", "ababac", False),
    ("aaazz", "aaazz", True),
    ("a12b12", "1212", False),
    ("a12b12", "a12b", False),
    ("a12b12", "a12b12", True),
    ("n", "n", True),
    ("aabab", "aabab", True),
    ("ar", "ar", True),
    ("aar", "aaar", False),
    ("XYXYXYZYXYz", "XYXYXYZYXYz", True),
    ("missisSIPpi", "missisSIPpi", True),
    ("mississipPI", "mississipPI", True),
    ("miSsissippi", "miSsissippi", True),
    ("miSsissippi", "miSsisSippi", False),
    ("abAbac", "abAbac", True),
    ("aAazz", "aAazz", True),
    ("A12b12", "A12b123", False),
    ("a12B12", "a12B12", True),
    ("oWn", "oWn", True),
    ("bLah", "bLah", True),
    ("bLah", "bLaH", False),
    # Single '?'.
    ("a", "a", True),
    ("ab", "a?", True),
    ("abc", "ab?", True),
    # Mixed '?'.
    ("a", "??", False),
    ("ab", "??", True),
    ("abc", "???", True),
    ("abcd", "????", True),
    ("abc", "????", False),
    ("abcd", "?b??", True),
    ("abcd", "?a??", False),
    ("abcd", "??c?", True),
    ("abcd", "??d?", False),
    ("abcde", "?b?d*?", True),
    # Longer strings.
    (_LONG_A, _LONG_A, True),
    (_LONG_AB, _LONG_AB, True),
    (_LONG_AB, _LONG_AB.replace("ajakal", "ajaxal"), False),
    (_LONG_AB, _LONG_AB.replace("agaagggag", "agaggggag"), False),
    ("aaabbaabbaab", "aaabbaabbaab", True),
    ("a" * 34, "a" * 34, True),
    ("a" * 17, "a" * 17, True),
    ("a" * 16, "a" * 17, False),
    (_ABC_RUN, "abc" * 17, False),
    (_ABC_RUN, _ABC_RUN, True),
    ("abcabcdabcdabcabcd", "abcabc?abcabcabc", False),
    ("abcabcdabcdabcabcdabcdabcabcdabcabcabcd", "abcabc?abc?abcabc?abc?abc?bc?abc?bc?bcd", True),
    ("?abc?", "?abc?", True),
)

_EMPTY_OTHERS = (
    "abd", "abcccd", "mississipissippi", "xxxxzzzzzzzzyfffff", "xxxxzzzzzzzzyf",
    "xxxxzzy.fffff", "xyxyxyzyxyz", "mississippi", "xyxyxyxyz", "m ississippi",
    "ababac*", "ababac", "aaazz", "1212", "a12b", "a12b12", "n", "aabab", "ar",
    "aaar", "XYXYXYZYXYz", "missisSIPpi", "mississipPI", "miSsissippi",
    "miSsisSippi", "abAbac", "aAazz", "A12b123", "a12B12", "oWn", "bLah", "bLaH",
)

EMPTY = (
    tuple(Case("", other, False) for other in _EMPTY_OTHERS)
    + (Case("", "", True),)
    + tuple(Case(other, "", False) for other in _EMPTY_OTHERS)
)

UTF8 = _cases(
    ("🐂🚀♥🍀貔貅🦁★□√🚦€¥☯🐴😊🍓🐕🎺🧊☀☂🐉", "*☂🐉", True),
    ("▲●🐎✗🤣🐶♫🌻ॐ", "▲●☂*", False),
    ("𓋍𓋔𓎍", "𓋍𓋔?", True),
    ("𓋍𓋔𓎍", "𓋍?𓋔𓎍", False),
    ("♅☌♇", "♅☌♇", True),
    ("⚛⚖☁", "⚛🍄☁", False),
    ("⚛⚖☁O", "⚛⚖☁0", False),
    ("गते गते पारगते पारसंगते बोधि स्वाहा", "गते गते पारगते प????गते बोधि स्वाहा", True),
    (
        "Мне нужно выучить русский язык, чтобы лучше оценить Пушкина.",
        "Мне нужно выучить * язык, чтобы лучше оценить *.",
        True,
    ),
    (
        "אני צריך ללמוד אנגלית כדי להעריך את גינסברג",
        " אני צריך ללמוד אנגלית כדי להעריך את ???????",
        False,
    ),
    (
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
        "* શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.",
        True,
    ),
    (
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
        "??????????? શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.",
        True,
    ),
    (
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
        "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે હિબ્રુ ભાષા શીખવી પડશે.",
        False,
    ),
    # Code points whose scalar values end in the bytes of '*' and '?'.
    ("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿ", True),
    ("ḪؿUἪꜿ", "ḪؿꜪἪꜿ", False),
    ("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿЖ", False),
    ("ḪؿꜪἪꜿ", "ЬḪؿꜪἪꜿ", False),
    ("ḪؿꜪἪꜿ", "?ؿꜪ*ꜿ", True),
)

SUITES: dict[str, tuple[Case, ...]] = {
    "tame": TAME,
    "empty": EMPTY,
    "wild": WILD,
    "utf8": UTF8,
}

__all__ = ["EMPTY", "SUITES", "TAME", "UTF8", "WILD"]
