"""fastwild: UTF-8 aware wildcard matching."""

from collections.abc import Sequence

from .engine.ascii import match_ascii
from .engine.codepoint import count as unit_count
from .engine.matcher import match, match_bounded
from .engine.models import MatchStats, StepLimitExceeded
from .engine.validate import EncodingError, match_checked


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`fastwild.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "EncodingError",
    "MatchStats",
    "StepLimitExceeded",
    "main",
    "match",
    "match_ascii",
    "match_bounded",
    "match_checked",
    "unit_count",
]
