"""Host adapter for the game's random-roll chat lines.

The engine consumes parsed (name, roll) pairs. This module turns chat text of
the form "Random! Na'talee Riverspear rolls a 512." into such pairs for hosts
that read chat logs.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from brawl.logic.enums import OfferResult
    from brawl.session.match import Session

logger = structlog.get_logger()

ROLL_LINE = re.compile(r"^Random!\s+(?P<name>.+?)\s+rolls?\s+a\s+(?P<roll>\d+)\.$")


def parse_roll_line(text: str) -> tuple[str, int] | None:
    """Extract (name, roll) from a roll chat line, or None for any other text."""
    match = ROLL_LINE.match(text.strip())
    if match is None:
        return None
    return match.group("name").strip(), int(match.group("roll"))


def feed_lines(session: Session, lines: Iterable[str]) -> Counter[OfferResult]:
    """Feed every roll line to ``session`` and count the outcomes."""
    outcomes: Counter[OfferResult] = Counter()
    for line in lines:
        parsed = parse_roll_line(line)
        if parsed is None:
            if line.strip():
                logger.debug("not a roll line", line=line.strip())
            continue
        name, roll = parsed
        outcomes[session.ingest(name, roll)] += 1
    return outcomes
