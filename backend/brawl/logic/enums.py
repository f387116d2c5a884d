"""
String enum definitions for brawl match concepts.
"""

from enum import Enum


class Side(str, Enum):
    """One of the two opposing parties in a match."""

    BLACK = "black"
    BLUE = "blue"

    @property
    def opponent(self) -> "Side":
        return Side.BLUE if self is Side.BLACK else Side.BLACK


class MatchMode(str, Enum):
    """Match format: one player per side, or teams."""

    SOLO = "solo"
    TAG = "tag"


class MatchPhase(str, Enum):
    """Lifecycle of the active match."""

    NOT_CONFIGURED = "not_configured"
    CONFIGURED = "configured"  # rosters set but a side is still empty
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class OfferResult(str, Enum):
    """Outcome of offering a roll event to the active match."""

    ACCEPTED = "accepted"
    DUPLICATE = "duplicate"
    NOT_RECOGNIZED = "not_recognized"
    MATCH_NOT_ACTIVE = "match_not_active"
