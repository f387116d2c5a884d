"""Match rules shared by the engine and its hosts."""

from typing import Final

from brawl.logic.enums import MatchMode

SOLO_ROUNDS: Final = 8
TAG_ROUNDS: Final = 6

ROUNDS_TO_PLAY: Final[dict[MatchMode, int]] = {
    MatchMode.SOLO: SOLO_ROUNDS,
    MatchMode.TAG: TAG_ROUNDS,
}

# Side names used in Tag matches, where no single identity represents a side.
BLACK_TEAM_NAME: Final = "Black Team"
BLUE_TEAM_NAME: Final = "Blue Team"

# Chat token the game uses for the observing player's own rolls.
OBSERVER_ALIAS: Final = "you"
