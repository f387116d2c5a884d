"""
Roster policies: which identities play for which side, and how many rolls
a round needs from each side.

Solo and Tag matches differ only here. The aggregator and the round engine
work against RosterPolicy and never branch on the match mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from brawl.logic.enums import MatchMode, Side
from brawl.logic.settings import BLACK_TEAM_NAME, BLUE_TEAM_NAME, ROUNDS_TO_PLAY

if TYPE_CHECKING:
    from collections.abc import Iterable


class RosterPolicy(Protocol):
    """Side membership and per-round roll quota for one match."""

    @property
    def mode(self) -> MatchMode: ...

    @property
    def rounds_to_play(self) -> int: ...

    @property
    def is_ready(self) -> bool: ...

    def membership(self, identity: str) -> Side | None: ...

    def expected_counts(self) -> dict[Side, int]: ...

    def side_name(self, side: Side) -> str: ...


@dataclass(frozen=True)
class SoloRoster:
    """One identity per side. The identity keys double as the side names."""

    black: str
    blue: str

    def __post_init__(self) -> None:
        if self.black and self.black == self.blue:
            raise ValueError(f"'{self.black}' cannot play on both sides")

    @property
    def mode(self) -> MatchMode:
        return MatchMode.SOLO

    @property
    def rounds_to_play(self) -> int:
        return ROUNDS_TO_PLAY[MatchMode.SOLO]

    @property
    def is_ready(self) -> bool:
        return bool(self.black) and bool(self.blue)

    def membership(self, identity: str) -> Side | None:
        if not identity:
            return None
        if identity == self.black:
            return Side.BLACK
        if identity == self.blue:
            return Side.BLUE
        return None

    def expected_counts(self) -> dict[Side, int]:
        return {Side.BLACK: 1, Side.BLUE: 1}

    def side_name(self, side: Side) -> str:
        return self.black if side is Side.BLACK else self.blue


@dataclass(frozen=True)
class TagRoster:
    """Teams of any size; every member rolls once per round."""

    black: tuple[str, ...]
    blue: tuple[str, ...]

    def __post_init__(self) -> None:
        overlap = set(self.black) & set(self.blue)
        if overlap:
            raise ValueError(f"identities cannot play on both sides: {sorted(overlap)}")

    @classmethod
    def from_identities(cls, black: Iterable[str], blue: Iterable[str]) -> TagRoster:
        """Build a roster, dropping empty identities and repeats within a team."""
        return cls(black=_unique(black), blue=_unique(blue))

    @property
    def mode(self) -> MatchMode:
        return MatchMode.TAG

    @property
    def rounds_to_play(self) -> int:
        return ROUNDS_TO_PLAY[MatchMode.TAG]

    @property
    def is_ready(self) -> bool:
        return bool(self.black) and bool(self.blue)

    def membership(self, identity: str) -> Side | None:
        if identity in self.black:
            return Side.BLACK
        if identity in self.blue:
            return Side.BLUE
        return None

    def expected_counts(self) -> dict[Side, int]:
        return {Side.BLACK: len(self.black), Side.BLUE: len(self.blue)}

    def side_name(self, side: Side) -> str:
        return BLACK_TEAM_NAME if side is Side.BLACK else BLUE_TEAM_NAME


def _unique(identities: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(identity for identity in identities if identity))
