"""
Pydantic models for brawl data that crosses component boundaries.

RoundRecord and MatchSummary are also the persisted history format. Their
JSON field names are PascalCase so history files written by the
in-game plugin load unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal

from brawl.logic.enums import MatchMode, MatchPhase, Side

_HISTORY_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_pascal)


class PendingRoll(BaseModel):
    """A roll collected for the round in progress."""

    model_config = ConfigDict(frozen=True)

    identity: str
    roll: int
    side: Side


class RoundRecord(BaseModel):
    """Outcome of one resolved round."""

    model_config = _HISTORY_MODEL_CONFIG

    round_number: int = Field(ge=1)
    attacker_side: Side
    attacker: str
    attacker_roll: int
    defender_side: Side
    defender: str
    defender_roll: int
    damage_dealt: int = Field(ge=0)

    @model_validator(mode="before")
    @classmethod
    def _fill_legacy_sides(cls, data: Any) -> Any:
        """Derive attacker/defender sides for records that predate the side fields."""
        if not isinstance(data, dict):
            return data
        if any(key in data for key in ("AttackerSide", "attacker_side")):
            return data
        round_number = data.get("RoundNumber", data.get("round_number"))
        if not isinstance(round_number, int) or round_number < 1:
            return data

        from brawl.logic.rounds import role_assignment  # noqa: PLC0415

        attacker_side, defender_side = role_assignment(round_number)
        return {**data, "AttackerSide": attacker_side, "DefenderSide": defender_side}


class MatchSummary(BaseModel):
    """Snapshot of a finished match as stored in history."""

    model_config = _HISTORY_MODEL_CONFIG

    black_name: str
    blue_name: str
    black_damage: int = Field(ge=0)
    blue_damage: int = Field(ge=0)
    rounds: tuple[RoundRecord, ...] = ()


class MatchSnapshot(BaseModel):
    """Read-only view of the active match for hosts and displays."""

    model_config = ConfigDict(frozen=True)

    mode: MatchMode | None
    phase: MatchPhase
    rounds_to_play: int
    current_round: int
    black_name: str
    blue_name: str
    black_total: int
    blue_total: int
    rounds: tuple[RoundRecord, ...]
    pending: tuple[PendingRoll, ...]
    winner: str
