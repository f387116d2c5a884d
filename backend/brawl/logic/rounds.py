"""
Round resolution for brawl matches.

Roles alternate strictly by round number: Black attacks on odd rounds and
Blue on even rounds, whatever happened before. The attacker deals the amount
by which its roll total beats the defender's; a defender never deals damage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from brawl.logic.enums import Side
from brawl.logic.types import RoundRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from brawl.logic.types import PendingRoll


def role_assignment(round_number: int) -> tuple[Side, Side]:
    """Return (attacker, defender) for a 1-based round number."""
    if round_number < 1:
        raise ValueError(f"round_number must be >= 1, got {round_number}")
    attacker = Side.BLACK if round_number % 2 == 1 else Side.BLUE
    return attacker, attacker.opponent


def side_total(pending: Iterable[PendingRoll], side: Side) -> int:
    """Sum the rolls collected for ``side``. Rolls are taken as-is, including zero or negative values."""
    return sum(entry.roll for entry in pending if entry.side is side)


def compute_damage(attacker_roll: int, defender_roll: int) -> int:
    return max(attacker_roll - defender_roll, 0)


def resolve_round(
    pending: Iterable[PendingRoll],
    round_number: int,
    side_name: Callable[[Side], str],
) -> RoundRecord:
    """Build the record for a completed round from its collected rolls."""
    entries = tuple(pending)
    attacker, defender = role_assignment(round_number)
    attacker_roll = side_total(entries, attacker)
    defender_roll = side_total(entries, defender)
    return RoundRecord(
        round_number=round_number,
        attacker_side=attacker,
        attacker=side_name(attacker),
        attacker_roll=attacker_roll,
        defender_side=defender,
        defender=side_name(defender),
        defender_roll=defender_roll,
        damage_dealt=compute_damage(attacker_roll, defender_roll),
    )
