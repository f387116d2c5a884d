"""Human-readable match text for hosts: status lines, round lines, and the winner announcement."""

from __future__ import annotations

from typing import TYPE_CHECKING

from brawl.logic.enums import MatchPhase

if TYPE_CHECKING:
    from collections.abc import Callable

    from brawl.logic.types import MatchSnapshot, RoundRecord


def _as_is(name: str) -> str:
    return name


def status_line(snapshot: MatchSnapshot) -> str:
    """Return e.g. "Round 3/8", capped at the last round once the match is over."""
    if snapshot.phase in (MatchPhase.NOT_CONFIGURED, MatchPhase.CONFIGURED):
        return "Waiting for players"
    current = min(snapshot.current_round, snapshot.rounds_to_play)
    return f"Round {current}/{snapshot.rounds_to_play}"


def round_line(record: RoundRecord, display_name: Callable[[str], str] = _as_is) -> str:
    """Return e.g. "Round 1: Alice (50) vs Bob (80) -> Damage: 0"."""
    return (
        f"Round {record.round_number}: {display_name(record.attacker)} ({record.attacker_roll})"
        f" vs {display_name(record.defender)} ({record.defender_roll}) -> Damage: {record.damage_dealt}"
    )


def winner_announcement(snapshot: MatchSnapshot, display_name: Callable[[str], str] = _as_is) -> str | None:
    """Return the party chat announcement for a decided match, or None while undecided or tied."""
    if snapshot.phase is not MatchPhase.FINISHED or snapshot.black_total == snapshot.blue_total:
        return None
    if snapshot.black_total > snapshot.blue_total:
        name, damage = snapshot.black_name, snapshot.black_total
    else:
        name, damage = snapshot.blue_name, snapshot.blue_total
    return f"{display_name(name)} wins the Brawl with {damage} total damage!"
