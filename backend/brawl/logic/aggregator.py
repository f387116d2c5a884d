"""Pending round buffer: collects one roll per rostered identity per round."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from brawl.logic.enums import OfferResult, Side
from brawl.logic.types import PendingRoll

if TYPE_CHECKING:
    from brawl.logic.roster import RosterPolicy

logger = structlog.get_logger()


class RollAggregator:
    """Buffer rolls for the round in progress.

    Entries are keyed by identity and kept in arrival order. The first roll
    from an identity wins; later rolls in the same round are ignored. The
    round is complete when each side has exactly the number of rolls the
    roster policy expects (a missing teammate stalls the round).
    """

    def __init__(self, policy: RosterPolicy) -> None:
        self._policy = policy
        self._pending: dict[str, PendingRoll] = {}

    def offer(self, identity: str, roll: int) -> OfferResult:
        """Record ``roll`` for ``identity`` if it is rostered and has not rolled yet."""
        side = self._policy.membership(identity)
        if side is None:
            logger.debug("roll ignored: identity not rostered", identity=identity, roll=roll)
            return OfferResult.NOT_RECOGNIZED
        if identity in self._pending:
            logger.debug(
                "roll ignored: already rolled this round",
                identity=identity,
                roll=roll,
                kept_roll=self._pending[identity].roll,
            )
            return OfferResult.DUPLICATE
        self._pending[identity] = PendingRoll(identity=identity, roll=roll, side=side)
        logger.debug("roll accepted", identity=identity, roll=roll, side=side)
        return OfferResult.ACCEPTED

    def counts(self) -> dict[Side, int]:
        counts = dict.fromkeys(Side, 0)
        for entry in self._pending.values():
            counts[entry.side] += 1
        return counts

    @property
    def is_complete(self) -> bool:
        return self.counts() == self._policy.expected_counts()

    def pending(self) -> tuple[PendingRoll, ...]:
        return tuple(self._pending.values())

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
