"""Match controller: owns the active match and routes roll events through it.

A Session is created once by the host and lives for the whole process. It
holds exactly one match at a time; configuring a new match discards the
current one without persisting it. Only a match that reaches its final round
is written to history.

All public methods take the same lock, so a host may deliver roll events
from one thread while rendering state from another.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import structlog

from brawl.logic.aggregator import RollAggregator
from brawl.logic.enums import MatchMode, MatchPhase, OfferResult, Side
from brawl.logic.exceptions import HistoryLoadError
from brawl.logic.identity import KNOWN_WORLDS, normalize, resolve_identity
from brawl.logic.roster import SoloRoster, TagRoster
from brawl.logic.rounds import resolve_round
from brawl.logic.settings import OBSERVER_ALIAS
from brawl.logic.types import MatchSnapshot, MatchSummary

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from brawl.logic.roster import RosterPolicy
    from brawl.logic.types import PendingRoll, RoundRecord
    from brawl.session.history import HistoryStore

logger = structlog.get_logger()

WINNER_IN_PROGRESS = "in progress"
WINNER_TIE = "tie"


class Session:
    """Single active brawl match plus the match history."""

    def __init__(
        self,
        history: HistoryStore,
        observer_name: Callable[[], str | None] | None = None,
        known_suffixes: Iterable[str] = KNOWN_WORLDS,
    ) -> None:
        self._lock = threading.RLock()
        self._history = history
        self._observer_name = observer_name
        self._known_suffixes = tuple(known_suffixes)
        self._policy: RosterPolicy | None = None
        self._aggregator: RollAggregator | None = None
        self._rounds: list[RoundRecord] = []
        self._totals: dict[Side, int] = dict.fromkeys(Side, 0)
        self._display_names: dict[str, str] = {}  # identity -> name as configured
        self._log = logger

    # --- Configuration ---

    def configure_solo(self, black_raw_name: str, blue_raw_name: str) -> None:
        """Start a fresh Solo match between two players."""
        policy = SoloRoster(black=normalize(black_raw_name), blue=normalize(blue_raw_name))
        with self._lock:
            self._install(policy, (black_raw_name, blue_raw_name))

    def configure_teams(self, black_roster: Sequence[str], blue_roster: Sequence[str]) -> None:
        """Start a fresh Tag match between two teams.

        Raises ValueError when an identity appears on both teams.
        """
        policy = TagRoster.from_identities(
            (normalize(name) for name in black_roster),
            (normalize(name) for name in blue_roster),
        )
        with self._lock:
            self._install(policy, (*black_roster, *blue_roster))

    def _install(self, policy: RosterPolicy, raw_names: Iterable[str]) -> None:
        if self._rounds and self.phase is MatchPhase.IN_PROGRESS:
            self._log.info("discarding unfinished match", rounds_played=len(self._rounds))
        self._policy = policy
        self._aggregator = RollAggregator(policy)
        self._rounds = []
        self._totals = dict.fromkeys(Side, 0)
        self._display_names = {}
        for raw_name in raw_names:
            identity = normalize(raw_name)
            if identity:
                self._display_names.setdefault(identity, raw_name.strip())
        self._log = logger.bind(
            mode=policy.mode,
            black=policy.side_name(Side.BLACK),
            blue=policy.side_name(Side.BLUE),
        )
        self._log.info("match configured", rounds_to_play=policy.rounds_to_play, ready=policy.is_ready)

    # --- Event ingestion ---

    def ingest(self, raw_name: str, roll: int) -> OfferResult:
        """Offer a parsed roll event to the active match.

        Events that do not apply to the match are reported through the
        return value only. If the roll completes the final round, the match
        summary is appended to history before this returns; a failed write
        raises HistorySaveError after the finished state is committed.
        """
        with self._lock:
            policy, aggregator = self._policy, self._aggregator
            if self.phase is not MatchPhase.IN_PROGRESS or policy is None or aggregator is None:
                self._log.debug("roll ignored: match not active", raw_name=raw_name, roll=roll, phase=self.phase)
                return OfferResult.MATCH_NOT_ACTIVE

            name = raw_name.strip()
            if name.lower() == OBSERVER_ALIAS:
                resolved = self._observer_name() if self._observer_name is not None else None
                if not resolved:
                    self._log.debug("roll ignored: local player name not available", raw_name=raw_name)
                    return OfferResult.NOT_RECOGNIZED
                name = resolved

            identity = resolve_identity(name, self._known_suffixes)
            self._log.debug("incoming roll", raw_name=raw_name, identity=identity, roll=roll)

            result = aggregator.offer(identity, roll)
            if result is OfferResult.ACCEPTED and aggregator.is_complete:
                self._complete_round(policy, aggregator)
            return result

    def _complete_round(self, policy: RosterPolicy, aggregator: RollAggregator) -> None:
        record = resolve_round(aggregator.pending(), self.current_round, policy.side_name)
        self._totals[record.attacker_side] += record.damage_dealt
        self._rounds.append(record)
        aggregator.clear()
        self._log.info(
            "round resolved",
            round_number=record.round_number,
            attacker=record.attacker_side,
            attacker_roll=record.attacker_roll,
            defender_roll=record.defender_roll,
            damage=record.damage_dealt,
        )
        if len(self._rounds) == policy.rounds_to_play:
            self._finish_match()

    def _finish_match(self) -> None:
        summary = self._summary()
        self._log.info(
            "match finished",
            winner=self.winner(),
            black_total=summary.black_damage,
            blue_total=summary.blue_damage,
        )
        self._history.append(summary)

    def _summary(self) -> MatchSummary:
        return MatchSummary(
            black_name=self.side_name(Side.BLACK),
            blue_name=self.side_name(Side.BLUE),
            black_damage=self._totals[Side.BLACK],
            blue_damage=self._totals[Side.BLUE],
            rounds=tuple(self._rounds),
        )

    # --- History ---

    def load_history(self) -> bool:
        """Load persisted history at startup.

        A malformed document is logged and the session continues with an
        empty history. Returns True when the document loaded cleanly.
        """
        with self._lock:
            try:
                self._history.load()
            except HistoryLoadError:
                logger.exception("failed to load match history, starting empty")
                return False
            return True

    @property
    def history(self) -> tuple[MatchSummary, ...]:
        with self._lock:
            return self._history.entries

    # --- Queries ---

    @property
    def phase(self) -> MatchPhase:
        with self._lock:
            if self._policy is None:
                return MatchPhase.NOT_CONFIGURED
            if not self._policy.is_ready:
                return MatchPhase.CONFIGURED
            if len(self._rounds) >= self._policy.rounds_to_play:
                return MatchPhase.FINISHED
            return MatchPhase.IN_PROGRESS

    @property
    def is_started(self) -> bool:
        return self.phase in (MatchPhase.IN_PROGRESS, MatchPhase.FINISHED)

    @property
    def is_finished(self) -> bool:
        return self.phase is MatchPhase.FINISHED

    @property
    def mode(self) -> MatchMode | None:
        with self._lock:
            return self._policy.mode if self._policy is not None else None

    @property
    def rounds_to_play(self) -> int:
        with self._lock:
            return self._policy.rounds_to_play if self._policy is not None else 0

    @property
    def current_round(self) -> int:
        with self._lock:
            return len(self._rounds) + 1

    @property
    def rounds(self) -> tuple[RoundRecord, ...]:
        with self._lock:
            return tuple(self._rounds)

    @property
    def pending_rolls(self) -> tuple[PendingRoll, ...]:
        with self._lock:
            return self._aggregator.pending() if self._aggregator is not None else ()

    def total_damage(self, side: Side) -> int:
        with self._lock:
            return self._totals[side]

    @property
    def black_total(self) -> int:
        return self.total_damage(Side.BLACK)

    @property
    def blue_total(self) -> int:
        return self.total_damage(Side.BLUE)

    def side_name(self, side: Side) -> str:
        with self._lock:
            return self._policy.side_name(side) if self._policy is not None else ""

    def display_name(self, identity: str) -> str:
        """Return the name an identity was configured with, falling back to the identity itself."""
        with self._lock:
            return self._display_names.get(identity, identity)

    def winning_side(self) -> Side | None:
        with self._lock:
            if not self.is_finished:
                return None
            black, blue = self._totals[Side.BLACK], self._totals[Side.BLUE]
            if black == blue:
                return None
            return Side.BLACK if black > blue else Side.BLUE

    def winner(self) -> str:
        """Return "in progress", "tie", or the winning side's name."""
        with self._lock:
            if not self.is_finished:
                return WINNER_IN_PROGRESS
            side = self.winning_side()
            if side is None:
                return WINNER_TIE
            return self.side_name(side)

    def snapshot(self) -> MatchSnapshot:
        """Take a consistent, immutable view of the active match."""
        with self._lock:
            return MatchSnapshot(
                mode=self.mode,
                phase=self.phase,
                rounds_to_play=self.rounds_to_play,
                current_round=self.current_round,
                black_name=self.side_name(Side.BLACK),
                blue_name=self.side_name(Side.BLUE),
                black_total=self._totals[Side.BLACK],
                blue_total=self._totals[Side.BLUE],
                rounds=tuple(self._rounds),
                pending=self.pending_rolls,
                winner=self.winner(),
            )
