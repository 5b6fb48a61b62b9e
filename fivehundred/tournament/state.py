"""
TournamentState: the single source of truth for roster, tables and round history.

All mutations and every read that walks the round history happen under one
re-entrant lock. FastAPI serves sync endpoints from a thread pool, and a
reader must never see a finished round without its successor already drawn.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections import Counter
from dataclasses import dataclass, replace
from typing import Sequence

from fivehundred.errors import (
    ConfigurationInvalid,
    RoundNotFinished,
    SeatingNotFound,
    TournamentComplete,
)
from fivehundred.tournament.base import Round, Seating, SeatingStrategy
from fivehundred.tournament.events import (
    PlayerScores,
    RoundCompleteEvent,
    RoundStartEvent,
    ScoreAppliedEvent,
    TournamentCompleteEvent,
    TournamentEvent,
    TournamentStartEvent,
)
from fivehundred.tournament.random_seating import SEATS_PER_TABLE, RandomSeating

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateSnapshot:
    """A read-only copy of the whole state, safe to serialise outside the lock."""

    round_num: int
    total_rounds: int
    scores: list[PlayerScores]
    rounds: list[Round]


class TournamentState:
    """Round history plus the rules for recording scores and advancing rounds."""

    def __init__(
        self,
        total_rounds: int,
        players: Sequence[str],
        tables: Sequence[str],
        strategy: SeatingStrategy | None = None,
        enforce_total_rounds: bool = False,
    ) -> None:
        _validate(total_rounds, players, tables)

        self.total_rounds = total_rounds
        self.players: tuple[str, ...] = tuple(players)
        self.tables: tuple[str, ...] = tuple(tables)
        self.enforce_total_rounds = enforce_total_rounds

        self._strategy = strategy if strategy is not None else RandomSeating()
        self._lock = threading.RLock()
        self._rounds: list[Round] = []
        self._rounds.append(self._draw_round())

        logger.info(
            "Tournament created: %d players, %d tables, %d rounds",
            len(self.players), len(self.tables), total_rounds,
        )

    # ------------------------------------------------------------------ #
    # Round access                                                         #
    # ------------------------------------------------------------------ #

    @property
    def rounds(self) -> list[Round]:
        """A copy of the round history; changing it doesn't touch the live state."""
        with self._lock:
            return copy.deepcopy(self._rounds)

    def current_round(self) -> Round:
        """A copy of the last round in the history."""
        with self._lock:
            return copy.deepcopy(self._rounds[-1])

    def current_round_number(self) -> int:
        """1-based; keeps counting past total_rounds unless the target is enforced."""
        with self._lock:
            return len(self._rounds)

    @property
    def is_complete(self) -> bool:
        """True once total_rounds rounds have every table reported."""
        with self._lock:
            completed = len(self._rounds) - (0 if self._rounds[-1].finished else 1)
            return completed >= self.total_rounds

    # ------------------------------------------------------------------ #
    # Mutations                                                            #
    # ------------------------------------------------------------------ #

    def apply_score(
        self,
        north: str,
        south: str,
        west: str,
        east: str,
        ns_score: int,
        we_score: int,
    ) -> Seating:
        """
        Record a table's result in the current round. Returns a copy of the
        updated seating.

        Raises:
            SeatingNotFound: no table in the current round has exactly these
                players in these seats. Nothing is changed.
        """
        with self._lock:
            seating = self._rounds[-1].find_seating(north, south, west, east)
            if seating is None:
                logger.warning(
                    "Rejected score for unknown seating N %s, S %s, W %s, E %s",
                    north, south, west, east,
                )
                raise SeatingNotFound(north, south, west, east)

            seating.record(ns_score, we_score)
            logger.info(
                "Round %d, table %s: NS %d, WE %d",
                len(self._rounds), seating.table, ns_score, we_score,
            )
            return replace(seating)

    def advance_round(self) -> Round:
        """
        Draw the next round. Returns a copy of it.

        Raises:
            RoundNotFinished: some table of the current round hasn't reported.
            TournamentComplete: the round target is enforced and reached.
        """
        with self._lock:
            if not self._rounds[-1].finished:
                raise RoundNotFinished(len(self._rounds))
            if self._target_reached():
                raise TournamentComplete(self.total_rounds)

            new_round = self._draw_round()
            self._rounds.append(new_round)
            logger.info("Advanced to round %d", len(self._rounds))
            return copy.deepcopy(new_round)

    def record_score(
        self,
        north: str,
        south: str,
        west: str,
        east: str,
        ns_score: int,
        we_score: int,
    ) -> list[TournamentEvent]:
        """
        Apply a score and, if that completes the round, draw the next one.

        Both steps happen under one lock acquisition. Returns the events that
        occurred, in order. A correction to a round that had already finished
        (only possible once an enforced target is reached) yields just the
        ScoreAppliedEvent.
        """
        with self._lock:
            round_num = len(self._rounds)
            current = self._rounds[-1]
            was_finished = current.finished
            existing = current.find_seating(north, south, west, east)
            overwrote = existing is not None and existing.finished

            seating = self.apply_score(north, south, west, east, ns_score, we_score)
            events: list[TournamentEvent] = [
                ScoreAppliedEvent(round_num=round_num, seating=seating, overwrote=overwrote)
            ]

            if was_finished or not current.finished:
                return events

            standings = self._standings()
            events.append(RoundCompleteEvent(round_num=round_num, standings=standings))

            if self._target_reached():
                events.append(
                    TournamentCompleteEvent(
                        total_rounds=self.total_rounds, final_standings=standings
                    )
                )
                return events

            new_round = self.advance_round()
            events.append(self._round_start_event(len(self._rounds), new_round))
            return events

    # ------------------------------------------------------------------ #
    # Reporting                                                            #
    # ------------------------------------------------------------------ #

    def scores(self, player: str) -> list[int]:
        """
        The player's partnership score for each round, starting from round 1.

        Stops at the first round where the player's table hasn't reported, so
        the result is always a prefix of the round history.
        """
        with self._lock:
            scores: list[int] = []
            for rnd in self._rounds:
                seating = rnd.seating_for(player)
                if seating is None or not seating.finished:
                    break
                scores.append(seating.partnership_score(player))
            return scores

    def snapshot(self) -> StateSnapshot:
        with self._lock:
            return StateSnapshot(
                round_num=len(self._rounds),
                total_rounds=self.total_rounds,
                scores=self._standings(),
                rounds=copy.deepcopy(self._rounds),
            )

    def opening_events(self) -> list[TournamentEvent]:
        """Events describing the tournament as it stood when round 1 was drawn."""
        with self._lock:
            return [
                TournamentStartEvent(
                    players=list(self.players),
                    tables=list(self.tables),
                    total_rounds=self.total_rounds,
                ),
                self._round_start_event(1, self._rounds[0]),
            ]

    # ------------------------------------------------------------------ #
    # Internal helpers                                                     #
    # ------------------------------------------------------------------ #

    def _draw_round(self) -> Round:
        return Round(
            seatings=self._strategy.assign(self.players, self.tables, list(self._rounds))
        )

    def _target_reached(self) -> bool:
        return self.enforce_total_rounds and len(self._rounds) >= self.total_rounds

    def _standings(self) -> list[PlayerScores]:
        return [PlayerScores(player=p, scores=self.scores(p)) for p in self.players]

    def _round_start_event(self, round_num: int, rnd: Round) -> RoundStartEvent:
        return RoundStartEvent(
            round_num=round_num,
            total_rounds=self.total_rounds,
            seatings=[replace(s) for s in rnd.seatings],
        )


def _validate(total_rounds: int, players: Sequence[str], tables: Sequence[str]) -> None:
    if total_rounds < 1:
        raise ConfigurationInvalid(f"total_rounds must be >= 1, got {total_rounds}")
    if not tables:
        raise ConfigurationInvalid("At least one table is required.")
    if len(players) != SEATS_PER_TABLE * len(tables):
        raise ConfigurationInvalid(
            f"{len(tables)} tables need exactly {SEATS_PER_TABLE * len(tables)} players, "
            f"got {len(players)}."
        )
    duplicates = sorted(name for name, count in Counter(players).items() if count > 1)
    if duplicates:
        raise ConfigurationInvalid(f"Duplicate players in roster: {', '.join(duplicates)}")
