"""
Tournament abstractions: Seating, Round and the SeatingStrategy base class.

A Round holds one Seating per table. Every seating strategy implements the
same assign() interface so TournamentState can build rounds without knowing
how players are paired.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class Seating:
    """One table's four players for one round, plus the recorded outcome."""

    table: str
    north: str
    south: str
    west: str
    east: str

    finished: bool = False
    ns_score: int | None = None   # None until the table reports
    we_score: int | None = None
    ns_wins: bool = False

    @property
    def players(self) -> tuple[str, str, str, str]:
        return (self.north, self.south, self.west, self.east)

    def __contains__(self, player: object) -> bool:
        return player in self.players

    def record(self, ns_score: int, we_score: int) -> None:
        """Store a result, replacing any earlier one for this table."""
        self.finished = True
        self.ns_score = ns_score
        self.we_score = we_score
        self.ns_wins = ns_score >= we_score

    def partnership_score(self, player: str) -> int | None:
        """The score of the partnership `player` belongs to, or None if unfinished."""
        if not self.finished:
            return None
        if player in (self.north, self.south):
            return self.ns_score
        if player in (self.west, self.east):
            return self.we_score
        return None


@dataclass
class Round:
    seatings: list[Seating] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        """True when every table has reported (vacuously true with no tables)."""
        return all(seating.finished for seating in self.seatings)

    def find_seating(self, north: str, south: str, west: str, east: str) -> Seating | None:
        # Seats are roles: swapping north and south is a different seating.
        for seating in self.seatings:
            if seating.players == (north, south, west, east):
                return seating
        return None

    def seating_for(self, player: str) -> Seating | None:
        for seating in self.seatings:
            if player in seating:
                return seating
        return None


class SeatingStrategy(ABC):
    """
    Decides which players sit where at the start of every round.

    Implementations receive the previous rounds so history-aware pairings
    (e.g. losers move) can be added without touching Round or TournamentState.
    """

    @abstractmethod
    def assign(
        self,
        players: Sequence[str],
        tables: Sequence[str],
        history: Sequence[Round],
    ) -> list[Seating]:
        """
        Return exactly one Seating per table, in table order, with every
        player seated exactly once. Must not mutate `players`.
        """
        ...  # pragma: no cover
