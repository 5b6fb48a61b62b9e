"""
Tournament event dataclasses: the shared language between TournamentState and
its consumers (server console, log, tests).

All events are frozen and carry copies of the seatings they describe, so they
stay accurate after the live state moves on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from fivehundred.tournament.base import Seating


@dataclass(frozen=True)
class PlayerScores:
    """One player's partnership scores, one entry per completed round."""

    player: str
    scores: list[int]

    @property
    def total(self) -> int:
        return sum(self.scores)


@dataclass(frozen=True)
class TournamentStartEvent:
    """Fired once when the state is created and round 1 is drawn."""

    players: list[str]
    tables: list[str]
    total_rounds: int
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class RoundStartEvent:
    """Fired whenever a new round is drawn, with its full seating list."""

    round_num: int
    total_rounds: int
    seatings: list[Seating]


@dataclass(frozen=True)
class ScoreAppliedEvent:
    """Fired after a table's result is stored (including overwrites)."""

    round_num: int
    seating: Seating
    overwrote: bool = False


@dataclass(frozen=True)
class RoundCompleteEvent:
    """Fired after the last table of a round reports."""

    round_num: int
    standings: list[PlayerScores]


@dataclass(frozen=True)
class TournamentCompleteEvent:
    """Fired when the round target is enforced and its last round finishes."""

    total_rounds: int
    final_standings: list[PlayerScores]
    timestamp: datetime = field(default_factory=datetime.now)


# Union type for type-safe pattern matching in consumers
TournamentEvent = (
    TournamentStartEvent
    | RoundStartEvent
    | ScoreAppliedEvent
    | RoundCompleteEvent
    | TournamentCompleteEvent
)
