"""
Tournament package.

create_seating_strategy() is the single entry point for choosing how players
are seated each round.

To add a new seating policy:
  1. Create fivehundred/tournament/<name>.py implementing SeatingStrategy
  2. Add a case here
"""

from __future__ import annotations

import random

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
from fivehundred.tournament.random_seating import RandomSeating
from fivehundred.tournament.state import StateSnapshot, TournamentState

__all__ = [
    # Base types
    "Round",
    "Seating",
    "SeatingStrategy",
    "StateSnapshot",
    "PlayerScores",
    # Events
    "TournamentEvent",
    "TournamentStartEvent",
    "RoundStartEvent",
    "ScoreAppliedEvent",
    "RoundCompleteEvent",
    "TournamentCompleteEvent",
    # Implementations
    "RandomSeating",
    "TournamentState",
    # Factory
    "create_seating_strategy",
]


def create_seating_strategy(name: str = "random", seed: int | None = None) -> SeatingStrategy:
    """
    Instantiate the configured SeatingStrategy.

    Args:
        name: "random" (the only implemented policy) | "losers_move"
        seed: fixed seed for a reproducible draw sequence; None = OS entropy
    """
    match name:
        case "random":
            rng = random.Random(seed) if seed is not None else None
            return RandomSeating(rng=rng)
        case "losers_move":
            raise NotImplementedError("Losers-move seating is not yet implemented.")
        case _:
            raise ValueError(
                f"Unknown seating strategy: {name!r}. Valid strategies: random"
            )
