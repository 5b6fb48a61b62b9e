"""
Uniform random table assignment.

Rules:
- The roster is shuffled with Fisher–Yates (j drawn from 0..i inclusive, so
  every permutation is equally likely).
- The shuffled roster is cut into consecutive groups of four, which take the
  North, South, West and East seats of the tables in table order.
- One generator per strategy, created once and never reseeded, so rapid
  successive rounds never repeat a draw.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from fivehundred.tournament.base import Round, Seating, SeatingStrategy

logger = logging.getLogger(__name__)

SEATS_PER_TABLE = 4


class RandomSeating(SeatingStrategy):
    """Every round is an independent uniformly random draw."""

    def __init__(self, rng: random.Random | None = None) -> None:
        # random.Random() with no seed pulls from os.urandom
        self._rng = rng if rng is not None else random.Random()

    def assign(
        self,
        players: Sequence[str],
        tables: Sequence[str],
        history: Sequence[Round],
    ) -> list[Seating]:
        shuffled = _shuffle(players, self._rng)

        seatings: list[Seating] = []
        for i, table in enumerate(tables):
            j = i * SEATS_PER_TABLE
            north, south, west, east = shuffled[j:j + SEATS_PER_TABLE]
            seatings.append(
                Seating(table=table, north=north, south=south, west=west, east=east)
            )

        logger.debug("Drew random seatings for round %d", len(history) + 1)
        return seatings


def _shuffle(players: Sequence[str], rng: random.Random) -> list[str]:
    """Return a shuffled copy of `players`; the input is left untouched."""
    result = list(players)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
