"""
Exception types raised by the tournament core.

The web layer translates these into HTTP responses; web_main.py turns the
startup ones (ConfigurationInvalid, RosterReadFailure) into a clean exit.
"""

from __future__ import annotations

from pathlib import Path


class FiveHundredError(Exception):
    """Base class for all tournament errors."""


class SeatingNotFound(FiveHundredError):
    """No seating in the current round has exactly these four players in these seats."""

    def __init__(self, north: str, south: str, west: str, east: str) -> None:
        self.north = north
        self.south = south
        self.west = west
        self.east = east
        super().__init__(
            f"Couldn't find a seating with these players: "
            f"N {north}, S {south}, W {west}, E {east}"
        )


class RoundNotFinished(FiveHundredError):
    def __init__(self, round_num: int) -> None:
        self.round_num = round_num
        super().__init__(f"Round {round_num} is not finished.")


class TournamentComplete(FiveHundredError):
    """Raised by advance_round() once the round target is enforced and reached."""

    def __init__(self, total_rounds: int) -> None:
        self.total_rounds = total_rounds
        super().__init__(f"All {total_rounds} rounds have been played.")


class ConfigurationInvalid(FiveHundredError, ValueError):
    """The roster, table list or round target can't make a valid tournament."""


class RosterReadFailure(FiveHundredError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read players from {self.path}: {reason}")
