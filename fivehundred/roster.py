"""Player roster loading: one player name per line."""

from __future__ import annotations

import logging
from pathlib import Path

from fivehundred.errors import RosterReadFailure

logger = logging.getLogger(__name__)


def load_players(path: str | Path) -> list[str]:
    """
    Read the roster file. Each line is trimmed; blank lines are skipped.

    Raises:
        RosterReadFailure: the file is missing, unreadable, or lists nobody.
    """
    roster_path = Path(path)
    try:
        text = roster_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RosterReadFailure(roster_path, str(exc)) from exc

    players = [line.strip() for line in text.splitlines()]
    players = [p for p in players if p]
    if not players:
        raise RosterReadFailure(roster_path, "no player names found")

    logger.debug("Loaded %d players from %s", len(players), roster_path)
    return players
