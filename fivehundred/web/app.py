"""
FastAPI application: the score recorder and state reporter.

Exposes:
  GET  /state   Current round, round target, per-player scores and every round's seatings
  POST /state   Record one table's result; the round advances once every table has reported

Status codes: 400 malformed body, 404 unknown seating, 409 round can't
advance, 503 state not initialised yet.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fivehundred.cli.display import display_tournament_event
from fivehundred.config import Config, ServerConfig, load_config
from fivehundred.errors import RoundNotFinished, SeatingNotFound, TournamentComplete
from fivehundred.roster import load_players
from fivehundred.tournament import (
    Seating,
    StateSnapshot,
    TournamentEvent,
    TournamentState,
    create_seating_strategy,
)

logger = logging.getLogger("fivehundred")

# Set by install_state() (web_main.py) or by the startup hook.
config: Config | None = None
_state: TournamentState | None = None

app = FastAPI(title="FiveHundred")


# --------------------------------------------------------------------------- #
# Setup                                                                        #
# --------------------------------------------------------------------------- #

def configure_logging(server: ServerConfig) -> None:
    log_path = Path(server.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=server.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        handlers=[
            logging.StreamHandler(),                                    # server console
            logging.handlers.RotatingFileHandler(
                log_path, maxBytes=2 * 1024 * 1024, backupCount=3,    # 2 MB × 3 files
                encoding="utf-8",
            ),
        ],
    )


def build_state(cfg: Config) -> TournamentState:
    """
    Load the roster and draw round 1.

    Raises:
        RosterReadFailure: the players file can't be read.
        ConfigurationInvalid: the roster doesn't fill the tables exactly.
    """
    players = load_players(cfg.players_path)
    t = cfg.tournament
    return TournamentState(
        total_rounds=t.total_rounds,
        players=players,
        tables=t.tables,
        strategy=create_seating_strategy(t.seating, seed=t.seed),
        enforce_total_rounds=t.enforce_total_rounds,
    )


def install_state(state: TournamentState, cfg: Config) -> None:
    global config, _state
    config = cfg
    _state = state


@app.on_event("startup")
def _startup() -> None:
    """When served directly by uvicorn, build the state from config.yaml."""
    global config, _state
    if _state is not None:
        return
    config = load_config()
    configure_logging(config.server)
    _state = build_state(config)
    _publish(_state.opening_events())


def _require_state() -> TournamentState:
    if _state is None:
        raise HTTPException(status_code=503, detail="Tournament state is not initialised")
    return _state


def _publish(events: list[TournamentEvent]) -> None:
    for event in events:
        display_tournament_event(event)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# --------------------------------------------------------------------------- #
# Wire format                                                                  #
# --------------------------------------------------------------------------- #

class ScoreSubmission(BaseModel):
    North: str
    South: str
    West: str
    East: str
    NSScore: int
    WEScore: int


def _seating_payload(seating: Seating) -> dict:
    return {
        "TableName": seating.table,
        "North": seating.north,
        "South": seating.south,
        "West": seating.west,
        "East": seating.east,
        "Finished": seating.finished,
        "NSScore": seating.ns_score,
        "WEScore": seating.we_score,
        "NSWins": seating.ns_wins,
    }


def _state_payload(snapshot: StateSnapshot) -> dict:
    return {
        "Round": snapshot.round_num,
        "TotalRounds": snapshot.total_rounds,
        "Scores": [
            {"Player": entry.player, "Scores": list(entry.scores)}
            for entry in snapshot.scores
        ],
        "Rounds": [
            {"Seatings": [_seating_payload(s) for s in rnd.seatings]}
            for rnd in snapshot.rounds
        ],
    }


# --------------------------------------------------------------------------- #
# REST                                                                         #
# --------------------------------------------------------------------------- #

@app.get("/state")
def get_state():
    return _state_payload(_require_state().snapshot())


@app.post("/state")
def post_score(submission: ScoreSubmission):
    state = _require_state()
    try:
        events = state.record_score(
            submission.North,
            submission.South,
            submission.West,
            submission.East,
            submission.NSScore,
            submission.WEScore,
        )
    except SeatingNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (RoundNotFinished, TournamentComplete) as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    _publish(events)
    return _state_payload(state.snapshot())
