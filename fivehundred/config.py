"""
Configuration loading from config.yaml.

Uses typed dataclasses throughout so the rest of the app gets IDE
completion and type-checker support without touching raw dicts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml

SeatingName = Literal["random", "losers_move"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TournamentConfig:
    total_rounds: int = 3
    tables: list[str] = field(default_factory=lambda: ["T1", "T2", "T3"])
    players_file: str = "players.txt"
    seating: SeatingName = "random"
    seed: int | None = None              # fixed seed for reproducible draws; None = OS entropy
    enforce_total_rounds: bool = False   # stop advancing once total_rounds is reached


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 5000
    log_file: str = "./logs/fivehundred.log"
    log_level: str = "INFO"


@dataclass
class Config:
    tournament: TournamentConfig = field(default_factory=TournamentConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @property
    def players_path(self) -> Path:
        return Path(self.tournament.players_file)

    @property
    def log_path(self) -> Path:
        return Path(self.server.log_file)


def load_config(path: str | Path = "config.yaml") -> Config:
    """
    Load and validate config.yaml.

    Raises:
        FileNotFoundError: config.yaml is missing.
        ValueError: fields are invalid or of the wrong shape.
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {cfg_path.resolve()}\n"
            "Copy config.example.yaml to config.yaml and adjust the tables and players file."
        )

    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    try:
        tour_raw = raw.get("tournament") or {}
        defaults = TournamentConfig()
        seed = tour_raw.get("seed")
        tables_raw = tour_raw.get("tables", defaults.tables)
        if not isinstance(tables_raw, list):
            raise ValueError(
                f"tournament.tables must be a list of table names, got {tables_raw!r}"
            )
        tournament = TournamentConfig(
            total_rounds=int(tour_raw.get("total_rounds", defaults.total_rounds)),
            tables=[str(t) for t in tables_raw],
            players_file=str(tour_raw.get("players_file", defaults.players_file)),
            seating=tour_raw.get("seating", defaults.seating),
            seed=int(seed) if seed is not None else None,
            enforce_total_rounds=bool(tour_raw.get("enforce_total_rounds", False)),
        )

        server_raw = raw.get("server") or {}
        server = ServerConfig(
            host=str(server_raw.get("host", "0.0.0.0")),
            port=int(server_raw.get("port", 5000)),
            log_file=str(server_raw.get("log_file", "./logs/fivehundred.log")),
            log_level=str(server_raw.get("log_level", "INFO")).upper(),
        )

        config = Config(tournament=tournament, server=server)
        _validate(config)
        return config

    except (AttributeError, KeyError, TypeError) as exc:
        raise ValueError(f"Invalid config.yaml structure: {exc}") from exc


def _validate(config: Config) -> None:
    t = config.tournament
    if t.total_rounds < 1:
        raise ValueError("tournament.total_rounds must be >= 1")
    if not t.tables:
        raise ValueError("tournament.tables must list at least one table")
    if len(set(t.tables)) != len(t.tables):
        raise ValueError(f"tournament.tables contains duplicates: {t.tables}")
    valid_seatings = ("random", "losers_move")
    if t.seating not in valid_seatings:
        raise ValueError(
            f"tournament.seating must be one of {valid_seatings}, got '{t.seating}'"
        )
    if not 1 <= config.server.port <= 65535:
        raise ValueError(f"server.port must be between 1 and 65535, got {config.server.port}")
    if config.server.log_level not in _LOG_LEVELS:
        raise ValueError(
            f"server.log_level must be one of {_LOG_LEVELS}, got '{config.server.log_level}'"
        )
