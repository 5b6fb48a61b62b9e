"""
FiveHundred tournament server: entry point.

Usage:
    uv run python web_main.py

Wires together:
    config.yaml → players file → tournament state → console draw → uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

import uvicorn

from fivehundred.cli.display import console, display_tournament_event
from fivehundred.config import load_config
from fivehundred.errors import ConfigurationInvalid, RosterReadFailure
from fivehundred.web import app as web_app


def main() -> None:
    config_path = Path("config.yaml")
    try:
        config = load_config(config_path)
    except FileNotFoundError as exc:
        console.print(f"[red]Error:[/] {exc}")
        sys.exit(1)
    except ValueError as exc:
        console.print(f"[red]Config error:[/] {exc}")
        sys.exit(1)

    web_app.configure_logging(config.server)

    try:
        state = web_app.build_state(config)
    except RosterReadFailure as exc:
        console.print(f"[red]Roster error:[/] {exc}")
        sys.exit(1)
    except (ConfigurationInvalid, NotImplementedError) as exc:
        console.print(f"[red]Tournament error:[/] {exc}")
        sys.exit(1)

    web_app.install_state(state, config)
    for event in state.opening_events():
        display_tournament_event(event)

    uvicorn.run(web_app.app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
