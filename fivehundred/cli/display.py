"""
Rich-based console consumer for TournamentEvent objects.

The server prints the draw for each round and the running standings here, so
the tournament director can read seatings off the console without a client.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fivehundred.tournament.events import (
    PlayerScores,
    RoundCompleteEvent,
    RoundStartEvent,
    ScoreAppliedEvent,
    TournamentCompleteEvent,
    TournamentEvent,
    TournamentStartEvent,
)

console = Console(legacy_windows=False)


def display_tournament_event(event: TournamentEvent) -> None:
    """Dispatch a TournamentEvent to the appropriate display function."""
    match event:
        case TournamentStartEvent():
            _tournament_start(event)
        case RoundStartEvent():
            _round_start(event)
        case ScoreAppliedEvent():
            _score_applied(event)
        case RoundCompleteEvent():
            _round_complete(event)
        case TournamentCompleteEvent():
            _tournament_complete(event)


def display_standings(standings: list[PlayerScores], title: str = "Standings") -> None:
    console.print(_standings_table(standings, title))


# --------------------------------------------------------------------------- #
# Display functions                                                            #
# --------------------------------------------------------------------------- #

def _tournament_start(event: TournamentStartEvent) -> None:
    names = "  •  ".join(event.players)
    tables = ", ".join(event.tables)
    console.print()
    console.print(
        Panel(
            f"[bold]500 Tournament[/]\n\n"
            f"[dim]Players ({len(event.players)}):[/]\n{names}\n\n"
            f"[dim]Tables: {tables}  •  Rounds: {event.total_rounds}  •  "
            f"{event.timestamp.strftime('%Y-%m-%d %H:%M:%S')}[/]",
            title="[bold green] FiveHundred [/]",
            border_style="green",
            expand=False,
        )
    )


def _round_start(event: RoundStartEvent) -> None:
    console.print()
    console.rule(
        f"[bold]Round {event.round_num} of {event.total_rounds}[/]",
        style="bright_blue",
    )
    console.print()

    table = Table(show_header=True, header_style="bold", border_style="dim", show_lines=False)
    table.add_column("Table", style="dim", width=8)
    table.add_column("North", min_width=12)
    table.add_column("South", min_width=12)
    table.add_column("", width=3, justify="center")
    table.add_column("West", min_width=12)
    table.add_column("East", min_width=12)

    for s in event.seatings:
        table.add_row(s.table, s.north, s.south, "vs", s.west, s.east)

    console.print(table)


def _score_applied(event: ScoreAppliedEvent) -> None:
    s = event.seating
    ns_style = "bold green" if s.ns_wins else "dim"
    we_style = "dim" if s.ns_wins else "bold green"
    tag = "  [yellow](corrected)[/]" if event.overwrote else ""
    console.print(
        f"  [dim]R{event.round_num} {s.table}[/]  "
        f"[{ns_style}]{s.north}/{s.south} {s.ns_score}[/]  vs  "
        f"[{we_style}]{s.west}/{s.east} {s.we_score}[/]{tag}"
    )


def _round_complete(event: RoundCompleteEvent) -> None:
    console.print()
    console.print(_standings_table(event.standings, f"Standings after round {event.round_num}"))


def _tournament_complete(event: TournamentCompleteEvent) -> None:
    leader = max(event.final_standings, key=lambda p: p.total, default=None)
    leader_text = (
        f"Leader: [bold]{leader.player}[/] with {leader.total}" if leader else "No scores"
    )
    console.print()
    console.print(
        Panel(
            f"[bold green]All {event.total_rounds} rounds played[/]\n{leader_text}\n"
            f"[dim]{event.timestamp.strftime('%Y-%m-%d %H:%M:%S')}[/]",
            title="[bold]Tournament Complete[/]",
            border_style="green",
            expand=False,
        )
    )


def _standings_table(standings: list[PlayerScores], title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold", border_style="dim")
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Player", min_width=16)
    table.add_column("Rounds", justify="left")
    table.add_column("Total", justify="right", style="bold")

    ranked = sorted(standings, key=lambda p: -p.total)
    for rank, entry in enumerate(ranked, 1):
        rounds = "  ".join(str(score) for score in entry.scores) or "[dim]-[/]"
        table.add_row(str(rank), entry.player, rounds, str(entry.total))
    return table
