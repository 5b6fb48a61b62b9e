import unittest
from unittest.mock import patch

from rich.console import Console

from fivehundred.cli import display
from fivehundred.tournament import PlayerScores

from tournament_fixtures import finish_round, make_state


class DisplayTests(unittest.TestCase):
    def setUp(self) -> None:
        self.console = Console(record=True, width=140, legacy_windows=False)
        patcher = patch.object(display, "console", self.console)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _render(self, events) -> str:
        for event in events:
            display.display_tournament_event(event)
        return self.console.export_text()

    def test_opening_events_show_roster_and_draw(self) -> None:
        state = make_state(tables=2)
        text = self._render(state.opening_events())
        self.assertIn("FiveHundred", text)
        self.assertIn("Round 1 of 3", text)
        self.assertIn("Alice", text)
        self.assertIn("Hiro", text)
        self.assertIn("T2", text)

    def test_round_completion_shows_standings(self) -> None:
        state = make_state()
        events = state.record_score("Alice", "Ben", "Chloe", "Dmitri", 80, 20)
        text = self._render(events)
        self.assertIn("Alice/Ben 80", text)
        self.assertIn("Chloe/Dmitri 20", text)
        self.assertIn("Standings after round 1", text)
        self.assertIn("Round 2 of 3", text)

    def test_corrections_are_marked(self) -> None:
        state = make_state(tables=2)
        state.record_score("Alice", "Ben", "Chloe", "Dmitri", 80, 20)
        text = self._render(state.record_score("Alice", "Ben", "Chloe", "Dmitri", 70, 30))
        self.assertIn("(corrected)", text)

    def test_tournament_complete_names_leader(self) -> None:
        state = make_state(total_rounds=1, enforce_total_rounds=True)
        events = state.record_score("Alice", "Ben", "Chloe", "Dmitri", 20, 90)
        text = self._render(events)
        self.assertIn("Tournament Complete", text)
        self.assertIn("Leader: Chloe with 90", text)

    def test_standings_are_ranked_by_total(self) -> None:
        display.display_standings(
            [PlayerScores("Low", [1, 2]), PlayerScores("High", [50, 60])],
            title="Now",
        )
        text = self.console.export_text()
        self.assertLess(text.index("High"), text.index("Low"))
        self.assertIn("110", text)

    def test_standings_after_several_rounds(self) -> None:
        state = make_state()
        finish_round(state, 30, 10)
        finish_round(state, 5, 15)
        display.display_standings(state.snapshot().scores)
        text = self.console.export_text()
        self.assertIn("30  5", text)
        self.assertIn("35", text)
