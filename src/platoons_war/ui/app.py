from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal

from platoon_sim.sim.battlefield import Battlefield, RoundReport
from platoons_war.render import format_round
from platoons_war.ui.widgets import BattleStatus, PlatoonPanel


class BattleApp(App[None]):
    BINDINGS = [
        Binding("n", "next_round", "Next Round"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, battlefield: Battlefield) -> None:
        super().__init__()
        self.battlefield = battlefield
        self.last_report: RoundReport | None = None

    def compose(self) -> ComposeResult:
        yield BattleStatus(self.battlefield, id="status")
        with Horizontal():
            yield PlatoonPanel(self.battlefield, "attacker", id="attacker-panel")
            yield PlatoonPanel(self.battlefield, "defender", id="defender-panel")

    def advance(self) -> RoundReport | None:
        """Resolve one round and swap roles; no-op once the battle is decided."""
        if not self.battlefield.platoons_can_fight:
            return None
        report = self.battlefield.resolve_round()
        self.battlefield.swap_roles()
        self.last_report = report
        return report

    def action_next_round(self) -> None:
        report = self.advance()
        if report is not None:
            self.notify(format_round(report))
        for panel in self.query(PlatoonPanel):
            panel.refresh()
        self.query_one(BattleStatus).refresh()
