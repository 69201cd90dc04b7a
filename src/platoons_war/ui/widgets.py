from __future__ import annotations

from textual.widgets import Static

from platoon_sim.sim.battlefield import Battlefield
from platoon_sim.view.battle_view import PlatoonView, snapshot


def _health_bar(health: int, width: int = 20, full: int = 100) -> str:
    filled = max(0, min(width, round(width * health / max(1, full))))
    return "#" * filled + "." * (width - filled)


class PlatoonPanel(Static):
    """One platoon's name, role and per-soldier health."""

    def __init__(self, battlefield: Battlefield, role: str, **kwargs) -> None:
        super().__init__(markup=True, **kwargs)
        self.battlefield = battlefield
        self.role = role

    def platoon_view(self) -> PlatoonView:
        view = snapshot(self.battlefield)
        return view.attacker if self.role == "attacker" else view.defender

    def render(self) -> str:
        view = self.platoon_view()
        lines = [f"[bold]{view.role.upper()}:[/] {view.name}  ({view.strength} alive)"]
        for soldier in view.soldiers:
            lines.append(f"{soldier.kind:<12} {soldier.health:>4} {_health_bar(soldier.health)}")
        return "\n".join(lines)


class BattleStatus(Static):
    """Single-line round counter and outcome."""

    def __init__(self, battlefield: Battlefield, **kwargs) -> None:
        super().__init__(markup=True, **kwargs)
        self.battlefield = battlefield

    def render(self) -> str:
        view = snapshot(self.battlefield)
        if view.winner is not None:
            return f"[bold]ROUND:[/] {view.round_number}  |  [bold]WINNER:[/] {view.winner}"
        return f"[bold]ROUND:[/] {view.round_number}  |  [bold]STATE:[/] {view.state.value}  |  n: next round, q: quit"
