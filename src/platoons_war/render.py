"""Plain-text formatting shared by the console driver and the TUI."""

from __future__ import annotations

from platoon_sim.sim.battlefield import RoundReport
from platoon_sim.view.battle_view import BattlefieldView, PlatoonView


def format_platoon(view: PlatoonView) -> str:
    lines = [f"Platoon: {view.name}", "Soldier health:"]
    if view.soldiers:
        lines.extend(str(health) for health in view.healths)
    else:
        lines.append("(none left)")
    return "\n".join(lines)


def format_battlefield(view: BattlefieldView) -> str:
    return "\n".join(
        [
            "Attackers:",
            format_platoon(view.attacker),
            "",
            "Defenders:",
            format_platoon(view.defender),
        ]
    )


def format_round(report: RoundReport) -> str:
    return (
        f"Round {report.round_number}: {report.attacker} attacked {report.defender} "
        f"({len(report.hits)} hits, {report.total_absorbed} damage, {len(report.casualties)} killed)"
    )


def format_winner(name: str | None) -> str:
    if name is None:
        return "No platoon survived"
    return f'Platoon "{name}" won'
