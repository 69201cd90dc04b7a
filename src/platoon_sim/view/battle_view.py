"""Read-only snapshots of a battlefield for renderers."""

from __future__ import annotations

from dataclasses import dataclass

from platoon_sim.domain.platoon import Platoon
from platoon_sim.sim.battlefield import Battlefield, BattleState


@dataclass(frozen=True)
class SoldierView:
    kind: str
    health: int


@dataclass(frozen=True)
class PlatoonView:
    name: str
    role: str  # "attacker" | "defender"
    soldiers: tuple[SoldierView, ...]

    @property
    def healths(self) -> tuple[int, ...]:
        return tuple(soldier.health for soldier in self.soldiers)

    @property
    def strength(self) -> int:
        return len(self.soldiers)


@dataclass(frozen=True)
class BattlefieldView:
    round_number: int
    state: BattleState
    attacker: PlatoonView
    defender: PlatoonView
    winner: str | None


def _platoon_view(platoon: Platoon, role: str) -> PlatoonView:
    return PlatoonView(
        name=platoon.name,
        role=role,
        soldiers=tuple(SoldierView(kind=s.kind.value, health=s.health) for s in platoon.soldiers),
    )


def snapshot(battlefield: Battlefield) -> BattlefieldView:
    winner = battlefield.winner
    return BattlefieldView(
        round_number=battlefield.round_number,
        state=battlefield.state,
        attacker=_platoon_view(battlefield.attacker, "attacker"),
        defender=_platoon_view(battlefield.defender, "defender"),
        winner=winner.name if winner is not None else None,
    )
