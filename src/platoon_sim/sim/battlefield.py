"""Two platoons trading rounds until one of them is wiped out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from platoon_sim.domain.events import HitEvent
from platoon_sim.domain.platoon import Platoon
from platoon_sim.domain.soldiers import Soldier
from platoon_sim.sim.rng import RandomSource

logger = logging.getLogger(__name__)


class BattleStateError(RuntimeError):
    pass


class BattleState(str, Enum):
    ACTIVE = "active"
    DECIDED = "decided"


@dataclass(frozen=True)
class RoundReport:
    round_number: int
    attacker: str
    defender: str
    hits: list[HitEvent] = field(default_factory=list)
    casualties: list[Soldier] = field(default_factory=list)

    @property
    def total_absorbed(self) -> int:
        return sum(hit.absorbed for hit in self.hits)


class Battlefield:
    def __init__(self, attacker: Platoon, defender: Platoon, rng: RandomSource | None = None) -> None:
        if attacker is None or defender is None:
            raise TypeError("both platoons are required")
        if attacker is defender:
            raise ValueError("a platoon cannot fight itself")
        self._attacker = attacker
        self._defender = defender
        self.rng = rng if rng is not None else RandomSource()
        self.round_number = 0

    @property
    def attacker(self) -> Platoon:
        return self._attacker

    @property
    def defender(self) -> Platoon:
        return self._defender

    @property
    def platoons_can_fight(self) -> bool:
        return self._attacker.has_soldiers and self._defender.has_soldiers

    @property
    def state(self) -> BattleState:
        return BattleState.ACTIVE if self.platoons_can_fight else BattleState.DECIDED

    @property
    def winner(self) -> Platoon | None:
        if self.platoons_can_fight:
            return None
        if self._attacker.has_soldiers:
            return self._attacker
        if self._defender.has_soldiers:
            return self._defender
        return None

    def resolve_round(self) -> RoundReport:
        if not self.platoons_can_fight:
            raise BattleStateError("Attacking or defending platoon is empty")

        self.round_number += 1
        hits = self._attacker.attack(self._defender, self.rng)
        casualties = [hit.target for hit in hits if hit.killed]

        for hit in hits:
            logger.debug(
                "round %d: %s hit for %d (absorbed %d), health now %d",
                self.round_number,
                hit.target.kind.value,
                hit.raw,
                hit.absorbed,
                hit.health_after,
            )
        logger.info(
            "round %d: %s -> %s, %d hits, %d killed, %d left",
            self.round_number,
            self._attacker.name,
            self._defender.name,
            len(hits),
            len(casualties),
            len(self._defender),
        )
        return RoundReport(
            round_number=self.round_number,
            attacker=self._attacker.name,
            defender=self._defender.name,
            hits=hits,
            casualties=casualties,
        )

    def swap_roles(self) -> None:
        self._attacker, self._defender = self._defender, self._attacker
