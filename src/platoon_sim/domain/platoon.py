"""A named, ordered group of living soldiers."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from platoon_sim.domain.events import HitEvent
from platoon_sim.domain.soldiers import Soldier
from platoon_sim.sim.rng import RandomSource

logger = logging.getLogger(__name__)


class Platoon:
    def __init__(self, soldiers: Sequence[Soldier], name: str) -> None:
        if soldiers is None:
            raise TypeError("soldiers must not be None")
        if name is None or not name.strip():
            raise ValueError("platoon name must not be blank")

        members = list(soldiers)
        seen: set[int] = set()
        for soldier in members:
            if not soldier.alive:
                raise ValueError(f"{name}: cannot enlist a dead soldier")
            if id(soldier) in seen:
                raise ValueError(f"{name}: the same soldier is listed twice")
            seen.add(id(soldier))

        self.name = name
        self._soldiers: list[Soldier] = members

    def __len__(self) -> int:
        return len(self._soldiers)

    def __repr__(self) -> str:
        return f"Platoon(name={self.name!r}, soldiers={len(self._soldiers)})"

    @property
    def soldiers(self) -> tuple[Soldier, ...]:
        return tuple(self._soldiers)

    @property
    def has_soldiers(self) -> bool:
        return len(self._soldiers) > 0

    def attack(self, opponent: "Platoon", rng: RandomSource) -> list[HitEvent]:
        """Let every member that is alive at the start of the round act once.

        Members act in stored order. Each one receives its own snapshot of the
        opponent's live soldiers; casualties are removed from the opponent after
        every action so the next member never sees a dead target.
        """
        events: list[HitEvent] = []
        for soldier in list(self._soldiers):
            if not opponent.has_soldiers:
                break
            if not soldier.alive:
                continue
            action_events = soldier.attack(opponent.soldiers, rng)
            opponent.apply_casualties(action_events)
            events.extend(action_events)
        return events

    def apply_casualties(self, events: Iterable[HitEvent]) -> list[Soldier]:
        """Remove members killed by ``events``. Safe to call repeatedly."""
        removed: list[Soldier] = []
        for event in events:
            if not event.killed:
                continue
            if self._remove(event.target):
                removed.append(event.target)
        return removed

    def _remove(self, soldier: Soldier) -> bool:
        for index, member in enumerate(self._soldiers):
            if member is soldier:
                del self._soldiers[index]
                logger.debug("%s lost a %s soldier (%d left)", self.name, soldier.kind.value, len(self._soldiers))
                return True
        return False
