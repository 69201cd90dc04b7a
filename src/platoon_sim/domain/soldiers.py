"""Soldier model and the per-kind attack policies."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from fractions import Fraction
from typing import Callable, Sequence

from platoon_sim.domain.events import HitEvent
from platoon_sim.sim.rng import RandomSource


class SoldierKind(str, Enum):
    BASIC = "basic"
    SNIPER = "sniper"
    STORMTROOPER = "stormtrooper"
    SUPPORTER = "supporter"


def absorbed_damage(amount: int, armor: int) -> int:
    """Damage that gets through armor: ``floor(amount**2 / (amount + armor))``.

    The share that gets through grows with the raw amount, so heavy hits are
    mitigated proportionally less than light ones. Always ``0 <= result <= amount``.
    """
    if amount < 0:
        raise ValueError(f"damage must be non-negative, got {amount}")
    if armor <= 0:
        raise ValueError(f"armor must be positive, got {armor}")
    if amount == 0:
        return 0
    return (amount * amount) // (amount + armor)


_READ_ONLY_FIELDS = frozenset({"kind", "armor", "damage", "damage_multiplier", "attacks_count", "can_damage_same"})


@dataclass(eq=False)
class Soldier:
    """One fighter. Only `health` changes after construction."""

    kind: SoldierKind
    health: int
    armor: int
    damage: int
    damage_multiplier: float = 1.0
    attacks_count: int = 1
    can_damage_same: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", SoldierKind(self.kind))
        if self.health <= 0:
            raise ValueError(f"health must be positive, got {self.health}")
        if self.armor <= 0:
            raise ValueError(f"armor must be positive, got {self.armor}")
        if self.damage <= 0:
            raise ValueError(f"damage must be positive, got {self.damage}")
        if self.damage_multiplier < 1:
            raise ValueError(f"damage_multiplier must be >= 1, got {self.damage_multiplier}")
        if self.attacks_count <= 0:
            raise ValueError(f"attacks_count must be positive, got {self.attacks_count}")

    def __setattr__(self, name: str, value: object) -> None:
        if name in _READ_ONLY_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} is read-only")
        object.__setattr__(self, name, value)

    @classmethod
    def basic(cls, health: int, armor: int, damage: int) -> "Soldier":
        return cls(SoldierKind.BASIC, health, armor, damage)

    @classmethod
    def sniper(cls, multiplier: float, health: int, armor: int, damage: int) -> "Soldier":
        return cls(SoldierKind.SNIPER, health, armor, damage, damage_multiplier=multiplier)

    @classmethod
    def stormtrooper(
        cls,
        attacks_count: int,
        health: int,
        armor: int,
        damage: int,
        *,
        can_damage_same: bool = True,
    ) -> "Soldier":
        return cls(
            SoldierKind.STORMTROOPER,
            health,
            armor,
            damage,
            attacks_count=attacks_count,
            can_damage_same=can_damage_same,
        )

    @classmethod
    def supporter(cls, attacks_count: int, health: int, armor: int, damage: int) -> "Soldier":
        return cls(
            SoldierKind.SUPPORTER,
            health,
            armor,
            damage,
            attacks_count=attacks_count,
            can_damage_same=False,
        )

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def hit_damage(self) -> int:
        if self.kind is SoldierKind.SNIPER:
            return math.floor(Fraction(str(self.damage_multiplier)) * self.damage)
        return self.damage

    def take_damage(self, amount: int) -> HitEvent:
        if amount < 0:
            raise ValueError(f"damage must be non-negative, got {amount}")
        if not self.alive:
            return HitEvent(target=self, raw=amount, absorbed=0, health_after=0, killed=False)

        absorbed = absorbed_damage(amount, self.armor)
        self.health = max(self.health - absorbed, 0)
        return HitEvent(
            target=self,
            raw=amount,
            absorbed=absorbed,
            health_after=self.health,
            killed=not self.alive,
        )

    def attack(self, targets: Sequence["Soldier"], rng: RandomSource) -> list[HitEvent]:
        pool = [target for target in targets if target.alive]
        if not pool:
            return []
        return _ATTACK_POLICIES[self.kind](self, pool, rng)

    def clone(self) -> "Soldier":
        return replace(self)


def _single_hit(soldier: Soldier, pool: list[Soldier], rng: RandomSource) -> list[HitEvent]:
    target = pool[rng.pick_index(len(pool))]
    return [target.take_damage(soldier.hit_damage)]


def _volley(soldier: Soldier, pool: list[Soldier], rng: RandomSource) -> list[HitEvent]:
    events: list[HitEvent] = []
    already_hit: set[int] = set()
    # Each hit removes at most one target from the eligible set, so it never runs dry here.
    for _ in range(min(soldier.attacks_count, len(pool))):
        eligible = [
            target
            for target in pool
            if target.alive and (soldier.can_damage_same or id(target) not in already_hit)
        ]
        target = eligible[rng.pick_index(len(eligible))]
        events.append(target.take_damage(soldier.hit_damage))
        already_hit.add(id(target))
    return events


def _spread_fire(soldier: Soldier, pool: list[Soldier], rng: RandomSource) -> list[HitEvent]:
    events: list[HitEvent] = []
    for _ in range(min(soldier.attacks_count, len(pool))):
        if not pool:
            break
        target = pool.pop(rng.pick_index(len(pool)))
        events.append(target.take_damage(soldier.hit_damage))
        pool = [candidate for candidate in pool if candidate.alive]
    return events


_ATTACK_POLICIES: dict[SoldierKind, Callable[[Soldier, list[Soldier], RandomSource], list[HitEvent]]] = {
    SoldierKind.BASIC: _single_hit,
    SoldierKind.SNIPER: _single_hit,
    SoldierKind.STORMTROOPER: _volley,
    SoldierKind.SUPPORTER: _spread_fire,
}
