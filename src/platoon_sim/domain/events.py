"""Damage events returned by soldiers instead of death callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from platoon_sim.domain.soldiers import Soldier


@dataclass(frozen=True)
class HitEvent:
    target: "Soldier"
    raw: int
    absorbed: int
    health_after: int
    killed: bool  # True only on the hit that brought health to 0
