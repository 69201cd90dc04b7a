"""Roster configuration: soldier templates plus the two platoons built from them."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from platoon_sim.domain.platoon import Platoon
from platoon_sim.domain.soldiers import Soldier, SoldierKind
from platoon_sim.sim.battlefield import Battlefield
from platoon_sim.sim.cloner import SoldierCloner
from platoon_sim.sim.rng import RandomSource


class RosterConfigError(ValueError):
    """Error loading or validating a roster configuration."""


@dataclass(frozen=True)
class PlatoonSpec:
    name: str
    copies: int


@dataclass(frozen=True)
class RosterConfig:
    templates: list[Soldier]
    attacker: PlatoonSpec
    defender: PlatoonSpec
    seed: int | None = None


def default_config_path() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "default_roster.json"


def load_roster_config(path: Path) -> RosterConfig:
    return parse_roster_config(_load_json(path))


def parse_roster_config(data: Any) -> RosterConfig:
    if not isinstance(data, dict):
        raise RosterConfigError("Roster root must be an object")

    seed = data.get("seed")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        raise RosterConfigError("seed must be an integer")

    raw_templates = _require_list(data, "templates")
    if not raw_templates:
        raise RosterConfigError("templates must not be empty")
    templates = [_parse_template(entry, index) for index, entry in enumerate(raw_templates)]

    attacker = _parse_platoon(_require_dict(data, "attacker"), "attacker")
    defender = _parse_platoon(_require_dict(data, "defender"), "defender")
    if attacker.name == defender.name:
        raise RosterConfigError("attacker and defender must have different names")

    return RosterConfig(templates=templates, attacker=attacker, defender=defender, seed=seed)


def build_battlefield(config: RosterConfig, rng: RandomSource | None = None) -> Battlefield:
    cloner = SoldierCloner()
    attacker = Platoon(cloner.clone_soldiers(config.templates, config.attacker.copies), config.attacker.name)
    defender = Platoon(cloner.clone_soldiers(config.templates, config.defender.copies), config.defender.name)
    if rng is None and config.seed is not None:
        rng = RandomSource.derived(config.seed, f"{attacker.name}|{defender.name}", "targeting")
    elif rng is None:
        rng = RandomSource()
    return Battlefield(attacker, defender, rng)


def _load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise RosterConfigError(f"Roster file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise RosterConfigError(f"Invalid JSON in {path}: {exc}") from exc


def _parse_template(entry: Any, index: int) -> Soldier:
    where = f"templates[{index}]"
    if not isinstance(entry, dict):
        raise RosterConfigError(f"{where} must be an object")

    kind_value = entry.get("kind")
    try:
        kind = SoldierKind(kind_value)
    except ValueError as exc:
        raise RosterConfigError(f"{where}.kind is not a known soldier kind: {kind_value!r}") from exc

    health = _require_int(entry, "health", where)
    armor = _require_int(entry, "armor", where)
    damage = _require_int(entry, "damage", where)

    try:
        if kind is SoldierKind.BASIC:
            return Soldier.basic(health, armor, damage)
        if kind is SoldierKind.SNIPER:
            return Soldier.sniper(_require_number(entry, "multiplier", where), health, armor, damage)
        attacks_count = _require_int(entry, "attacks_count", where)
        if kind is SoldierKind.STORMTROOPER:
            can_damage_same = entry.get("can_damage_same", True)
            if not isinstance(can_damage_same, bool):
                raise RosterConfigError(f"{where}.can_damage_same must be a boolean")
            return Soldier.stormtrooper(attacks_count, health, armor, damage, can_damage_same=can_damage_same)
        return Soldier.supporter(attacks_count, health, armor, damage)
    except RosterConfigError:
        raise
    except ValueError as exc:
        raise RosterConfigError(f"{where}: {exc}") from exc


def _parse_platoon(entry: dict, where: str) -> PlatoonSpec:
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise RosterConfigError(f"{where}.name must be a non-empty string")
    copies = _require_int(entry, "copies", where)
    if copies <= 0:
        raise RosterConfigError(f"{where}.copies must be positive")
    return PlatoonSpec(name=name, copies=copies)


def _require_dict(data: dict, key: str) -> dict:
    value = data.get(key)
    if not isinstance(value, dict):
        raise RosterConfigError(f"{key} must be an object")
    return value


def _require_list(data: dict, key: str) -> list:
    value = data.get(key)
    if not isinstance(value, list):
        raise RosterConfigError(f"{key} must be an array")
    return value


def _require_int(data: dict, key: str, where: str) -> int:
    value = data.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise RosterConfigError(f"{where}.{key} must be an integer")
    return value


def _require_number(data: dict, key: str, where: str) -> float:
    value = data.get(key)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise RosterConfigError(f"{where}.{key} must be a number")
    return float(value)
