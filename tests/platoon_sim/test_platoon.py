from __future__ import annotations

import pytest

from platoon_sim.domain.platoon import Platoon
from platoon_sim.domain.soldiers import Soldier
from tests.helpers.factories import ScriptedRandom, make_basic, make_platoon
from tests.helpers.invariants import assert_platoon_all_alive


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_rejected(name: str) -> None:
    with pytest.raises(ValueError):
        Platoon([make_basic()], name)


def test_none_soldiers_rejected() -> None:
    with pytest.raises(TypeError):
        Platoon(None, "Alpha")  # type: ignore[arg-type]


def test_duplicate_soldier_rejected() -> None:
    soldier = make_basic()
    with pytest.raises(ValueError):
        Platoon([soldier, soldier], "Alpha")


def test_dead_soldier_rejected() -> None:
    soldier = Soldier.basic(1, 1, 1)
    soldier.take_damage(10)
    with pytest.raises(ValueError):
        Platoon([soldier], "Alpha")


def test_platoon_copies_member_list() -> None:
    members = [make_basic(), make_basic()]
    platoon = Platoon(members, "Alpha")
    members.clear()
    assert len(platoon) == 2
    assert platoon.has_soldiers


def test_apply_casualties_is_idempotent() -> None:
    weak = Soldier.basic(1, 1, 1)
    platoon = make_platoon("Alpha", [weak, make_basic()])
    event = weak.take_damage(10)

    assert platoon.apply_casualties([event]) == [weak]
    assert platoon.apply_casualties([event]) == []
    assert len(platoon) == 1


def test_apply_casualties_ignores_foreign_and_wounded() -> None:
    platoon = make_platoon("Alpha", size=2)
    outsider = Soldier.basic(1, 1, 1)
    wounded = platoon.soldiers[0]

    removed = platoon.apply_casualties([outsider.take_damage(10), wounded.take_damage(10)])

    assert removed == []
    assert len(platoon) == 2


def test_attack_removes_killed_defenders() -> None:
    attackers = make_platoon("Alpha", [make_basic(damage=500) for _ in range(2)])
    defenders = make_platoon("Bravo", [make_basic(health=10) for _ in range(3)])

    events = attackers.attack(defenders, ScriptedRandom([0, 0]))

    assert len(events) == 2
    assert all(event.killed for event in events)
    assert len(defenders) == 1
    assert_platoon_all_alive(defenders)


def test_attack_stops_when_opponent_is_empty() -> None:
    attackers = make_platoon("Alpha", [make_basic(damage=500) for _ in range(3)])
    defenders = make_platoon("Bravo", [make_basic(health=10)])
    rng = ScriptedRandom()

    events = attackers.attack(defenders, rng)

    assert len(events) == 1
    assert not defenders.has_soldiers
    assert rng.calls == [1]


def test_members_act_in_stored_order() -> None:
    first = Soldier.sniper(2.0, 100, 10, 40)
    second = make_basic(damage=10)
    attackers = make_platoon("Alpha", [first, second])
    target = make_basic(health=1000)
    defenders = make_platoon("Bravo", [target])

    events = attackers.attack(defenders, ScriptedRandom())

    assert [event.raw for event in events] == [80, 10]


def test_soldiers_view_is_read_only_tuple() -> None:
    platoon = make_platoon("Alpha", size=2)
    assert isinstance(platoon.soldiers, tuple)
