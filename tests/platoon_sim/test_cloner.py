from __future__ import annotations

import pytest

from platoon_sim.domain.soldiers import Soldier, SoldierKind
from platoon_sim.sim.cloner import SoldierCloner, clone_soldiers


def test_clone_soldiers_groups_by_template() -> None:
    sniper = Soldier.sniper(1.6, 100, 45, 45)
    trooper = Soldier.stormtrooper(5, 100, 40, 45)

    clones = SoldierCloner().clone_soldiers([sniper, trooper], 5)

    assert len(clones) == 10
    assert [c.kind for c in clones[:5]] == [SoldierKind.SNIPER] * 5
    assert [c.kind for c in clones[5:]] == [SoldierKind.STORMTROOPER] * 5
    assert all(c is not sniper and c is not trooper for c in clones)
    assert len({id(c) for c in clones}) == 10


def test_clones_are_independently_healthed() -> None:
    template = Soldier.basic(100, 50, 50)
    clones = clone_soldiers([template], 3)

    clones[0].take_damage(50)

    assert clones[0].health == 75
    assert clones[1].health == 100
    assert template.health == 100


def test_clone_soldiers_rejects_bad_input() -> None:
    template = Soldier.basic(100, 50, 50)
    with pytest.raises(TypeError):
        clone_soldiers(None, 2)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        clone_soldiers([], 2)
    with pytest.raises(ValueError):
        clone_soldiers([template], 0)
