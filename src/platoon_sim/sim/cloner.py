from __future__ import annotations

from typing import Sequence

from platoon_sim.domain.soldiers import Soldier


class SoldierCloner:
    def clone_soldiers(self, templates: Sequence[Soldier], copies: int) -> list[Soldier]:
        """Return ``copies`` fresh clones of each template, grouped in template order."""
        if templates is None:
            raise TypeError("templates must not be None")
        if len(templates) == 0:
            raise ValueError("at least one template is required")
        if copies <= 0:
            raise ValueError(f"copies must be positive, got {copies}")

        cloned: list[Soldier] = []
        for template in templates:
            for _ in range(copies):
                cloned.append(template.clone())
        return cloned


def clone_soldiers(templates: Sequence[Soldier], copies: int) -> list[Soldier]:
    return SoldierCloner().clone_soldiers(templates, copies)
