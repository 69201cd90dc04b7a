"""Round loop: resolve, report, swap, until one platoon is left."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from platoon_sim.sim.battlefield import Battlefield, BattleStateError, RoundReport

logger = logging.getLogger(__name__)

RoundCallback = Callable[[RoundReport, Battlefield], None]


@dataclass(frozen=True)
class BattleReport:
    winner: str | None
    rounds: int
    round_reports: list[RoundReport] = field(default_factory=list)


def run_battle(
    battlefield: Battlefield,
    *,
    on_round: RoundCallback | None = None,
    max_rounds: int | None = None,
) -> BattleReport:
    reports: list[RoundReport] = []
    while battlefield.platoons_can_fight:
        if max_rounds is not None and len(reports) >= max_rounds:
            raise BattleStateError(f"Battle still undecided after {max_rounds} rounds")
        report = battlefield.resolve_round()
        reports.append(report)
        if on_round is not None:
            on_round(report, battlefield)
        battlefield.swap_roles()

    winner = battlefield.winner
    winner_name = winner.name if winner is not None else None
    logger.info("battle decided after %d rounds, winner: %s", len(reports), winner_name)
    return BattleReport(winner=winner_name, rounds=len(reports), round_reports=reports)
