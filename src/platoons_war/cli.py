from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from platoon_sim.rules.roster_config import (
    RosterConfigError,
    build_battlefield,
    default_config_path,
    load_roster_config,
)
from platoon_sim.sim.battlefield import Battlefield, RoundReport
from platoon_sim.sim.driver import run_battle
from platoon_sim.sim.rng import RandomSource
from platoon_sim.view.battle_view import snapshot
from platoons_war.render import format_battlefield, format_round, format_winner

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="platoons-war",
        description="Run a turn-based battle between two platoons.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Roster JSON file (default: bundled roster).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Override the roster seed.")
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for Enter between rounds.",
    )
    parser.add_argument("--tui", action="store_true", help="Open the Textual interface.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    return parser


def load_battlefield(config_path: Path | None, seed: int | None) -> Battlefield:
    config = load_roster_config(config_path or default_config_path())
    rng = RandomSource(seed) if seed is not None else None
    return build_battlefield(config, rng)


def run_console(
    battlefield: Battlefield,
    *,
    pause: Callable[[], object] | None = None,
    out: Callable[[str], None] = print,
) -> str | None:
    out(format_battlefield(snapshot(battlefield)))
    if pause is not None:
        pause()

    def on_round(report: RoundReport, field: Battlefield) -> None:
        out("")
        out(format_round(report))
        out(format_battlefield(snapshot(field)))
        if pause is not None and field.platoons_can_fight:
            pause()

    report = run_battle(battlefield, on_round=on_round)
    out("")
    out(format_winner(report.winner))
    return report.winner


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        battlefield = load_battlefield(args.config, args.seed)
    except RosterConfigError as exc:
        print(f"platoons-war: {exc}", file=sys.stderr)
        return 2

    if args.tui:
        from platoons_war.ui.app import BattleApp

        BattleApp(battlefield).run()
        return 0

    pause = None if args.no_pause else input
    try:
        run_console(battlefield, pause=pause)
    except (KeyboardInterrupt, EOFError):
        logger.info("battle interrupted")
        return 130
    return 0
