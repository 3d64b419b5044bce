from __future__ import annotations

import argparse
import logging
from pathlib import Path

from endless_runner.domain.config import GameConfig
from endless_runner.infra.high_score_store import JsonHighScoreStore

DEFAULT_HIGH_SCORE_FILE = Path.home() / ".endless_runner_high_score.json"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="endless-runner", description="Jump over obstacles for as long as you can.")
    p.add_argument("--high-score-file", type=Path, default=DEFAULT_HIGH_SCORE_FILE,
                   help="JSON file holding the persisted high score")
    p.add_argument("--xp", dest="xp_enabled", action=argparse.BooleanOptionalAction, default=True,
                   help="Enable the XP/level progression")
    p.add_argument("--keep-progression", action="store_true",
                   help="Keep XP and level when restarting a round")
    p.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    p.add_argument("--fps", type=int, default=60, help="Target frames per second")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(
        xp_enabled=args.xp_enabled,
        keep_progression_on_restart=args.keep_progression,
    )

    # Imported late so --help works without a display.
    from endless_runner.app.game_app import GameApp

    GameApp(config=config, store=JsonHighScoreStore(args.high_score_file), seed=args.seed, fps=args.fps).run()


if __name__ == "__main__":
    main()
