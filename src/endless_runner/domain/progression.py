from __future__ import annotations

import math
from dataclasses import replace

from endless_runner.domain.config import GameConfig
from endless_runner.domain.game_state import Progression


def reward_for_score(score: int) -> int:
    """
    XP granted for passing an obstacle at the given score: floor(1 + sqrt(score)).
    Grows without an upper limit.
    """
    if score < 0:
        raise ValueError("score must be >= 0")
    return 1 + math.isqrt(score)


def add_xp(prog: Progression, amount: int, growth: float) -> tuple[Progression, int]:
    """
    Add XP and roll over as many levels as it pays for.
    Returns the new progression and the number of levels gained.
    """
    if amount < 0:
        raise ValueError("amount must be >= 0")

    xp = prog.xp + amount
    level = prog.level
    xp_to_next = prog.xp_to_next
    gained = 0

    # One large reward may cross several thresholds.
    while xp >= xp_to_next:
        xp -= xp_to_next
        level += 1
        xp_to_next = math.floor(xp_to_next * growth)
        gained += 1

    return replace(prog, xp=xp, level=level, xp_to_next=xp_to_next), gained


def record_pass(prog: Progression, config: GameConfig) -> tuple[Progression, int, int]:
    """
    Score one passed obstacle.
    Returns (progression, reward, levels_gained).
    """
    score = prog.score + 1
    prog = replace(prog, score=score, high_score=max(prog.high_score, score))

    if not config.xp_enabled:
        return prog, 0, 0

    reward = reward_for_score(score)
    prog, gained = add_xp(prog, reward, config.xp_growth)
    return prog, reward, gained


def initial_progression(config: GameConfig, *, high_score: int = 0) -> Progression:
    return Progression(score=0, high_score=high_score, xp_to_next=config.initial_xp_to_next)


def progression_for_restart(prog: Progression, config: GameConfig) -> Progression:
    if config.keep_progression_on_restart:
        return replace(prog, score=0)
    return initial_progression(config, high_score=prog.high_score)
