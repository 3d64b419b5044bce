from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ObstaclePassed:
    score: int
    high_score: int
    reward: int   # XP granted for this pass (0 when XP is disabled)


@dataclass(frozen=True)
class LevelUp:
    level: int           # level reached
    levels_gained: int   # > 1 when one reward crossed several thresholds
    xp_to_next: int


@dataclass(frozen=True)
class Collided:
    """The round ended this tick; high_score is the value to persist."""
    score: int
    high_score: int


Event = Union[ObstaclePassed, LevelUp, Collided]
