from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SimulationStatus(Enum):
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    width: float
    height: float
    vy: float
    airborne: bool


@dataclass(frozen=True)
class Obstacle:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Progression:
    score: int
    high_score: int
    xp_to_next: int   # threshold comes from GameConfig.initial_xp_to_next

    # XP variant; untouched when XP is disabled
    xp: int = 0
    level: int = 1


@dataclass(frozen=True)
class GameState:
    player: Player
    obstacles: tuple[Obstacle, ...]   # spawn order
    progression: Progression
    status: SimulationStatus
    tick: int

    @property
    def is_over(self) -> bool:
        return self.status is SimulationStatus.OVER
