from __future__ import annotations

from endless_runner.domain.config import GameConfig
from endless_runner.domain.game_state import Obstacle
from endless_runner.domain.rng import RandomSource


def should_spawn(tick: int, interval: int) -> bool:
    # The counter is incremented before spawning, so tick 0 never spawns.
    return tick > 0 and tick % interval == 0


def spawn_obstacle(config: GameConfig, rng: RandomSource) -> Obstacle:
    height = rng.randint(config.min_obstacle_height, config.max_obstacle_height)
    return Obstacle(
        x=config.width,
        y=config.ground_y - height,
        width=config.obstacle_width,
        height=float(height),
    )
