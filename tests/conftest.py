"""Shared fixtures for the simulation tests."""
from dataclasses import replace

import pytest

from endless_runner.domain.config import GameConfig
from endless_runner.domain.game_state import Obstacle
from endless_runner.domain.world import World


class FixedRandom:
    """Deterministic stand-in for random.Random: randint always returns `value` (clamped)."""

    def __init__(self, value: int | None = None) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if self.value is None:
            return a
        return max(a, min(b, self.value))


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return FixedRandom()


@pytest.fixture
def world(config, rng):
    return World(config, rng)


def with_obstacles(state, *obstacles: Obstacle):
    return replace(state, obstacles=tuple(obstacles))


def far_obstacle(config: GameConfig, x: float) -> Obstacle:
    """A short obstacle on the ground at x."""
    return Obstacle(x=x, y=config.ground_y - 10, width=config.obstacle_width, height=10)
