from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    Every constant the simulation needs, supplied at construction.
    Units are pixels and ticks; velocities are pixels per tick.
    """
    # Playfield
    width: float = 800.0
    height: float = 400.0
    ground_thickness: float = 50.0

    # Player
    player_x: float = 50.0
    player_width: float = 32.0
    player_height: float = 48.0
    gravity: float = 0.5
    jump_force: float = 12.0

    # Obstacles
    obstacle_speed: float = 6.0
    spawn_interval: int = 90          # ticks between spawns
    obstacle_width: float = 30.0
    min_obstacle_height: int = 40
    max_obstacle_height: int = 120

    # Progression
    xp_enabled: bool = True
    initial_xp_to_next: int = 10
    xp_growth: float = 1.5
    keep_progression_on_restart: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("playfield width/height must be > 0")
        if self.ground_thickness < 0 or self.ground_thickness >= self.height:
            raise ValueError("ground_thickness must be in [0, height)")
        if self.player_width <= 0 or self.player_height <= 0:
            raise ValueError("player width/height must be > 0")
        if self.player_height > self.ground_y:
            raise ValueError("player does not fit above the ground")
        if self.gravity <= 0:
            raise ValueError("gravity must be > 0")
        if self.jump_force < 0:
            raise ValueError("jump_force must be >= 0")
        if self.obstacle_speed <= 0:
            raise ValueError("obstacle_speed must be > 0")
        if self.spawn_interval <= 0:
            raise ValueError("spawn_interval must be > 0")
        if self.obstacle_width <= 0:
            raise ValueError("obstacle_width must be > 0")
        if self.min_obstacle_height < 0 or self.min_obstacle_height > self.max_obstacle_height:
            raise ValueError("obstacle height range must satisfy 0 <= min <= max")
        if self.initial_xp_to_next <= 0:
            raise ValueError("initial_xp_to_next must be > 0")
        if self.xp_growth <= 1.0:
            raise ValueError("xp_growth must be > 1")

    @property
    def ground_y(self) -> float:
        # y of the ground line; everything rests with its bottom here
        return self.height - self.ground_thickness
