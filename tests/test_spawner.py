import random

from conftest import FixedRandom

from endless_runner.domain.config import GameConfig
from endless_runner.domain.spawner import should_spawn, spawn_obstacle


class TestShouldSpawn:
    def test_never_on_tick_zero(self):
        assert not should_spawn(0, 90)

    def test_on_multiples_of_interval(self):
        spawned = [t for t in range(0, 400) if should_spawn(t, 90)]
        assert spawned == [90, 180, 270, 360]


class TestSpawnObstacle:
    def test_placed_at_right_edge_resting_on_ground(self):
        cfg = GameConfig()
        o = spawn_obstacle(cfg, FixedRandom(70))
        assert o.x == cfg.width
        assert o.height == 70
        assert o.y + o.height == cfg.ground_y
        assert o.width == cfg.obstacle_width

    def test_height_drawn_from_inclusive_range(self):
        cfg = GameConfig(min_obstacle_height=40, max_obstacle_height=120)
        rng = FixedRandom()
        spawn_obstacle(cfg, rng)
        assert rng.calls == [(40, 120)]

    def test_heights_stay_in_range_with_real_rng(self):
        cfg = GameConfig(min_obstacle_height=5, max_obstacle_height=8)
        rng = random.Random(1234)
        heights = {spawn_obstacle(cfg, rng).height for _ in range(500)}
        assert heights == {5, 6, 7, 8}

    def test_respects_custom_geometry(self):
        cfg = GameConfig(width=300, height=200, ground_thickness=20, obstacle_width=12)
        o = spawn_obstacle(cfg, FixedRandom(50))
        assert (o.x, o.y, o.width) == (300, 130, 12)
