import pytest

from endless_runner.__main__ import parse_args
from endless_runner.domain.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.ground_y == 350
        assert (cfg.gravity, cfg.jump_force, cfg.spawn_interval) == (0.5, 12, 90)
        assert cfg.keep_progression_on_restart is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 0},
            {"ground_thickness": 400},
            {"player_height": 351},
            {"gravity": 0},
            {"spawn_interval": 0},
            {"min_obstacle_height": 50, "max_obstacle_height": 40},
            {"obstacle_speed": -1},
            {"initial_xp_to_next": 0},
            {"xp_growth": 1.0},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.xp_enabled is True
        assert args.keep_progression is False
        assert args.seed is None
        assert args.log_level == "WARNING"

    def test_flags(self, tmp_path):
        args = parse_args(
            ["--no-xp", "--keep-progression", "--seed", "7", "--high-score-file", str(tmp_path / "hs.json")]
        )
        assert args.xp_enabled is False
        assert args.keep_progression is True
        assert args.seed == 7
        assert args.high_score_file == tmp_path / "hs.json"
