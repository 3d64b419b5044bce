from __future__ import annotations

import logging
from dataclasses import dataclass

from endless_runner.domain.collision import rects_overlap
from endless_runner.domain.config import GameConfig
from endless_runner.domain.events import Collided, Event, LevelUp, ObstaclePassed
from endless_runner.domain.game_state import GameState, Obstacle, Player, Progression, SimulationStatus
from endless_runner.domain.input_state import NO_INPUT, InputState
from endless_runner.domain.physics import apply_jump, step_player
from endless_runner.domain.progression import initial_progression, progression_for_restart, record_pass
from endless_runner.domain.rng import RandomSource
from endless_runner.domain.spawner import should_spawn, spawn_obstacle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    state: GameState
    events: tuple[Event, ...] = ()


class World:
    def __init__(self, config: GameConfig, rng: RandomSource) -> None:
        self.config = config
        self._rng = rng

    # ---------- Round construction ----------

    def new_game(self, *, high_score: int = 0) -> GameState:
        return self._fresh_round(initial_progression(self.config, high_score=high_score))

    def restart(self, state: GameState) -> GameState:
        prog = progression_for_restart(state.progression, self.config)
        logger.info("Restart (high score %d, level %d)", prog.high_score, prog.level)
        return self._fresh_round(prog)

    def _fresh_round(self, prog: Progression) -> GameState:
        cfg = self.config
        player = Player(
            x=cfg.player_x,
            y=cfg.ground_y - cfg.player_height,
            width=cfg.player_width,
            height=cfg.player_height,
            vy=0.0,
            airborne=False,
        )
        return GameState(
            player=player,
            obstacles=(),
            progression=prog,
            status=SimulationStatus.RUNNING,
            tick=0,
        )

    # ---------- Tick ----------

    def step(self, state: GameState, inp: InputState = NO_INPUT) -> StepResult:
        if state.is_over:
            if inp.restart_pressed:
                return StepResult(state=self.restart(state))
            return StepResult(state=state)

        cfg = self.config

        # ----- Jump (sampled at the tick boundary) -----
        p = state.player
        if inp.jump_pressed:
            p = apply_jump(p, cfg.jump_force)

        tick = state.tick + 1

        # ----- Gravity + ground clamp -----
        p = step_player(p, cfg.gravity, cfg.ground_y)

        # ----- Spawn -----
        obstacles = state.obstacles
        if should_spawn(tick, cfg.spawn_interval):
            new_obs = spawn_obstacle(cfg, self._rng)
            logger.debug("Spawned obstacle h=%.0f at tick %d", new_obs.height, tick)
            obstacles = obstacles + (new_obs,)

        # ----- Scroll, collide, compact -----
        kept: list[Obstacle] = []
        passed = 0
        collided = False
        for i, o in enumerate(obstacles):
            moved = Obstacle(x=o.x - cfg.obstacle_speed, y=o.y, width=o.width, height=o.height)

            # Collision and off-screen are independent tests; a hit is never a pass.
            if rects_overlap(p, moved):
                collided = True
                kept.append(moved)
                kept.extend(obstacles[i + 1:])
                break

            if moved.x + moved.width < 0:
                passed += 1
            else:
                kept.append(moved)

        # ----- Score -----
        prog = state.progression
        events: list[Event] = []
        for _ in range(passed):
            prog, reward, gained = record_pass(prog, cfg)
            events.append(ObstaclePassed(score=prog.score, high_score=prog.high_score, reward=reward))
            if gained:
                events.append(LevelUp(level=prog.level, levels_gained=gained, xp_to_next=prog.xp_to_next))
                logger.info("Level up -> %d", prog.level)

        status = state.status
        if collided:
            status = SimulationStatus.OVER
            events.append(Collided(score=prog.score, high_score=prog.high_score))
            logger.info("Round over: score %d, high score %d", prog.score, prog.high_score)

        next_state = GameState(
            player=p,
            obstacles=tuple(kept),
            progression=prog,
            status=status,
            tick=tick,
        )
        return StepResult(state=next_state, events=tuple(events))
