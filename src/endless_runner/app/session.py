from __future__ import annotations

import logging

from endless_runner.domain.events import Collided
from endless_runner.domain.game_state import GameState
from endless_runner.domain.input_state import NO_INPUT, InputState
from endless_runner.domain.world import StepResult, World
from endless_runner.infra.high_score_store import HighScoreStore

logger = logging.getLogger(__name__)


class RunnerSession:
    """
    Owns the current round and wires the world to the high-score store:
    the store is read once here and written whenever a round ends.
    """

    def __init__(self, world: World, store: HighScoreStore) -> None:
        self.world = world
        self._store = store

        high_score = store.load()
        logger.info("Loaded high score %d", high_score)
        self.state: GameState = world.new_game(high_score=high_score)

    def advance(self, inp: InputState = NO_INPUT) -> StepResult:
        result = self.world.step(self.state, inp)
        self.state = result.state

        for ev in result.events:
            if isinstance(ev, Collided):
                self._store.save(ev.high_score)

        return result
