from __future__ import annotations

import logging
import random
import tkinter as tk

from endless_runner.app.game_loop import GameLoop
from endless_runner.app.session import RunnerSession
from endless_runner.domain.config import GameConfig
from endless_runner.domain.input_state import NO_INPUT
from endless_runner.domain.world import World
from endless_runner.infra.exceptions import HighScoreSaveError
from endless_runner.infra.high_score_store import HighScoreStore
from endless_runner.ui.input_mapper import TkInputMapper
from endless_runner.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(
        self,
        *,
        config: GameConfig,
        store: HighScoreStore,
        seed: int | None = None,
        fps: int = 60,
    ) -> None:
        self.config = config

        self.root = tk.Tk()
        self.root.title("Endless Runner")
        self.root.resizable(False, False)

        self.input = TkInputMapper(self.root)
        self.view = TkCanvasView(
            self.root,
            width=int(config.width),
            height=int(config.height),
            ground_y=config.ground_y,
            show_xp=config.xp_enabled,
        )

        self.session = RunnerSession(World(config, random.Random(seed)), store)

        self.loop = GameLoop(
            root=self.root,
            tick_fn=self._tick,
            render_fn=self._render,
            fps=fps,
            ticks_per_second=60,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.loop.start()
        self.root.mainloop()

    # ---------- Game loop ----------

    def _tick(self, index_in_frame: int) -> None:
        # Input is sampled once per frame and only applies to its first tick.
        inp = self.input.sample() if index_in_frame == 0 else NO_INPUT
        try:
            self.session.advance(inp)
        except HighScoreSaveError:
            # The round is already over in memory; only persistence failed.
            logger.exception("Could not persist high score")

    def _render(self) -> None:
        self.view.render_game(self.session.state)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
