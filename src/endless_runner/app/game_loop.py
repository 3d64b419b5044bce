from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives the simulation from tkinter's `after` scheduler.

    Wall-clock time is converted into whole ticks of 1/ticks_per_second;
    each frame runs the due ticks and then renders once.
    tick_fn receives the frame index within the batch (0 for the first tick),
    so callers can apply sampled input to the first tick only.
    """

    def __init__(
        self,
        *,
        root: tk.Misc,
        tick_fn: Callable[[int], None],
        render_fn: Callable[[], None],
        fps: int = 60,
        ticks_per_second: int = 60,
        max_ticks_per_frame: int = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._root = root
        self._tick_fn = tick_fn
        self._render_fn = render_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))
        self._fixed_dt = 1.0 / max(1, ticks_per_second)
        self._max_ticks = max(1, max_ticks_per_frame)
        self._clock = clock

        self._running = False
        self._after_id: str | None = None
        self._last_t = 0.0
        self._accum = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = self._clock()
        self._accum = 0.0
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._frame)

    def _frame(self) -> None:
        if not self._running:
            return

        now = self._clock()
        dt = min(now - self._last_t, 0.1)  # clamp after pauses/minimize
        self._last_t = now
        self._accum += dt

        try:
            n = 0
            while self._accum >= self._fixed_dt and n < self._max_ticks:
                self._tick_fn(n)
                self._accum -= self._fixed_dt
                n += 1
            if n == self._max_ticks:
                # Drop the backlog instead of spiralling.
                self._accum = 0.0
            self._render_fn()
        except Exception:
            logger.exception("Frame failed; stopping loop")
            self.stop()
            raise

        self._schedule_next()
