from __future__ import annotations
import tkinter as tk
from endless_runner.domain.input_state import InputState


class TkInputMapper:
    """
    Space jumps while running and restarts once the round is over
    (the world ignores whichever command does not apply). R always restarts.
    """

    def __init__(self, root: tk.Misc) -> None:
        self._space_down = False
        self._jump_edge = False
        self._restart_edge = False

        root.bind("<KeyPress-space>", self._on_space_down)
        root.bind("<KeyRelease-space>", self._on_space_up)
        root.bind("<KeyPress-r>", self._on_restart)
        root.bind("<KeyPress-R>", self._on_restart)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_space_down(self, _evt: tk.Event | None) -> None:
        # Key auto-repeat sends repeated KeyPress events; only the first counts.
        if not self._space_down:
            self._jump_edge = True
            self._restart_edge = True
        self._space_down = True

    def _on_space_up(self, _evt: tk.Event | None) -> None:
        self._space_down = False

    def _on_restart(self, _evt: tk.Event | None) -> None:
        self._restart_edge = True

    def sample(self) -> InputState:
        # “Pressed this frame” semantics.
        inp = InputState(jump_pressed=self._jump_edge, restart_pressed=self._restart_edge)
        self._jump_edge = False
        self._restart_edge = False
        return inp
