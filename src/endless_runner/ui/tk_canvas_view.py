import tkinter as tk
from endless_runner.domain.game_state import GameState


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int, ground_y: float, show_xp: bool = True) -> None:
        self._w = width
        self._h = height
        self._show_xp = show_xp

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="#111")
        self.canvas.pack(fill="both", expand=True)

        self.canvas.create_rectangle(0, ground_y, width, height, outline="", fill="#4B4B4B")
        self._player_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill="#FFC600")
        self._score_id = self.canvas.create_text(
            10, 10, anchor="nw", text="", fill="#fff", font=("TkDefaultFont", 14)
        )
        self._xp_id = self.canvas.create_text(
            width - 10, 10, anchor="ne", text="", fill="#9cf", font=("TkDefaultFont", 12)
        )

    def render_game(self, state: GameState) -> None:
        p = state.player
        self.canvas.coords(self._player_id, p.x, p.y, p.x + p.width, p.y + p.height)

        # Redraw obstacles (simple + fine for a handful)
        self.canvas.delete("obstacle")
        for o in state.obstacles:
            self.canvas.create_rectangle(
                o.x, o.y, o.x + o.width, o.y + o.height, outline="", fill="#FF4444", tags=("obstacle",)
            )

        prog = state.progression
        self.canvas.itemconfigure(self._score_id, text=f"Score: {prog.score}\nHigh Score: {prog.high_score}")
        if self._show_xp:
            self.canvas.itemconfigure(
                self._xp_id, text=f"Level {prog.level}  XP {prog.xp}/{prog.xp_to_next}"
            )

        self.canvas.delete("overlay")
        if state.is_over:
            # Solid banner; stipple is ignored by Tk on macOS.
            cx, cy = self._w / 2, self._h / 2
            self.canvas.create_rectangle(
                cx - 180, cy - 55, cx + 180, cy + 40, fill="#000", outline="#fff", tags=("overlay",)
            )
            self.canvas.create_text(
                cx, cy - 20, text="GAME OVER!", fill="#fff",
                font=("TkDefaultFont", 28), tags=("overlay",),
            )
            self.canvas.create_text(
                cx, cy + 15, text="Press SPACE to restart", fill="#fff",
                font=("TkDefaultFont", 16), tags=("overlay",),
            )
