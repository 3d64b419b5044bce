from __future__ import annotations

from dataclasses import replace

from endless_runner.domain.game_state import Player


def apply_jump(p: Player, jump_force: float) -> Player:
    # No air jumps.
    if p.airborne:
        return p
    return replace(p, vy=-jump_force, airborne=True)


def step_player(p: Player, gravity: float, ground_y: float) -> Player:
    vy = p.vy + gravity
    y = p.y + vy

    floor_y = ground_y - p.height
    if y >= floor_y:
        return replace(p, y=floor_y, vy=0.0, airborne=False)

    return replace(p, y=y, vy=vy, airborne=True)
