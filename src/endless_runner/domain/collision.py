from __future__ import annotations

from typing import Protocol


class Rect(Protocol):
    # Read-only so frozen dataclasses satisfy it.
    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict AABB overlap; rectangles that only share an edge do not collide."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )
