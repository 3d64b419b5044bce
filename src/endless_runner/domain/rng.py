from __future__ import annotations
from typing import Protocol


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:  # inclusive on both ends
        ...
