from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from endless_runner.infra.exceptions import HighScoreSaveError

logger = logging.getLogger(__name__)

_FORMAT = "endless_runner.high_score"
_VERSION_LATEST = 1


class HighScoreStore(Protocol):
    def load(self) -> int:
        ...

    def save(self, high_score: int) -> None:
        ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, initial: int = 0) -> None:
        self.value = max(0, int(initial))
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, high_score: int) -> None:
        self.value = int(high_score)
        self.saves += 1


class JsonHighScoreStore:
    """
    Stores the high score as a small JSON document.
    Loading never fails: a missing or malformed file reads as 0.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> int:
        if not self._path.exists():
            return 0
        try:
            obj = json.loads(self._path.read_text(encoding="utf-8"))
            return _decode(obj)
        except Exception as e:
            # Includes RecursionError from pathologically nested JSON.
            logger.warning("Ignoring unreadable high score file %s: %s", self._path, e)
            return 0

    def save(self, high_score: int) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            payload = {"format": _FORMAT, "version": _VERSION_LATEST, "high_score": int(high_score)}
            text = json.dumps(payload, indent=2, sort_keys=True)
            self._path.parent.mkdir(parents=True, exist_ok=True)

            # Atomic-ish write: write temp then replace.
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self._path)
        except Exception as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                pass
            raise HighScoreSaveError(f"Failed to save high score to {self._path}: {e}") from e


def _decode(obj: object) -> int:
    # A bare integer is accepted too (hand-edited or older files).
    if isinstance(obj, dict):
        if obj.get("format") != _FORMAT:
            raise ValueError("invalid format marker")
        if obj.get("version") != _VERSION_LATEST:
            raise ValueError("unsupported version")
        obj = obj.get("high_score")

    if isinstance(obj, bool) or not isinstance(obj, int):
        raise ValueError("high_score must be an integer")
    if obj < 0:
        raise ValueError("high_score must be >= 0")
    return obj
