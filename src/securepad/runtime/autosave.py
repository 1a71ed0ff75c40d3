"""Wall-clock autosave deadline checked from the render loop."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]

DEFAULT_AUTOSAVE_INTERVAL = 5.0


class AutosaveTimer:
    """Tracks time since the last successful save.

    There is no background thread: the loop asks :meth:`due` once per
    iteration, right after its bounded input wait.
    """

    def __init__(
        self,
        interval: float = DEFAULT_AUTOSAVE_INTERVAL,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError("autosave interval must be positive")
        self.interval = interval
        self._clock = clock
        self.last_save = clock()

    def elapsed(self) -> float:
        return self._clock() - self.last_save

    def due(self) -> bool:
        return self.elapsed() >= self.interval

    def reset(self) -> None:
        self.last_save = self._clock()


__all__ = ["AutosaveTimer", "Clock", "DEFAULT_AUTOSAVE_INTERVAL"]
