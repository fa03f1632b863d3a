"""Frame pacing and delta-time tracking."""

from __future__ import annotations

import time
from typing import Callable, Optional


class FPS:
    """Decides when a frame is due for a target rate and tracks time between frames.

    ``clock`` returns the current time in whole milliseconds; by default it
    counts from the moment the object is created.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        if clock is None:
            start = time.monotonic()
            clock = lambda: int((time.monotonic() - start) * 1000)  # noqa: E731
        self._clock = clock
        self._last = 0
        self._delta = 0.0
        self.interval = 0.0

    def at(self, fps: int) -> bool:
        """Return whether a frame is due at ``fps`` (0 means every call); update delta if so."""
        current = self._clock()
        self.interval = 0 if fps == 0 else 1000 // fps
        frame = fps == 0 or current - self._last >= self.interval
        if frame:
            self._delta = (current - self._last) / 1000.0
            self._last = current
        return frame

    def delta_time(self) -> float:
        """Seconds between the two most recent processed frames."""
        return self._delta