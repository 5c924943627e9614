"""Counting of rendered and skipped frames per second."""

from __future__ import annotations

import threading
from typing import Callable, Optional

__all__ = ["FpsCounter", "COUNTER_INTERVAL_MS"]

COUNTER_INTERVAL_MS = 1000


class FpsCounter:
    """Counts frames between ticks.

    The owner calls :meth:`tick` once per interval (see ``COUNTER_INTERVAL_MS``);
    each tick reports the number of frames rendered since the previous tick to
    ``on_update`` and starts a new count.
    """

    def __init__(self, on_update: Optional[Callable[[int], None]] = None) -> None:
        self._on_update = on_update
        self._lock = threading.Lock()
        self._started = False
        self.rendered = 0
        self.skipped = 0
        self.last_rendered = 0
        self.last_skipped = 0

    def _reset(self) -> None:
        self.rendered = 0
        self.skipped = 0

    def start(self) -> None:
        with self._lock:
            self._reset()
            self._started = True

    def stop(self) -> None:
        with self._lock:
            self._started = False
            self._reset()

    def is_started(self) -> bool:
        return self._started

    def add_rendered_frame(self) -> None:
        with self._lock:
            self.rendered += 1

    def add_skipped_frame(self) -> None:
        with self._lock:
            self.skipped += 1

    def tick(self) -> int | None:
        """Close the current interval and report its frame rate.

        Returns the rendered frame count, or ``None`` when not started.
        """
        with self._lock:
            if not self._started:
                return None
            self.last_rendered = self.rendered
            self.last_skipped = self.skipped
            self._reset()
            fps = self.last_rendered
        if self._on_update is not None:
            self._on_update(fps)
        return fps