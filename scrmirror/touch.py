"""Touch pointer ids shared between keys and buttons that hold a touch."""

from __future__ import annotations

__all__ = ["MULTI_TOUCH_MAX_NUM", "TouchIdPool", "frame_absolute_pos"]

MULTI_TOUCH_MAX_NUM = 10

Point = tuple[float, float]


class TouchIdPool:
    """A fixed number of touch ids, each held by at most one key.

    An id is the index of the slot a key occupies. The lowest free id is
    handed out first.
    """

    def __init__(self, size: int = MULTI_TOUCH_MAX_NUM) -> None:
        if size < 1:
            raise ValueError(f"pool size must be positive, got {size}")
        self._slots: list[int | None] = [None] * size

    def __len__(self) -> int:
        return len(self._slots)

    def attach(self, key: int) -> int | None:
        """Give ``key`` the lowest free id; return ``None`` when all are taken."""
        for touch_id, holder in enumerate(self._slots):
            if holder is None:
                self._slots[touch_id] = key
                return touch_id
        return None

    def detach(self, key: int) -> None:
        """Free the first id held by ``key``; do nothing if it holds none."""
        touch_id = self.get(key)
        if touch_id is not None:
            self._slots[touch_id] = None

    def get(self, key: int) -> int | None:
        """Return the first id held by ``key``, or ``None``."""
        for touch_id, holder in enumerate(self._slots):
            if holder is not None and holder == key:
                return touch_id
        return None


def frame_absolute_pos(relative_pos: Point, size: tuple[float, float]) -> Point:
    """Scale a position given in fractions of the frame to frame pixels."""
    width, height = size
    x, y = relative_pos
    return (width * x, height * y)