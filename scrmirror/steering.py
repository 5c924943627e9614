"""Steering-wheel emulation: directional keys drive one dragged touch."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

__all__ = [
    "ACTION_DOWN",
    "ACTION_UP",
    "ACTION_MOVE",
    "DISTANCE_STEP",
    "POS_STEP",
    "LOWEST_TIMER",
    "HIGHEST_TIMER",
    "Direction",
    "SteerWheelState",
    "delay_queue",
]

ACTION_DOWN = 0
ACTION_UP = 1
ACTION_MOVE = 2

DISTANCE_STEP = 0.01
POS_STEP = 0.002
LOWEST_TIMER = 2
HIGHEST_TIMER = 8

Point = tuple[float, float]
TouchEvent = tuple[int, Point]


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


def delay_queue(
    start: Point,
    end: Point,
    distance_step: float,
    pos_step: float,
    lowest_timer: int,
    highest_timer: int,
    rng: random.Random | None = None,
) -> tuple[list[Point], list[int]]:
    """Split the path from ``start`` towards ``end`` into jittered steps.

    Returns the positions and, for each, a delay in
    ``[lowest_timer, highest_timer)``. Each position is moved by a random
    amount in ``[-pos_step, pos_step)`` on both axes.
    """
    rng = rng or random.Random()
    x, y = start
    dx = end[0] - x
    dy = end[1] - y
    steps = max(abs(dx), abs(dy)) / distance_step
    if steps == 0:
        return [], []
    dx /= steps
    dy /= steps

    positions: list[Point] = []
    timers: list[int] = []
    for _ in range(int(steps)):
        positions.append(
            (
                x + (rng.random() * pos_step * 2 - pos_step),
                y + (rng.random() * pos_step * 2 - pos_step),
            )
        )
        timers.append(rng.randrange(lowest_timer, highest_timer))
        x += dx
        y += dy
    return positions, timers


@dataclass
class SteerWheelState:
    """Tracks pressed directions and the queued moves of the steering touch."""

    center_pos: Point = (0.0, 0.0)
    rng: random.Random = field(default_factory=random.Random)
    pressed: dict[Direction, bool] = field(
        default_factory=lambda: {direction: False for direction in Direction}
    )
    touch_direction: Direction | None = None
    current_pos: Point = (0.0, 0.0)
    queue_pos: list[Point] = field(default_factory=list)
    queue_timer: list[int] = field(default_factory=list)
    pressed_num: int = 0

    def press(
        self, direction: Direction, pressed: bool, offsets: Mapping[Direction, float]
    ) -> list[TouchEvent]:
        """Record a key change and return the touch events to send now.

        The move towards the new target is queued; drain it with
        :meth:`advance`.
        """
        self.pressed[direction] = pressed

        off_x = 0.0
        off_y = 0.0
        if self.pressed[Direction.UP]:
            off_y -= offsets[Direction.UP]
        if self.pressed[Direction.RIGHT]:
            off_x += offsets[Direction.RIGHT]
        if self.pressed[Direction.DOWN]:
            off_y += offsets[Direction.DOWN]
        if self.pressed[Direction.LEFT]:
            off_x -= offsets[Direction.LEFT]
        self.pressed_num = sum(self.pressed.values())

        self.queue_pos.clear()
        self.queue_timer.clear()

        if self.pressed_num == 0:
            self.touch_direction = None
            return [(ACTION_UP, self.current_pos)]

        target = (self.center_pos[0] + off_x, self.center_pos[1] + off_y)
        events: list[TouchEvent] = []
        if self.pressed_num == 1 and pressed:
            self.touch_direction = direction
            events.append((ACTION_DOWN, self.center_pos))
            origin = self.center_pos
        else:
            origin = self.current_pos
        self.queue_pos, self.queue_timer = delay_queue(
            origin, target, DISTANCE_STEP, POS_STEP, LOWEST_TIMER, HIGHEST_TIMER, self.rng
        )
        return events

    def advance(self) -> tuple[list[TouchEvent], int | None]:
        """Take the next queued move.

        Returns the events to send and the delay before the next call, or
        ``None`` when nothing more is queued.
        """
        if not self.queue_pos:
            return [], None
        self.current_pos = self.queue_pos.pop(0)
        events: list[TouchEvent] = [(ACTION_MOVE, self.current_pos)]
        if not self.queue_pos:
            if self.pressed_num == 0:
                events.append((ACTION_UP, self.current_pos))
                self.touch_direction = None
            return events, None
        return events, self.queue_timer.pop(0)