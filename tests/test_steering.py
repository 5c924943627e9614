import random

import pytest

from scrmirror.steering import (
    ACTION_DOWN,
    ACTION_MOVE,
    ACTION_UP,
    HIGHEST_TIMER,
    LOWEST_TIMER,
    POS_STEP,
    Direction,
    SteerWheelState,
    delay_queue,
)

OFFSETS = {
    Direction.UP: 0.1,
    Direction.RIGHT: 0.1,
    Direction.DOWN: 0.1,
    Direction.LEFT: 0.1,
}


def test_delay_queue_without_jitter_is_evenly_spaced():
    positions, timers = delay_queue((0.0, 0.0), (2.0, 0.0), 0.5, 0.0, 3, 4, random.Random(1))
    assert positions == pytest.approx([(0.0, 0.0), (0.5, 0.0), (1.0, 0.0), (1.5, 0.0)])
    assert timers == [3, 3, 3, 3]


def test_delay_queue_same_point_is_empty():
    assert delay_queue((0.3, 0.3), (0.3, 0.3), 0.01, 0.002, 2, 8, random.Random(0)) == ([], [])


def test_delay_queue_jitter_and_timer_bounds():
    rng = random.Random(42)
    positions, timers = delay_queue((0.0, 0.0), (0.0, 1.0), 0.1, 0.01, 2, 8, rng)
    assert len(positions) == len(timers)
    assert len(positions) in (9, 10)
    for index, (x, y) in enumerate(positions):
        assert -0.01 <= x < 0.01
        assert abs(y - index * 0.1) <= 0.01 + 1e-9
    assert all(2 <= t < 8 for t in timers)


def test_delay_queue_is_reproducible_with_seed():
    first = delay_queue((0.1, 0.2), (0.5, 0.9), 0.01, 0.002, 2, 8, random.Random(7))
    second = delay_queue((0.1, 0.2), (0.5, 0.9), 0.01, 0.002, 2, 8, random.Random(7))
    assert first == second


def test_first_press_touches_down_at_center():
    state = SteerWheelState(center_pos=(0.5, 0.5), rng=random.Random(3))
    events = state.press(Direction.UP, True, OFFSETS)
    assert events == [(ACTION_DOWN, (0.5, 0.5))]
    assert state.pressed_num == 1
    assert state.touch_direction is Direction.UP
    assert state.queue_pos
    assert len(state.queue_pos) == len(state.queue_timer)
    for x, y in state.queue_pos:
        assert abs(x - 0.5) <= POS_STEP
        assert 0.4 - POS_STEP <= y <= 0.5 + POS_STEP


def test_advance_drains_queue_and_keeps_touch():
    state = SteerWheelState(center_pos=(0.5, 0.5), rng=random.Random(3))
    state.press(Direction.RIGHT, True, OFFSETS)
    queued = list(state.queue_pos)
    seen = []
    while True:
        events, delay = state.advance()
        seen.extend(events)
        if delay is None:
            break
        assert LOWEST_TIMER <= delay < HIGHEST_TIMER
    assert seen == [(ACTION_MOVE, pos) for pos in queued]
    assert state.current_pos == queued[-1]
    assert state.advance() == ([], None)


def test_release_touches_up_at_current_position():
    state = SteerWheelState(center_pos=(0.5, 0.5), rng=random.Random(5))
    state.press(Direction.LEFT, True, OFFSETS)
    while state.advance()[1] is not None:
        pass
    last = state.current_pos
    events = state.press(Direction.LEFT, False, OFFSETS)
    assert events == [(ACTION_UP, last)]
    assert state.pressed_num == 0
    assert state.queue_pos == []
    assert state.queue_timer == []


def test_second_key_moves_from_current_position_without_touch_down():
    state = SteerWheelState(center_pos=(0.5, 0.5), rng=random.Random(9))
    state.press(Direction.UP, True, OFFSETS)
    while state.advance()[1] is not None:
        pass
    events = state.press(Direction.RIGHT, True, OFFSETS)
    assert events == []
    assert state.pressed_num == 2
    assert state.touch_direction is Direction.UP
    last_x, last_y = state.queue_pos[-1]
    assert last_x > 0.5
    assert last_y < 0.5


def test_release_during_queue_ends_with_up_event_after_moves():
    state = SteerWheelState(center_pos=(0.5, 0.5), rng=random.Random(11))
    state.press(Direction.DOWN, True, OFFSETS)
    state.press(Direction.RIGHT, True, OFFSETS)
    state.press(Direction.DOWN, False, OFFSETS)
    assert state.pressed_num == 1
    events = []
    while True:
        step, delay = state.advance()
        events.extend(step)
        if delay is None:
            break
    assert all(action == ACTION_MOVE for action, _ in events)
    assert state.press(Direction.RIGHT, False, OFFSETS) == [(ACTION_UP, state.current_pos)]