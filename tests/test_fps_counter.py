import pytest

from scrmirror.fps_counter import FpsCounter


def test_tick_reports_rendered_and_resets():
    reports = []
    counter = FpsCounter(reports.append)
    counter.start()
    for _ in range(3):
        counter.add_rendered_frame()
    counter.add_skipped_frame()
    assert counter.tick() == 3
    assert reports == [3]
    assert counter.last_skipped == 1
    assert counter.rendered == 0
    assert counter.skipped == 0
    assert counter.tick() == 0
    assert reports == [3, 0]


def test_tick_when_not_started_reports_nothing():
    reports = []
    counter = FpsCounter(reports.append)
    counter.add_rendered_frame()
    assert counter.tick() is None
    assert reports == []


def test_start_and_stop_state():
    counter = FpsCounter()
    assert counter.is_started() is False
    counter.start()
    assert counter.is_started() is True
    counter.add_rendered_frame()
    counter.stop()
    assert counter.is_started() is False
    assert counter.rendered == 0


def test_start_resets_counts():
    counter = FpsCounter()
    counter.add_rendered_frame()
    counter.add_skipped_frame()
    counter.start()
    assert (counter.rendered, counter.skipped) == (0, 0)


@pytest.mark.parametrize("count", [1, 5, 60])
def test_tick_matches_frames_added(count):
    counter = FpsCounter()
    counter.start()
    for _ in range(count):
        counter.add_rendered_frame()
    assert counter.tick() == count