import pytest

from gridsnake.timer import Timer, TimerMode


def test_repeating_timer_fires_and_wraps():
    timer = Timer(0.25, TimerMode.REPEATING)
    assert not timer.tick(0.1).just_finished()
    assert timer.tick(0.2).just_finished()
    assert timer.elapsed == pytest.approx(0.05)
    assert not timer.tick(0.1).just_finished()


def test_repeating_timer_counts_multiple_finishes():
    timer = Timer(0.25, TimerMode.REPEATING)
    timer.tick(1.0)
    assert timer.times_finished_this_tick == 4
    assert timer.elapsed == pytest.approx(0.0)


def test_once_timer_finishes_only_once():
    timer = Timer(0.5)
    assert timer.tick(0.6).just_finished()
    assert timer.finished
    assert timer.elapsed == pytest.approx(timer.duration)
    assert not timer.tick(0.6).just_finished()
    assert timer.finished


def test_paused_timer_does_not_advance():
    timer = Timer(0.25, TimerMode.REPEATING)
    timer.pause()
    assert timer.paused
    assert not timer.tick(1.0).just_finished()
    assert timer.elapsed == 0.0
    timer.unpause()
    assert timer.tick(0.3).just_finished()


def test_reset_clears_progress():
    timer = Timer(1.0)
    timer.tick(1.5)
    timer.reset()
    assert timer.elapsed == 0.0
    assert not timer.finished
    assert not timer.just_finished()
    assert timer.tick(1.0).just_finished()


def test_set_duration_changes_deadline():
    timer = Timer(1.0, TimerMode.REPEATING)
    timer.set_duration(0.5)
    assert timer.duration == pytest.approx(0.5)
    assert timer.tick(0.5).just_finished()


def test_zero_duration_once_timer_fires_on_first_tick():
    timer = Timer()
    assert timer.tick(0.0).just_finished()
    assert not timer.tick(0.1).just_finished()


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        Timer(-1.0)
    timer = Timer(1.0)
    with pytest.raises(ValueError):
        timer.tick(-0.1)
    with pytest.raises(ValueError):
        timer.set_duration(-2.0)