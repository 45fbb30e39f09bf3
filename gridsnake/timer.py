"""A tick-driven timer that counts down a duration."""

from __future__ import annotations

from enum import Enum

_NANOS = 1_000_000_000


def _to_nanos(seconds: float, what: str) -> int:
    if seconds < 0:
        raise ValueError(f"{what} must not be negative, got {seconds}")
    return round(seconds * _NANOS)


class TimerMode(Enum):
    """Whether a timer stops after finishing or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Timer advanced by explicit ticks; times are in seconds."""

    def __init__(self, duration: float = 0.0, mode: TimerMode = TimerMode.ONCE) -> None:
        self._duration = _to_nanos(duration, "duration")
        self.mode = mode
        self._elapsed = 0
        self._paused = False
        self._finished = False
        self._times_finished_this_tick = 0

    @property
    def duration(self) -> float:
        return self._duration / _NANOS

    @property
    def elapsed(self) -> float:
        return self._elapsed / _NANOS

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def finished(self) -> bool:
        """True while the timer has reached its duration."""
        return self._finished

    @property
    def times_finished_this_tick(self) -> int:
        return self._times_finished_this_tick

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds and return it."""
        step = _to_nanos(delta, "delta")
        repeating = self.mode is TimerMode.REPEATING

        if self._paused:
            self._times_finished_this_tick = 0
            if repeating:
                self._finished = False
            return self

        if not repeating and self._finished:
            self._times_finished_this_tick = 0
            return self

        self._elapsed += step
        self._finished = self._elapsed >= self._duration

        if not self._finished:
            self._times_finished_this_tick = 0
        elif repeating:
            if self._duration == 0:
                self._times_finished_this_tick = 1
                self._elapsed = 0
            else:
                self._times_finished_this_tick, self._elapsed = divmod(
                    self._elapsed, self._duration
                )
        else:
            self._times_finished_this_tick = 1
            self._elapsed = self._duration
        return self

    def just_finished(self) -> bool:
        """True if the last tick made the timer finish."""
        return self._times_finished_this_tick > 0

    def pause(self) -> None:
        self._paused = True

    def unpause(self) -> None:
        self._paused = False

    def reset(self) -> None:
        """Clear elapsed time and the finished state."""
        self._elapsed = 0
        self._finished = False
        self._times_finished_this_tick = 0

    def set_duration(self, duration: float) -> None:
        self._duration = _to_nanos(duration, "duration")