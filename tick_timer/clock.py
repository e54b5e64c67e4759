"""Clock and tick/duration conversion for the timer registry."""

from __future__ import annotations

import math
from datetime import timedelta
from fractions import Fraction

from tick_timer.types import TimeUnit


def validate_tps(tps: int) -> None:
    if isinstance(tps, bool) or not isinstance(tps, int) or tps <= 0:
        raise ValueError("tps must be a positive integer")


def validate_speed(speed: float) -> None:
    if isinstance(speed, bool) or not math.isfinite(speed) or speed <= 0:
        raise ValueError("speed must be a finite number greater than 0")


def to_ticks(duration: timedelta | float, tps: int) -> int:
    """Convert a wall-clock duration to whole ticks at `tps`.

    Fractional ticks are truncated toward zero, so anything shorter than
    one tick converts to 0 and fires on the next update. The product is
    computed exactly: a timedelta by its integer microseconds, a float by
    its shortest decimal form, so 0.29 s at 100 tps is 29 ticks, not 28.
    """
    validate_tps(tps)
    if isinstance(duration, timedelta):
        seconds = Fraction(duration // timedelta(microseconds=1), 1_000_000)
    elif isinstance(duration, float):
        seconds = Fraction(repr(duration))
    else:
        seconds = Fraction(duration)
    return math.trunc(seconds * tps)


def to_duration(ticks: TimeUnit, tps: int) -> timedelta:
    """Convert a tick count to a wall-clock duration at `tps`."""
    validate_tps(tps)
    return timedelta(seconds=ticks / tps)


class Clock:
    def __init__(self, tps: int = 60, speed: float = 1) -> None:
        validate_tps(tps)
        validate_speed(speed)
        self._tps = tps
        self._speed = speed
        self._tick_number: TimeUnit = 0

    @property
    def tps(self) -> int:
        return self._tps

    @tps.setter
    def tps(self, value: int) -> None:
        # Timers already scheduled from wall-clock durations keep their
        # tick counts and drift relative to the new rate.
        validate_tps(value)
        self._tps = value

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        validate_speed(value)
        self._speed = value

    @property
    def tick_number(self) -> TimeUnit:
        return self._tick_number

    def advance(self) -> TimeUnit:
        self._tick_number += self._speed
        return self._tick_number

    def to_ticks(self, duration: timedelta | float) -> int:
        return to_ticks(duration, self._tps)

    def to_duration(self, ticks: TimeUnit) -> timedelta:
        return to_duration(ticks, self._tps)
