"""Tests for Clock advancement and tick/duration conversion."""

import math
from datetime import timedelta

import pytest
from tick_timer.clock import Clock, to_duration, to_ticks


def test_clock_initialization():
    """Test clock initializes with default TPS, speed and tick 0."""
    clock = Clock()
    assert clock.tps == 60
    assert clock.speed == 1
    assert clock.tick_number == 0


def test_clock_initialization_custom():
    clock = Clock(tps=20, speed=2)
    assert clock.tps == 20
    assert clock.speed == 2


def test_advance_increments_tick_number():
    """Test advance() increments by one tick at default speed."""
    clock = Clock()
    assert clock.advance() == 1
    assert clock.tick_number == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_advance_stays_integral_at_default_speed():
    clock = Clock()
    for _ in range(10):
        clock.advance()
    assert clock.tick_number == 10
    assert isinstance(clock.tick_number, int)


def test_advance_uses_speed():
    clock = Clock(speed=0.5)
    clock.advance()
    clock.advance()
    clock.advance()
    assert clock.tick_number == pytest.approx(1.5)


def test_multiple_advances_monotonic():
    clock = Clock()
    prev = 0
    for _ in range(100):
        current = clock.advance()
        assert current == prev + 1
        prev = current


def test_clock_cannot_be_rewound():
    """tick_number only moves forward through advance()."""
    clock = Clock(tps=30)
    for _ in range(10):
        clock.advance()
    assert not hasattr(clock, "reset")
    with pytest.raises(AttributeError):
        clock.tick_number = 0  # type: ignore[misc]
    assert clock.tick_number == 10


@pytest.mark.parametrize("tps", [0, -1, 1.5, True])
def test_invalid_tps_rejected(tps):
    with pytest.raises(ValueError):
        Clock(tps=tps)


@pytest.mark.parametrize("speed", [0, -1, -0.5, math.inf, math.nan])
def test_invalid_speed_rejected(speed):
    with pytest.raises(ValueError):
        Clock(speed=speed)


def test_speed_setter_validates():
    clock = Clock()
    clock.speed = 3
    assert clock.speed == 3
    with pytest.raises(ValueError):
        clock.speed = 0
    with pytest.raises(ValueError):
        clock.speed = -2
    # Rejected values leave the previous speed in place.
    assert clock.speed == 3


def test_tps_setter_validates():
    clock = Clock(tps=60)
    clock.tps = 30
    assert clock.tps == 30
    with pytest.raises(ValueError):
        clock.tps = 0
    assert clock.tps == 30


# --- Conversion ---

def test_to_ticks_whole_seconds():
    assert to_ticks(timedelta(seconds=3), 60) == 180
    assert to_ticks(2, 20) == 40


def test_to_ticks_truncates_fraction():
    """20ms at 60 TPS is 1.2 ticks -> 1 tick."""
    assert to_ticks(timedelta(milliseconds=20), 60) == 1


def test_to_ticks_under_one_tick_is_zero():
    """16ms at 60 TPS is under one tick (16.67ms) -> 0 ticks."""
    assert to_ticks(timedelta(milliseconds=16), 60) == 0
    assert to_ticks(0, 60) == 0


def test_to_ticks_exactly_one_tick():
    assert to_ticks(timedelta(milliseconds=50), 20) == 1
    assert to_ticks(0.1, 10) == 1


def test_to_ticks_accepts_float_seconds():
    assert to_ticks(1.5, 10) == 15
    assert to_ticks(0.25, 60) == 15


@pytest.mark.parametrize(
    "ms, tps, expected",
    [(290, 100, 29), (570, 100, 57), (4100, 30, 123), (2050, 60, 123), (4100, 60, 246)],
)
def test_to_ticks_exact_for_whole_tick_durations(ms, tps, expected):
    """Durations that land exactly on a tick boundary keep that tick."""
    assert to_ticks(timedelta(milliseconds=ms), tps) == expected
    assert to_ticks(ms / 1000, tps) == expected


@pytest.mark.parametrize("tps", [20, 30, 60, 100, 144])
def test_to_ticks_matches_integer_floor(tps):
    for ms in range(0, 5000, 10):
        assert to_ticks(timedelta(milliseconds=ms), tps) == ms * tps // 1000


def test_to_ticks_negative_timedelta_truncates_toward_zero():
    assert to_ticks(timedelta(milliseconds=-290), 100) == -29
    assert to_ticks(timedelta(milliseconds=-5), 100) == 0


def test_to_ticks_returns_int():
    assert isinstance(to_ticks(timedelta(seconds=1.9), 10), int)


def test_to_ticks_negative_truncates_toward_zero():
    assert to_ticks(-0.05, 10) == 0
    assert to_ticks(-0.15, 10) == -1


def test_to_duration():
    assert to_duration(60, 60) == timedelta(seconds=1)
    assert to_duration(30, 20) == timedelta(seconds=1.5)
    assert to_duration(0, 60) == timedelta(0)


def test_conversion_rejects_bad_tps():
    with pytest.raises(ValueError):
        to_ticks(1, 0)
    with pytest.raises(ValueError):
        to_duration(1, -5)


def test_clock_conversion_uses_current_tps():
    clock = Clock(tps=60)
    assert clock.to_ticks(timedelta(seconds=1)) == 60
    clock.tps = 30
    assert clock.to_ticks(timedelta(seconds=1)) == 30
    assert clock.to_duration(15) == timedelta(seconds=0.5)
