"""tick-timer - Deferred and looping callbacks for fixed-timestep loops."""
from __future__ import annotations

from tick_timer.clock import Clock, to_duration, to_ticks
from tick_timer.config import TimerConfig
from tick_timer.registry import TimerRegistry
from tick_timer.timer import Timer
from tick_timer.types import Callback, TimerState, TimeUnit

__all__ = [
    "TimerRegistry",
    "Timer",
    "TimerState",
    "TimerConfig",
    "Clock",
    "TimeUnit",
    "Callback",
    "to_ticks",
    "to_duration",
]
