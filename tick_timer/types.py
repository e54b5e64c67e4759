"""Shared type aliases and enums for tick-timer."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

# A count of ticks. Used both as an absolute tick stamp and as a duration,
# depending on context. Fractional only when the clock runs at a
# non-integral speed.
TimeUnit = float

Callback = Callable[[], None]


class TimerState(IntEnum):
    RUNNING = 0
    CANCELED = 1
    PAUSED = 2
    FINISHED = 3
