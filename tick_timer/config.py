"""Timer registry configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_timer.clock import validate_speed, validate_tps


@dataclass(frozen=True)
class TimerConfig:
    """Immutable startup configuration for a TimerRegistry.

    Attributes:
        tps: Ticks per second of the host loop. Only used to convert
            wall-clock durations to ticks.
        speed: Ticks the registry clock advances per update. Must be > 0.
    """

    tps: int = 60
    speed: float = 1

    def __post_init__(self) -> None:
        validate_tps(self.tps)
        validate_speed(self.speed)
