"""Timer - one scheduled callback and its lifecycle state."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tick_timer.types import Callback, TimerState, TimeUnit

if TYPE_CHECKING:
    from tick_timer.registry import TimerRegistry

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Timer:
    """A callback that fires once `duration` ticks have elapsed since `start_tick`.

    Timers are created by TimerRegistry.after_ticks / after and compare by
    identity. `registry` is the owner used for control calls; the registry
    holds the timer, not the other way round.
    """

    id: int
    start_tick: TimeUnit
    duration: TimeUnit
    on_execute: Callback
    loop: bool = False
    state: TimerState = TimerState.RUNNING
    registry: TimerRegistry = field(repr=False, kw_only=True)

    @property
    def is_running(self) -> bool:
        return self.state == TimerState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.state == TimerState.PAUSED

    @property
    def is_active(self) -> bool:
        """True while the timer is still attached to its registry."""
        return self.state in (TimerState.RUNNING, TimerState.PAUSED)

    def cancel(self) -> None:
        """Cancel and detach the timer. No-op once finished or canceled."""
        if self.state in (TimerState.FINISHED, TimerState.CANCELED):
            return
        self.state = TimerState.CANCELED
        self.registry._remove(self)
        logger.debug("timer %d canceled at tick %s", self.id, self.registry.current_tick)

    def pause(self) -> None:
        if self.state == TimerState.RUNNING:
            self.state = TimerState.PAUSED

    def resume(self) -> None:
        if self.state == TimerState.PAUSED:
            self.state = TimerState.RUNNING

    def time_left(self) -> TimeUnit:
        """Ticks remaining until due, scaled by the registry's speed.

        Zero or negative once the timer is due but not yet processed.
        """
        remaining = (self.duration + self.start_tick) - self.registry.current_tick
        speed = self.registry.speed
        if speed == 1:
            return remaining
        return remaining / speed

    def set_duration(self, duration: TimeUnit) -> None:
        self.duration = duration

    def restart(self) -> None:
        # A paused timer stays paused with its full duration left.
        self.start_tick = self.registry.current_tick
