"""TimerRegistry - owns timers and advances them once per tick."""
from __future__ import annotations

import logging
from datetime import timedelta

from tick_timer.clock import Clock
from tick_timer.config import TimerConfig
from tick_timer.timer import Timer
from tick_timer.types import Callback, TimerState, TimeUnit

logger = logging.getLogger(__name__)


class TimerRegistry:
    """Registers timers and fires the due ones on each update().

    All calls, including those made from inside a firing callback, must
    come from the thread that drives the host loop.
    """

    def __init__(self, config: TimerConfig | None = None) -> None:
        self.config: TimerConfig = config if config is not None else TimerConfig()
        self._clock = Clock(tps=self.config.tps, speed=self.config.speed)
        self._timers: dict[int, Timer] = {}
        self._next_id: int = 0

    # --- Clock ---

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def current_tick(self) -> TimeUnit:
        return self._clock.tick_number

    @property
    def tps(self) -> int:
        return self._clock.tps

    @tps.setter
    def tps(self, value: int) -> None:
        self._clock.tps = value

    @property
    def speed(self) -> float:
        return self._clock.speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._clock.speed = value

    # --- Registration ---

    def after_ticks(
        self, tick_count: TimeUnit, on_execute: Callback, loop: bool = False
    ) -> Timer:
        """Fire `on_execute` once `tick_count` ticks have elapsed from now."""
        if not callable(on_execute):
            raise TypeError("on_execute must be callable")
        timer = Timer(
            id=self._next_id,
            start_tick=self.current_tick,
            duration=tick_count,
            on_execute=on_execute,
            loop=loop,
            registry=self,
        )
        self._next_id += 1
        self._timers[timer.id] = timer
        logger.debug(
            "timer %d registered at tick %s for %s ticks (loop=%s)",
            timer.id, timer.start_tick, tick_count, loop,
        )
        return timer

    def after(
        self, duration: timedelta | float, on_execute: Callback, loop: bool = False
    ) -> Timer:
        """Fire `on_execute` after a wall-clock duration (timedelta or seconds).

        The duration is converted at the current tps and truncated to whole
        ticks, so anything shorter than one tick fires on the next update.
        """
        return self.after_ticks(self._clock.to_ticks(duration), on_execute, loop=loop)

    def every_ticks(self, tick_count: TimeUnit, on_execute: Callback) -> Timer:
        return self.after_ticks(tick_count, on_execute, loop=True)

    def every(self, duration: timedelta | float, on_execute: Callback) -> Timer:
        return self.after(duration, on_execute, loop=True)

    # --- Queries ---

    @property
    def timers(self) -> list[Timer]:
        """Live (running or paused) timers in registration order."""
        return list(self._timers.values())

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, timer: object) -> bool:
        if not isinstance(timer, Timer):
            return False
        return self._timers.get(timer.id) is timer

    # --- Update ---

    def update(self) -> None:
        """Advance the clock one step, then evaluate every live timer once.

        A timer registered for N ticks fires on the Nth update after it was
        registered, and a callback sees current_tick as the tick being
        processed. Iterates over a snapshot, so callbacks may register,
        cancel or clear timers freely; timers registered during the pass are
        first evaluated on the next call. Exceptions from callbacks propagate
        and abort the rest of the pass.
        """
        # Callbacks may change speed mid-pass; paused timers drift by the
        # step the clock actually took.
        step = self._clock.speed
        self._clock.advance()
        for timer in list(self._timers.values()):
            if timer.state == TimerState.PAUSED:
                timer.start_tick += step
            elif (
                timer.state == TimerState.RUNNING
                and self.current_tick - timer.start_tick >= timer.duration
            ):
                self._fire(timer)

    def _fire(self, timer: Timer) -> None:
        logger.debug("timer %d fired at tick %s", timer.id, self.current_tick)
        timer.on_execute()

        # The callback canceled it or cleared the registry.
        if timer not in self:
            return

        if timer.loop:
            timer.start_tick = self.current_tick
        else:
            timer.state = TimerState.FINISHED
            self._remove(timer)
            logger.debug("timer %d finished", timer.id)

    def clear(self) -> None:
        """Cancel and drop every live timer. Safe to call from a callback."""
        for timer in self._timers.values():
            if timer.state != TimerState.FINISHED:
                timer.state = TimerState.CANCELED
        count = len(self._timers)
        self._timers = {}
        logger.debug("cleared %d timers at tick %s", count, self.current_tick)

    def _remove(self, timer: Timer) -> None:
        if self._timers.get(timer.id) is timer:
            del self._timers[timer.id]
