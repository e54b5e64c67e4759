"""Hello Timers -- the simplest possible tick-timer program.

Demonstrates:
- Creating a registry with a fixed tick rate
- One-shot, looping and wall-clock timers
- Pausing, resuming and canceling from inside callbacks
- Driving the registry with one update() per tick

Run: python -m examples.basics
"""

from datetime import timedelta

from tick_timer import Timer, TimerConfig, TimerRegistry


def main() -> None:
    print("=== Hello Timers ===\n")

    # A registry for a loop running at 10 ticks per second.
    timers = TimerRegistry(TimerConfig(tps=10))

    # Fires once, 3 ticks from now.
    timers.after_ticks(3, lambda: print(f"  tick {timers.current_tick}: one-shot fired"))

    # Fires every 4 ticks until canceled.
    beat = timers.every_ticks(4, lambda: print(f"  tick {timers.current_tick}: beat"))

    # Wall-clock durations are converted to ticks at the registry's tps.
    slow: Timer = timers.after(
        timedelta(seconds=1.5),
        lambda: print(f"  tick {timers.current_tick}: 1.5s timer fired"),
    )

    # Callbacks may control other timers. Pause the slow timer at tick 5,
    # resume it at tick 9: it fires 4 ticks later than scheduled.
    timers.after_ticks(5, slow.pause)
    timers.after_ticks(9, slow.resume)

    # Stop the beat at tick 16.
    timers.after_ticks(16, beat.cancel)

    for _ in range(20):
        timers.update()

    print(f"\nDone at tick {timers.current_tick}, {len(timers)} timers left.")


if __name__ == "__main__":
    main()
