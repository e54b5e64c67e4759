"""
Space Timer
Interactive tick-timer demo: a looping heartbeat plus one user-controlled timer.

Controls:
  Space   Start a 3 second timer / pause / resume it
  C       Cancel the user timer
  X       Clear every timer in the registry
  +/-     Double / halve the registry speed
  Esc     Quit
"""

import logging
import sys
from datetime import timedelta

import pygame

from tick_timer import Timer, TimerConfig, TimerRegistry

# --- Configuration ---
WIDTH, HEIGHT = 640, 360
TPS = 60
TITLE = "tick-timer Space Timer"
USER_TIMER = timedelta(seconds=3)
HEARTBEAT_TICKS = 60

BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
BAR_BG = (60, 60, 90)
BAR_RUNNING = (0, 255, 100)
BAR_PAUSED = (255, 160, 0)
PULSE_COLOR = (0, 255, 255)

logger = logging.getLogger("space-timer")


class DemoState:
    """Holds the registry and the user's timer handle."""

    def __init__(self) -> None:
        self.timers = TimerRegistry(TimerConfig(tps=TPS))
        self.space_timer: Timer | None = None
        self.pulse = 0
        self.messages: list[str] = []
        self.start_heartbeat()

    def say(self, text: str) -> None:
        logger.info(text)
        self.messages = (self.messages + [text])[-6:]

    def start_heartbeat(self) -> None:
        self.timers.every_ticks(HEARTBEAT_TICKS, self._on_heartbeat)

    def _on_heartbeat(self) -> None:
        self.pulse = 10

    def _on_elapsed(self) -> None:
        self.say("The timer has elapsed.")
        self.space_timer = None

    def toggle(self) -> None:
        timer = self.space_timer
        if timer is None:
            self.say("Starting 3 second timer.")
            self.space_timer = self.timers.after(USER_TIMER, self._on_elapsed)
        elif timer.is_running:
            left = timer.time_left()
            seconds = self.timers.clock.to_duration(left).total_seconds()
            self.say(f"Paused with {seconds:.2f} seconds / {left:.0f} ticks left.")
            timer.pause()
        elif timer.is_paused:
            self.say("The timer is now resumed.")
            timer.resume()

    def cancel(self) -> None:
        if self.space_timer is not None:
            self.space_timer.cancel()
            self.space_timer = None
            self.say("The timer has been canceled.")

    def clear(self) -> None:
        self.timers.clear()
        self.space_timer = None
        self.say("All timers canceled and removed.")
        self.start_heartbeat()

    def scale_speed(self, factor: float) -> None:
        speed = min(max(self.timers.speed * factor, 0.125), 8.0)
        self.timers.speed = speed
        self.say(f"Speed x{speed:g}")

    def step(self) -> None:
        self.timers.update()
        if self.pulse > 0:
            self.pulse -= 1


def draw(screen: pygame.Surface, font: pygame.font.Font, state: DemoState) -> None:
    screen.fill(BG_COLOR)

    # Progress bar for the user timer.
    bar = pygame.Rect(40, 60, WIDTH - 80, 24)
    pygame.draw.rect(screen, BAR_BG, bar)
    timer = state.space_timer
    if timer is not None and timer.duration > 0:
        left = max(timer.time_left() * state.timers.speed, 0)
        frac = 1.0 - left / timer.duration
        color = BAR_PAUSED if timer.is_paused else BAR_RUNNING
        pygame.draw.rect(screen, color, (bar.x, bar.y, int(bar.w * frac), bar.h))

    # Heartbeat pulse.
    if state.pulse > 0:
        pygame.draw.circle(screen, PULSE_COLOR, (WIDTH - 40, 24), 4 + state.pulse)

    hud_lines = [
        f"Tick: {state.timers.current_tick:g}   Timers: {len(state.timers)}   Speed: x{state.timers.speed:g}",
        "Space=Start/Pause/Resume  C=Cancel  X=Clear  +/-=Speed  Esc=Quit",
        "",
        *state.messages,
    ]
    for i, line in enumerate(hud_lines):
        surf = font.render(line, True, HUD_COLOR)
        screen.blit(surf, (10, 100 + i * 20))

    pygame.display.flip()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    state = DemoState()
    running = True

    while running:
        pg_clock.tick(TPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.toggle()
                elif event.key == pygame.K_c:
                    state.cancel()
                elif event.key == pygame.K_x:
                    state.clear()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.scale_speed(2.0)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.scale_speed(0.5)

        # One registry update per frame.
        state.step()
        draw(screen, font, state)

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
