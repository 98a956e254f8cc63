"""Countdown Board — event badges and a detailed countdown in pygame.

Exercises ouevents-ticker and ouevents-countdown. The frame loop polls one
shared TimeTicker; every event row holds a CountdownWatch on it.

Controls:
  Up/Down   Select event
  Esc       Quit

Run:
    python main.py
    python main.py --interval-ms 250 --include-past
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timedelta, timezone

import pygame

from ouevents_countdown import CountdownWatch, sort_events, upcoming_events
from ouevents_ticker import TickerConfig, TimeTicker
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, TICK_INTERVAL_MS
from ui.panels import draw_detail, draw_event_list, draw_status_bar


def sample_events(now: datetime) -> list[dict]:
    """Demo records shaped like the events API (eventDateTime, title, ...)."""
    def iso(delta: timedelta) -> str:
        return (now + delta).isoformat()

    return [
        {"title": "Welcome Back Concert", "eventDateTime": iso(timedelta(seconds=45))},
        {"title": "Career Fair", "eventDateTime": iso(timedelta(hours=5, minutes=20))},
        {"title": "Robotics Expo", "eventDateTime": iso(timedelta(days=3, hours=2))},
        {"title": "Hackathon", "eventDateTime": iso(timedelta(days=40))},
        {"title": "Graduation", "eventDateTime": iso(timedelta(days=420))},
        {"title": "Orientation", "eventDateTime": iso(timedelta(days=-2))},
        {"title": "Guest Lecture", "startDateTime": "TBA"},
    ]


class BoardState:
    """Holds the ticker and one watch per listed event."""

    def __init__(self, interval_ms: int, include_past: bool) -> None:
        self.ticker = TimeTicker(TickerConfig(interval_ms=interval_ms))
        now = datetime.now(tz=timezone.utc)

        records = sample_events(now)
        if not include_past:
            records = upcoming_events(records, now)
        records = sort_events(records, by="start")

        self.rows: list[tuple[str, CountdownWatch]] = []
        for record in records:
            target = record.get("eventDateTime") or record.get("startDateTime")
            watch = CountdownWatch(self.ticker, target)
            watch.attach()
            self.rows.append((record["title"], watch))
        self.selected = 0

    def move(self, step: int) -> None:
        if self.rows:
            self.selected = (self.selected + step) % len(self.rows)

    def close(self) -> None:
        for _, watch in self.rows:
            watch.detach()


def main() -> None:
    parser = argparse.ArgumentParser(description="Countdown Board — ouevents demo")
    parser.add_argument("--interval-ms", type=int, default=TICK_INTERVAL_MS)
    parser.add_argument(
        "--include-past", action="store_true",
        help="Also list events that already started or have no valid time",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Countdown Board — ouevents demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 36, bold=True)

    state = BoardState(args.interval_ms, args.include_past)
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_UP:
                    state.move(-1)
                elif event.key == pygame.K_DOWN:
                    state.move(1)

        # --- Tick ---
        state.ticker.poll()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_event_list(screen, font, state.rows, state.selected)
        if state.rows:
            title, watch = state.rows[state.selected]
            draw_detail(screen, font, big_font, title, watch)
            now_text = state.ticker.now.strftime("%Y-%m-%d %H:%M:%S UTC")
        else:
            now_text = "no events"
        draw_status_bar(screen, font, now_text, state.ticker.tick_count)

        pygame.display.flip()

    state.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
