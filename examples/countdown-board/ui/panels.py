"""Event list with badges, detail boxes, and the status bar."""
from __future__ import annotations

import pygame

from ouevents_countdown import CountdownWatch, is_past, is_unknown
from ui.constants import (
    ACCENT,
    BADGE_H,
    BADGE_W,
    BOX_BG,
    BOX_GAP,
    BOX_LINE,
    BOX_SIZE,
    BOX_TEXT,
    DETAIL_W,
    LIST_W,
    ROW_BG,
    ROW_BORDER,
    ROW_H,
    ROW_SELECTED,
    ROWS,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_event_list(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rows: list[tuple[str, CountdownWatch]],
    selected: int,
) -> None:
    """Draw one row per event with its compact countdown badge."""
    for i, (title, watch) in enumerate(rows[:ROWS]):
        y = i * ROW_H
        bg = ROW_SELECTED if i == selected else ROW_BG
        pygame.draw.rect(surface, bg, (0, y, LIST_W, ROW_H))
        pygame.draw.line(surface, ROW_BORDER, (0, y + ROW_H - 1), (LIST_W, y + ROW_H - 1))

        surface.blit(font.render(title[:26], True, TEXT_COLOR), (10, y + 14))

        badge = pygame.Rect(LIST_W - BADGE_W - 10, y + (ROW_H - BADGE_H) // 2, BADGE_W, BADGE_H)
        pygame.draw.rect(surface, ACCENT, badge, border_radius=BADGE_H // 2)
        text = font.render(watch.label, True, (255, 255, 255))
        surface.blit(text, text.get_rect(center=badge.center))


def draw_detail(
    surface: pygame.Surface,
    font: pygame.font.Font,
    big_font: pygame.font.Font,
    title: str,
    watch: CountdownWatch,
) -> None:
    """Draw the selected event's multi-box countdown."""
    x0 = LIST_W
    h = ROW_H * ROWS
    pygame.draw.line(surface, ROW_BORDER, (x0, 0), (x0, h))
    surface.blit(font.render(title, True, TEXT_COLOR), (x0 + 20, 20))

    if is_unknown(watch.state) or is_past(watch.state):
        # No units to show: text instead of the zero fallback window.
        text = big_font.render(watch.label, True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=(x0 + DETAIL_W // 2, h // 2)))
        return

    slots = watch.window
    total_w = len(slots) * BOX_SIZE + (len(slots) - 1) * BOX_GAP
    x = x0 + (DETAIL_W - total_w) // 2
    y = (h - BOX_SIZE) // 2
    for slot in slots:
        box = pygame.Rect(x, y, BOX_SIZE, BOX_SIZE)
        pygame.draw.rect(surface, BOX_BG, box, border_radius=12)
        pygame.draw.line(surface, BOX_LINE, (x + 12, y + 2), (x + BOX_SIZE - 12, y + 2), 3)
        value = big_font.render(str(slot.value), True, BOX_TEXT)
        surface.blit(value, value.get_rect(center=box.center))
        name = font.render(slot.label.upper(), True, TEXT_DIM)
        surface.blit(name, name.get_rect(midtop=(box.centerx, box.bottom + 6)))
        x += BOX_SIZE + BOX_GAP


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    now_text: str,
    tick_count: int,
) -> None:
    y = ROW_H * ROWS
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    text = f"{now_text}   ticks: {tick_count}   Up/Down: select   Esc: quit"
    surface.blit(font.render(text, True, TEXT_DIM), (10, y + 9))
