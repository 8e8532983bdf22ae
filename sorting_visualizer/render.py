import pygame

from .colors import DEFAULT_GRADIENT, value_to_color
from .settings import (BACKGROUND_COLOR, GRID_CELL_SIZE, LABEL_COLOR,
                       WINDOW_HEIGHT, WINDOW_WIDTH, ZONE_LINE_COLOR)

# ============================================================
# ========================= LAYOUT ===========================
# ============================================================

BAR_LEFT      = 10 * GRID_CELL_SIZE     # x of the first bar
BAR_AREA_W    = WINDOW_WIDTH - 2 * BAR_LEFT
BAR_BASELINE  = 40 * GRID_CELL_SIZE     # y where bars stand
BAR_MAX_H     = 30 * GRID_CELL_SIZE     # height of the tallest bar
VALUE_SCALE   = 100                     # smallest value drawn at BAR_MAX_H
ZONE_LABELS   = ("Shuffle", "Insertion Sort", "Pancake Sort")


def value_scale(values) -> int:
    return max(VALUE_SCALE, max(values, default=0))


def bar_rects(values):
    """
    One (x, y, w, h) per value. Up to 100 bars of values up to 100 use
    the fixed grid; more or larger values shrink to fit the bar area.
    """
    values = list(values)
    cell   = min(GRID_CELL_SIZE, BAR_AREA_W / max(1, len(values)))
    scale  = value_scale(values)
    rects  = []
    for i, v in enumerate(values):
        h = v * BAR_MAX_H / scale
        rects.append((BAR_LEFT + i * cell, BAR_BASELINE - h, cell / 2, h))
    return rects


def build_font(size=18):
    for name in ("Consolas", "Courier New", "Lucida Console"):
        try: return pygame.font.SysFont(name, size)
        except (pygame.error, OSError): pass
    return pygame.font.Font(None, size)


def draw_zones(screen, font):
    third = WINDOW_WIDTH / 3
    for i, label in enumerate(ZONE_LABELS):
        if i:
            x = int(i * third)
            pygame.draw.line(screen, ZONE_LINE_COLOR, (x, 0), (x, WINDOW_HEIGHT), 1)
        t = font.render(label, True, LABEL_COLOR)
        screen.blit(t, t.get_rect(center=(int((i + 0.5) * third), WINDOW_HEIGHT - 40)))


def draw_bars(screen, session, font=None, gradient=DEFAULT_GRADIENT):
    screen.fill(BACKGROUND_COLOR)
    scale = value_scale(session.store)
    for v, rect in zip(session.store, bar_rects(session.store)):
        pygame.draw.rect(screen, value_to_color(v, gradient, max_value=scale), rect)
    if font is not None:
        label = f"{session.active_algorithm.display_name}  [{session.phase.value}]"
        screen.blit(font.render(label, True, LABEL_COLOR), (12, 10))
        draw_zones(screen, font)
