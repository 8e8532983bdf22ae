from __future__ import annotations

import pygame

from sorting_visualizer.array_store import ArrayStore
from sorting_visualizer.colors import value_to_color
from sorting_visualizer.render import bar_rects, draw_bars
from sorting_visualizer.session import SortSession
from sorting_visualizer.settings import MAX_ARRAY_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH


def test_bar_geometry():
    rects = bar_rects([100, 50])
    assert rects[0] == (100, 100, 5, 300)
    assert rects[1] == (110, 250, 5, 150)


def test_draw_bars_paints_gradient():
    screen = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    session = SortSession(ArrayStore([100, 50]))
    draw_bars(screen, session)
    assert tuple(screen.get_at((101, 399)))[:3] == value_to_color(100)[:3]
    assert tuple(screen.get_at((111, 399)))[:3] == value_to_color(50)[:3]
    assert tuple(screen.get_at((111, 200)))[:3] == (0, 0, 0)


def test_large_arrays_stay_on_screen():
    values = list(range(1, 201))
    rects = bar_rects(values)
    assert len(rects) == 200
    for x, y, w, h in rects:
        assert 0 <= x and x + w <= WINDOW_WIDTH
        assert 0 <= y and y + h <= WINDOW_HEIGHT
    # the tallest bar keeps the full height, the rest scale with it
    assert rects[-1][3] == 300
    assert rects[99][3] == 150


def test_max_array_size_fits():
    rects = bar_rects(range(1, MAX_ARRAY_SIZE + 1))
    x, y, w, h = rects[-1]
    assert x + w <= WINDOW_WIDTH
    assert w >= 1


def test_values_above_100_use_the_gradient():
    screen = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    session = SortSession(ArrayStore([200, 100]))
    draw_bars(screen, session)
    assert tuple(screen.get_at((101, 101)))[:3] == value_to_color(200, max_value=200)[:3]
    assert tuple(screen.get_at((101, 101)))[:3] != (255, 255, 255)
