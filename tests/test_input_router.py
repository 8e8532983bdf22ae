from __future__ import annotations

import pygame

from sorting_visualizer.input_router import Command, route_click, route_event

WIDTH = 1200


def test_zones():
    assert route_click(0, WIDTH) is Command.SHUFFLE
    assert route_click(400, WIDTH) is Command.SHUFFLE
    assert route_click(401, WIDTH) is Command.SELECT_INSERTION_SORT
    assert route_click(799, WIDTH) is Command.SELECT_INSERTION_SORT
    assert route_click(800, WIDTH) is Command.SELECT_PANCAKE_SORT
    assert route_click(1199, WIDTH) is Command.SELECT_PANCAKE_SORT


def test_left_click_event():
    ev = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(900, 10))
    assert route_event(ev, WIDTH) is Command.SELECT_PANCAKE_SORT


def test_other_events_ignored():
    right = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10))
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(10, 10))
    assert route_event(right, WIDTH) is None
    assert route_event(up, WIDTH) is None
