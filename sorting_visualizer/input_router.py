import enum

import pygame


class Command(enum.Enum):
    SHUFFLE               = "Shuffle!"
    SELECT_INSERTION_SORT = "Insertion Sort!"
    SELECT_PANCAKE_SORT   = "Pancake Sort!"


LEFT_BUTTON = 1


def route_click(x: float, screen_width: float) -> Command:
    """Map a click's x position to a command: left, middle or right third."""
    third = screen_width / 3
    if x <= third:
        return Command.SHUFFLE
    if x < 2 * third:
        return Command.SELECT_INSERTION_SORT
    return Command.SELECT_PANCAKE_SORT


def route_event(ev, screen_width: float):
    if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == LEFT_BUTTON:
        return route_click(ev.pos[0], screen_width)
    return None
