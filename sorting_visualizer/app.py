import argparse
import logging
import sys

import pygame

from .array_store import ArrayStore
from .clock import FrameClock
from .input_router import route_event
from .render import build_font, draw_bars
from .session import SortSession
from .settings import (RENDER_FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH,
                       configure_logging, load_settings)
from .strategies import Algorithm, run_to_completion

log = logging.getLogger(__name__)

_ALGORITHM_KEYS = {
    "insertion": Algorithm.INSERTION_SORT,
    "pancake":   Algorithm.PANCAKE_SORT,
}


def build_session(settings) -> SortSession:
    store = ArrayStore.identity(settings.array_size, seed=settings.seed)
    if settings.shuffle_on_start:
        store.shuffle()
    return SortSession(store)


def run_headless(settings, key: str) -> int:
    session = build_session(settings)
    algorithm = _ALGORITHM_KEYS[key]
    steps = run_to_completion(algorithm, session.store)
    log.info("%s sorted %d values in %d steps",
             algorithm.display_name, len(session.store), steps)
    return 0 if session.store.is_sorted() else 1


def run_window(settings) -> int:
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    font    = build_font()
    session = build_session(settings)
    ticker  = FrameClock(settings.target_fps, settings.max_ticks_per_frame)
    clock   = pygame.time.Clock()

    while True:
        clock.tick(RENDER_FPS)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT: return 0
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE: return 0
            cmd = route_event(ev, WINDOW_WIDTH)
            if cmd is not None:
                session.handle(cmd)
        session.advance_many(ticker.tick())
        draw_bars(screen, session, font)
        pygame.display.flip()


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="sorting-visualizer",
                                description="Watch insertion sort and pancake sort one step per frame.")
    p.add_argument("--config", help="settings JSON file (default: ./sorting_visualizer.json)")
    p.add_argument("--headless", choices=sorted(_ALGORITHM_KEYS),
                   help="sort once without a window and exit")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
    except ValueError as e:
        configure_logging()
        log.error("Invalid settings: %s", e)
        return 2
    configure_logging(settings.log_level)

    if args.headless:
        return run_headless(settings, args.headless)

    pygame.init()
    try:
        return run_window(settings)
    except pygame.error as e:
        log.error("Display failure: %s", e)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
