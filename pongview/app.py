#!/usr/bin/env python3
"""Pong View - Desktop Entry Point.

Opens a pygame window and runs the view. A background scheduler posts one
FRAME_EVENT per frame, with at most one queued at a time; the main loop
handles frames and presses in arrival order, so state is only ever touched
from this thread.

Usage:
    python -m pongview
    python -m pongview --fps 30
    python -m pongview --width 720 --height 1280 --seed 7
"""

import argparse
import random
import sys
import threading

import pygame

from models import Resolution
from pongview import config
from pongview.config import PongSettings
from pongview.input import event_from_pygame
from pongview.logging import configure_logging, get_logger
from pongview.surface import PygameSurface
from pongview.view import PongView

log = get_logger('app')

FRAME_EVENT = pygame.USEREVENT + 1

# Set while a FRAME_EVENT is queued; further ticks are dropped until it is drawn
_frame_pending = threading.Event()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pong View - bouncing ball and paddle")

    # Display options
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')

    # Animation options
    parser.add_argument('--fps', type=int, default=config.FPS, help='Frames per second')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the ball launch velocity')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'OFF'],
                        help='Override PONG_LOG_LEVEL')
    return parser


def request_frame() -> None:
    """Ask the main loop to draw; called from the scheduler thread.

    Requests merge: if the main loop has not drawn the last requested frame
    yet, this tick is skipped, so a stalled loop resumes with one frame
    rather than a burst.
    """
    if _frame_pending.is_set():
        return
    _frame_pending.set()
    pygame.event.post(pygame.event.Event(FRAME_EVENT))


def run(view: PongView) -> None:
    """Dispatch pygame events to the view until the window closes."""
    running = True
    while running:
        event = pygame.event.wait()

        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            running = False
        elif event.type == FRAME_EVENT:
            _frame_pending.clear()
            view.on_draw()
            pygame.display.flip()
        else:
            press = event_from_pygame(event, (view.surface.width, view.surface.height))
            if press is not None:
                view.on_input(press)


def main(argv=None) -> int:
    """Run the pong view in a pygame window."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        settings = PongSettings(fps=args.fps)
        window = Resolution(width=args.width, height=args.height)
    except ValueError as e:
        log.error("%s", e)
        return 2

    pygame.init()
    pygame.font.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((window.width, window.height))
    pygame.display.set_caption("Pong")

    rng = random.Random(args.seed) if args.seed is not None else None
    view = PongView(PygameSurface(screen), settings=settings, rng=rng)
    log.info("Window %dx%d, ball velocity (%.2f, %.2f)",
             screen.get_width(), screen.get_height(),
             view.state.ball.dx, view.state.ball.dy)

    view.start(request_frame)
    try:
        run(view)
    finally:
        view.stop()
        pygame.quit()

    log.info("Final score: %d", view.score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
